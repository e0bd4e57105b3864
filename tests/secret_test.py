"""test nextversions.secret

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""


def test_name():
    from nextversions import secret
    from pykern import pkunit

    pkunit.pkeq("APP_CONFIG_FEATURE-X", secret.name("feature-x"))


def test_get(executor, gcloud):
    from nextversions import secret
    from pykern import pkunit
    import asyncio

    executor.add("secrets describe", '{"name": "projects/1/secrets/APP_CONFIG_V"}')
    executor.add("secrets versions access", '{"apiKey": "k", "n": 1}')
    pkunit.pkeq(
        {"apiKey": "k", "n": 1},
        asyncio.run(secret.get(gcloud, "p", "APP_CONFIG_V")),
    )
    pkunit.pkeq(
        "gcloud secrets versions access latest --secret=APP_CONFIG_V --project=p",
        executor.calls[-1],
    )


def test_get_missing(executor, gcloud):
    from nextversions import secret, error
    from pykern import pkunit
    import asyncio

    executor.add(
        "secrets describe",
        error.CommandFailed(["gcloud"], 1, "ERROR: NOT_FOUND: Secret [APP_CONFIG_V] not found"),
    )
    with pkunit.pkexcept(error.SecretNotFound):
        asyncio.run(secret.get(gcloud, "p", "APP_CONFIG_V"))
    pkunit.pkeq(0, executor.count("versions access"))


def test_get_invalid(executor, gcloud):
    from nextversions import secret, error
    from pykern import pkunit
    import asyncio

    executor.add("secrets describe", '{"name": "projects/1/secrets/APP_CONFIG_V"}')
    executor.add("secrets versions access", "API_KEY=k")
    with pkunit.pkexcept(error.InvalidSecret):
        asyncio.run(secret.get(gcloud, "p", "APP_CONFIG_V"))


def test_setup(executor, gcloud):
    from nextversions import secret
    from pykern import pkunit

    executor.add("--format=value(projectNumber)", "123")
    executor.add(
        "projects get-iam-policy",
        '{"bindings": []}',
        '{"bindings": [{"role": "roles/secretmanager.secretAccessor", "members": ["serviceAccount:123-compute@developer.gserviceaccount.com"]}]}',
    )
    secret.setup(gcloud, "p")
    secret.setup(gcloud, "p")
    pkunit.pkeq(2, executor.count("services enable secretmanager.googleapis.com"))
    pkunit.pkeq(1, executor.count("projects add-iam-policy-binding"))
    pkunit.pkre(
        "--member=serviceAccount:123-compute@developer.gserviceaccount.com --role=roles/secretmanager.secretAccessor",
        [c for c in executor.calls if "add-iam-policy-binding" in c][0],
    )
