"""test nextversions.shell_utils and nextversions.service_account

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

_ARGS = ("test-project", "feature-x", "us-central1", "repo")


def test_service_account_setup():
    from nextversions import shell_utils
    from pykern import pkunit
    import asyncio

    x = asyncio.run(shell_utils.generate(*_ARGS))
    pkunit.pkok(x.startswith("#!/bin/bash\n"), "no shebang={}", x)
    pkunit.pkok(
        '# [HOOK: setup_service_account]\n    local sa_id="feature-x-sa"\n' in x,
        "setup not inserted={}",
        x,
    )
    for e in (
        'gcloud iam service-accounts describe "feature-x-sa@test-project.iam.gserviceaccount.com" >/dev/null 2>&1',
        'gcloud iam service-accounts create "feature-x-sa"',
        "sleep 10",
        "gcloud projects add-iam-policy-binding test-project",
        '--role="roles/secretmanager.secretAccessor"',
    ):
        pkunit.pkok(e in x, "missing={} in={}", e, x)


def test_hooks():
    from nextversions import shell_utils
    from pykern import pkunit
    import asyncio

    async def _after(ctx):
        return f'    echo "deployed {ctx.version} to {ctx.region}"'

    x = asyncio.run(
        shell_utils.generate(
            *_ARGS,
            hooks={
                "validate_environment": lambda ctx: '    [[ -n "$API_KEY" ]] || return 1',
                "after_deploy": _after,
            },
        ),
    )
    pkunit.pkok(
        '# [HOOK: validate_environment]\n    [[ -n "$API_KEY" ]] || return 1\n' in x,
        "validate hook missing={}",
        x,
    )
    pkunit.pkok(
        '# [HOOK: after_deploy]\n    echo "deployed feature-x to us-central1"\n' in x,
        "after hook missing={}",
        x,
    )
    pkunit.pkok("# [HOOK: before_deploy]\n    gcloud run deploy" in x, "changed={}", x)


def test_missing_parameter():
    from nextversions import shell_utils
    from pykern import pkunit
    import asyncio

    with pkunit.pkexcept("project_id is required"):
        asyncio.run(shell_utils.generate("", "v", "us-central1", "repo"))


def test_commands():
    from nextversions import service_account
    from pykern import pkunit

    pkunit.pkeq(
        'gcloud iam service-accounts describe "a@b" >/dev/null 2>&1',
        service_account.validate_command("a@b"),
    )
    pkunit.pkre(
        r'create "abc-sa" \\\n\s+--display-name="Service Account for abc"$',
        service_account.create_command("abc-sa", "Service Account for abc"),
    )
    pkunit.pkre(
        r'binding p \\\n\s+--member="serviceAccount:a@b" \\\n\s+--role="roles/x"$',
        service_account.grant_role_command("p", "a@b", "roles/x"),
    )


def test_script_roles():
    from nextversions import service_account
    from pykern import pkunit

    x = service_account.script("p", "Abc", roles=("roles/a", "roles/b"))
    pkunit.pkeq(2, x.count("add-iam-policy-binding"))
    pkunit.pkok('--role="roles/b"' in x, "missing role={}", x)
    pkunit.pkok(x.endswith('echo "✓ All roles granted"'), "no final echo={}", x)
