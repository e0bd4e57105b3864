"""test nextversions.config

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""


def test_defaults():
    from nextversions import config, hook
    from pykern import pkunit

    with pkunit.save_chdir_work():
        c = config.load()
    pkunit.pkeq("us-central1", c.region)
    pkunit.pkeq("cloud-run-source-deploy", c.repository)
    pkunit.pkeq({}, c.next_config)
    for g, s in hook.GROUPS.items():
        pkunit.pkeq(list(s), list(c[g].keys()))
        pkunit.pkok(all(v is None for v in c[g].values()), "group={} not empty", g)


def test_user_file():
    from nextversions import config
    from pykern import pkio, pkunit

    with pkunit.save_chdir_work():
        pkio.write_text(
            "nextversions_config.py",
            """
region = "us-east1"
next_config = {"images": {"unoptimized": True}}

def _notify(version, url):
    pass

hooks = {"post_deploy": _notify}
dockerfile_hooks = {"additional_env": lambda ctx: "ENV A=1"}
""",
        )
        c = config.load()
    pkunit.pkeq("us-east1", c.region)
    pkunit.pkeq("cloud-run-source-deploy", c.repository)
    pkunit.pkeq({"unoptimized": True}, c.next_config.images)
    pkunit.pkeq("_notify", c.hooks.post_deploy.__name__)
    pkunit.pkeq(None, c.hooks.validate_environment)
    pkunit.pkeq("ENV A=1", c.dockerfile_hooks.additional_env(None))
    pkunit.pkeq(None, c.dockerfile_hooks.before_copy)
    pkunit.pkeq(None, c.cloudbuild_hooks.after_deploy)


def test_unknown_hook():
    from nextversions import config
    from pykern import pkio, pkunit

    with pkunit.save_chdir_work():
        pkio.write_text(
            "other_config.py",
            'cloudbuild_hooks = {"afterDeploy": lambda ctx: ""}\n',
        )
        with pkunit.pkexcept("AssertionError.*unknown hook=afterDeploy"):
            config.load("other_config.py")
