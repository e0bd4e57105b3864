"""test nextversions.hook

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""


def test_slots():
    from nextversions import hook
    from pykern import pkunit

    s = hook.slots("hooks")
    pkunit.pkeq(["validate_environment", "post_deploy"], list(s.keys()))
    pkunit.pkeq(None, s.post_deploy)
    f = lambda v, u: None
    pkunit.pkeq(f, hook.slots("hooks", {"post_deploy": f}).post_deploy)
    with pkunit.pkexcept("AssertionError.*unknown hook=postDeploy"):
        hook.slots("hooks", {"postDeploy": f})
    with pkunit.pkexcept("AssertionError.*additional_env.*not callable"):
        hook.slots("dockerfile_hooks", {"additional_env": "ENV A=1"})


def test_call():
    from nextversions import hook
    from pykern import pkunit
    import asyncio

    async def _async(x):
        await asyncio.sleep(0)
        return x + 1

    pkunit.pkeq(None, asyncio.run(hook.call(None, 1)))
    pkunit.pkeq(2, asyncio.run(hook.call(lambda x: x + 1, 1)))
    pkunit.pkeq(2, asyncio.run(hook.call(_async, 1)))


def test_replacements():
    from nextversions import hook
    from pykern import pkunit
    import asyncio

    c = hook.context("p", "v", "r", "repo")
    r = asyncio.run(
        hook.replacements(
            "dockerfile_hooks",
            {
                "additional_env": lambda ctx: ["ENV A=1", f"ENV V={ctx.version}"],
                "before_copy": lambda ctx: None,
            },
            c,
        ),
    )
    pkunit.pkeq("ENV A=1\nENV V=v", r["# [HOOK: additional_env]"])
    pkunit.pkeq("", r["# [HOOK: before_copy]"])
    pkunit.pkeq(7, len(r))
