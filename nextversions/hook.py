"""Hook slots and how they are called

Hooks are user functions grouped by where they apply. Each group has a
fixed set of slots. A slot without a function holds None.

Hooks may be plain functions or coroutine functions; results which
are awaitable are awaited.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from nextversions import template
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc
import inspect

#: Hook groups and their slots
GROUPS = PKDict(
    hooks=("validate_environment", "post_deploy"),
    cloudbuild_hooks=("before_deploy", "before_service_deploy", "after_deploy"),
    shell_utils_hooks=("validate_environment", "before_deploy", "after_deploy"),
    dockerfile_hooks=(
        "additional_stages",
        "after_deps",
        "before_build",
        "additional_build_args",
        "additional_env",
        "before_copy",
        "additional_copy",
    ),
    next_config_hooks=("configure_next_config",),
)


async def call(func, *args):
    """Call `func` if it is set and await its result if necessary

    Args:
        func (callable): hook or None
        args (tuple): passed to `func`
    Returns:
        object: result or None if `func` is None
    """
    if func is None:
        return None
    rv = func(*args)
    if inspect.isawaitable(rv):
        rv = await rv
    return rv


def context(project_id, version, region, repository):
    """Passed to every hook which generates content"""
    return PKDict(
        project_id=project_id,
        version=version,
        region=region,
        repository=repository,
    )


async def replacements(group, hooks, ctx, comment="#"):
    """Call every slot in `group` and map its marker to the result

    A list or tuple result is joined with newlines.

    Args:
        group (str): key in `GROUPS`
        hooks (dict): slot to function (may be None or partial)
        ctx (PKDict): from `context`
        comment (str): line comment of the template
    Returns:
        PKDict: marker to content
    """
    h = slots(group, hooks)
    rv = PKDict()
    for n in GROUPS[group]:
        c = await call(h[n], ctx)
        if isinstance(c, (list, tuple)):
            c = "\n".join(c)
        pkdc("group={} slot={} content={}", group, n, c)
        rv[template.marker(n, comment)] = c or ""
    return rv


def slots(group, hooks=None):
    """Complete slots for `group` with None for the absent ones

    Args:
        group (str): key in `GROUPS`
        hooks (dict): user functions by slot name
    Returns:
        PKDict: every slot of `group`
    """
    n = GROUPS[group]
    rv = PKDict({k: None for k in n})
    for k, v in (hooks or {}).items():
        if k not in n:
            raise AssertionError(f"unknown hook={k} in group={group} valid={n}")
        if v is not None and not callable(v):
            raise AssertionError(f"hook={k} in group={group} is not callable")
        rv[k] = v
    return rv
