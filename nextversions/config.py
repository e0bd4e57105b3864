"""Load the deployment configuration

Defaults are `pykern.pkconfig` values, e.g. ``NEXTVERSIONS_CONFIG_REGION``.
A ``nextversions_config.py`` in the current directory overrides them.
It is plain Python; module attributes with these names are used::

    region = "us-east1"
    repository = "my-repo"
    next_config = {"images": {"unoptimized": True}}
    hooks = {"post_deploy": notify}
    cloudbuild_hooks = {"after_deploy": lambda ctx: "..."}
    shell_utils_hooks = {}
    dockerfile_hooks = {"additional_env": ["ENV FOO=bar"]}
    next_config_hooks = {"configure_next_config": configure}

Hook groups are merged with the empty slots from `nextversions.hook`.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from nextversions import hook
from pykern import pkconfig
from pykern import pkio
from pykern import pkrunpy
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc, pkdlog


def defaults():
    """Configuration without a user file

    Returns:
        PKDict: region, repository, next_config, and every hook group
    """
    return PKDict(
        region=_cfg.region,
        repository=_cfg.repository,
        next_config=PKDict(),
        **{g: hook.slots(g) for g in hook.GROUPS},
    )


def load(path=None):
    """Merge user file into `defaults`

    Errors in the user file propagate.

    Args:
        path (str): user file [config ``config_file``]
    Returns:
        PKDict: configuration
    """
    p = pkio.py_path(path or _cfg.config_file)
    rv = defaults()
    if not p.check(file=True):
        pkdlog("no config file={}, using defaults", p)
        return rv
    pkdc("loading config file={}", p)
    m = pkrunpy.run_path_as_module(p)
    for k in "region", "repository":
        v = getattr(m, k, None)
        if v:
            rv[k] = v
    rv.next_config = PKDict(getattr(m, "next_config", None) or {})
    for g in hook.GROUPS:
        rv[g] = hook.slots(g, getattr(m, g, None))
    return rv


_cfg = pkconfig.init(
    config_file=(
        "nextversions_config.py",
        str,
        "user configuration file relative to the current directory",
    ),
    region=("us-central1", str, "GCP region of services and images"),
    repository=("cloud-run-source-deploy", str, "Artifact Registry repository"),
)
