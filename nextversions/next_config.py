"""Generate ``next.config.js``

The configuration is data (the user's ``next_config`` with
``package_data/next_config.yml`` applied on top) and is emitted as a
JSON literal, so nothing is evaluated. ``output`` is always
``standalone`` because the container runs ``server.js`` from the
standalone build.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from nextversions import hook
from nextversions import naming
from nextversions import template
from pykern import pkcollections
from pykern import pkjson
from pykern import pkyaml
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc

FILENAME = "next.config.js"

#: Settings the container requires (``package_data/next_config.yml``)
BASE_NAME = "next_config"

#: Cloud Run runs the standalone server
OUTPUT = "standalone"

_MARKER = template.marker("next_config", comment="//")


def base():
    """Settings the container requires

    Returns:
        PKDict: fresh copy
    """
    return pkyaml.load_resource(BASE_NAME)


async def generate(
    project_id, version, region, repository, hooks=None, base_config=None
):
    """Config module with the merged configuration as ``nextConfig``

    `base` is merged over `base_config` by top level key, except
    ``experimental`` which is merged by its keys. The
    ``configure_next_config`` hook may then change anything except
    ``output``, either in place or by returning a new dict.

    Args:
        project_id (str): GCP project id
        version (str): raw version
        region (str): GCP region
        repository (str): Artifact Registry repository
        hooks (dict): ``next_config_hooks`` from config
        base_config (dict): user's ``next_config`` [None]
    Returns:
        str: JavaScript module text
    """
    naming.check_required(version=version, region=region, repository=repository)
    c = merge(base_config, base())
    c.output = OUTPUT
    r = await hook.call(
        hook.slots("next_config_hooks", hooks).configure_next_config,
        c,
        hook.context(project_id, version, region, repository),
    )
    if r is not None:
        if not isinstance(r, dict):
            raise AssertionError(
                f"hook=configure_next_config returned type={type(r).__name__}, must be dict or None"
            )
        c = pkcollections.canonicalize(r)
    c.output = OUTPUT
    pkdc("next_config={}", c)
    return template.substitute(
        template.load(FILENAME),
        PKDict({_MARKER: f"const nextConfig = {pkjson.dump_pretty(c).rstrip()};"}),
    )


def merge(config, override):
    """Merge `override` into a copy of `config`

    Args:
        config (dict): values to start with [None]
        override (dict): values which replace `config` values [None]
    Returns:
        PKDict: new config
    """
    rv = pkcollections.canonicalize(config or PKDict())
    for k, v in pkcollections.canonicalize(override or PKDict()).items():
        if k == "experimental" and isinstance(v, dict):
            rv[k] = PKDict(rv.get(k) or PKDict(), **v)
        else:
            rv[k] = v
    return rv
