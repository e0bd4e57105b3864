"""Generate ``cloudbuild.yaml``

Hook content is inserted as text, then the result is parsed so the
substitutions can be set regardless of what the hooks produced.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from nextversions import hook
from nextversions import naming
from nextversions import template
from pykern.pkdebug import pkdc
from ruamel.yaml.comments import CommentedMap
import io
import ruamel.yaml
import sys

FILENAME = "cloudbuild.yaml"


async def generate(project_id, version, region, repository, hooks=None):
    """Build pipeline for `version`

    Args:
        project_id (str): GCP project id
        version (str): raw version
        region (str): GCP region
        repository (str): Artifact Registry repository
        hooks (dict): ``cloudbuild_hooks`` from config
    Returns:
        str: YAML text
    """
    naming.check_required(version=version, region=region, repository=repository)
    t = template.substitute(
        template.load(FILENAME),
        await hook.replacements(
            "cloudbuild_hooks",
            hooks,
            hook.context(project_id, version, region, repository),
        ),
    )
    y = _yaml()
    d = y.load(t)
    d["substitutions"] = substitutions(version, region, repository)
    pkdc("substitutions={}", d["substitutions"])
    with io.StringIO() as f:
        y.dump(d, f)
        return f.getvalue()


def substitutions(version, region, repository):
    return CommentedMap(
        _APP_VERSION=version,
        _REGION=region,
        _REPOSITORY=repository,
    )


def _yaml():
    rv = ruamel.yaml.YAML()
    rv.indent(mapping=2, sequence=4, offset=2)
    rv.preserve_quotes = True
    rv.width = sys.maxsize
    return rv
