"""Generate the ``Dockerfile`` for the Next.js standalone server

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from nextversions import hook
from nextversions import naming
from nextversions import template

FILENAME = "Dockerfile"


async def generate(project_id, version, region, repository, hooks=None):
    """Dockerfile with `hooks` inserted after their markers

    A hook may return a string or a list of lines.

    Args:
        project_id (str): GCP project id
        version (str): raw version
        region (str): GCP region
        repository (str): Artifact Registry repository
        hooks (dict): ``dockerfile_hooks`` from config
    Returns:
        str: Dockerfile text
    """
    naming.check_required(version=version, region=region, repository=repository)
    return template.substitute(
        template.load(FILENAME),
        await hook.replacements(
            "dockerfile_hooks",
            hooks,
            hook.context(project_id, version, region, repository),
        ),
    )
