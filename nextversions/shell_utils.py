"""Generate ``deploy-utils.sh``, the functions sourced by Cloud Build steps

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from nextversions import hook
from nextversions import naming
from nextversions import service_account
from nextversions import template

#: Name of the generated file (and of its template)
FILENAME = "deploy-utils.sh"


async def generate(project_id, version, region, repository, hooks=None):
    """Shell script with `hooks` and the service account setup inserted

    Args:
        project_id (str): GCP project id
        version (str): raw version
        region (str): GCP region
        repository (str): Artifact Registry repository
        hooks (dict): ``shell_utils_hooks`` from config
    Returns:
        str: script text
    """
    naming.check_required(
        version=version,
        region=region,
        repository=repository,
        project_id=project_id,
    )
    r = await hook.replacements(
        "shell_utils_hooks",
        hooks,
        hook.context(project_id, version, region, repository),
    )
    r[template.marker("setup_service_account")] = service_account.script(
        project_id,
        version,
    )
    return template.substitute(template.load(FILENAME), r)
