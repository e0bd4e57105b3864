"""Deploy one version end to end

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from nextversions import config
from nextversions import error
from nextversions import hook
from nextversions import iam
from nextversions import naming
from nextversions import secret
from nextversions import workspace
from nextversions.gcloud import GCloud
from pykern.pkdebug import pkdlog


async def run(version, cfg=None, gcloud=None):
    """Generate files, build, and publish `version`

    Steps run in order and the first failure stops the deployment.
    Nothing already done in the cloud is undone.

    Args:
        version (str): raw version, e.g. a branch name
        cfg (PKDict): configuration [`nextversions.config.load`]
        gcloud (GCloud): cloud calls [``GCloud()``]
    Returns:
        str: service URL
    """
    if not version:
        raise error.MissingParameter(
            "version",
            "usage: nextversions deploy <version>",
        )
    c = cfg or config.load()
    g = gcloud or GCloud()
    p = g.project_id()
    n = naming.validate_resource_names(p, version, c.region, c.repository)
    pkdlog("version={} service={} project={}", version, n.service_name, p)
    await hook.call(
        c.hooks.validate_environment,
        hook.context(p, version, c.region, c.repository),
    )
    iam.validate_gcloud_permissions(g, p)
    secret.setup(g, p)
    workspace.create_dirs()
    workspace.write_files(await workspace.generate_files(p, version, c))
    g.submit_build(p, naming.compute_service_account_email(g.project_number(p)))
    await iam.grant_public_access(g, p, version, c.region)
    u = g.service_url(n.service_name, c.region, p)
    if c.hooks.post_deploy:
        pkdlog("running post_deploy hook")
        await hook.call(c.hooks.post_deploy, version, u)
    pkdlog("deployed version={} url={}", version, u)
    return u
