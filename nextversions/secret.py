"""Secret Manager access for per-version configuration

Each version may have a JSON secret named ``APP_CONFIG_<VERSION>``.
Hooks call `get` to put its values into generated files.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from nextversions import error
from nextversions import iam
from nextversions import naming
from pykern import pkjson
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc, pkdlog

API = "secretmanager.googleapis.com"

ACCESSOR_ROLE = "roles/secretmanager.secretAccessor"

_PREFIX = "APP_CONFIG_"


def exists(gcloud, project_id, name):
    try:
        gcloud.describe("secret", name, PKDict(project=project_id))
    except error.CommandFailed as e:
        if "NOT_FOUND" in (e.output or ""):
            return False
        raise
    return True


async def get(gcloud, project_id, name):
    """Latest value of secret `name` parsed as JSON

    Args:
        gcloud (GCloud): cloud calls
        project_id (str): GCP project id
        name (str): secret name, see `name`
    Returns:
        PKDict: secret value
    Raises:
        SecretNotFound: secret does not exist
        InvalidSecret: value is not JSON
    """
    if not exists(gcloud, project_id, name):
        raise error.SecretNotFound(name)
    await gcloud.wait_for_ready("secret", name, PKDict(project=project_id))
    v = gcloud.access_secret(project_id, name)
    try:
        return pkjson.load_any(v)
    except ValueError as e:
        raise error.InvalidSecret(name, e)


def name(version):
    """Secret name for `version`, e.g. ``APP_CONFIG_FEATURE-X``"""
    return _PREFIX + version.upper()


def setup(gcloud, project_id):
    """Enable the API and let the compute service account read secrets

    Args:
        gcloud (GCloud): cloud calls
        project_id (str): GCP project id
    """
    gcloud.enable_service(project_id, API)
    m = "serviceAccount:" + naming.compute_service_account_email(
        gcloud.project_number(project_id),
    )
    if iam.ensure_project_binding(gcloud, project_id, m, ACCESSOR_ROLE):
        pkdlog("granted role={} to member={}", ACCESSOR_ROLE, m)
    else:
        pkdc("member={} already has role={}", m, ACCESSOR_ROLE)
