"""Cloud Run resource names computed from a version

Every function is pure: names are recomputed on each call and
nothing here touches the network, processes, or configuration.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from nextversions import error
from pykern.pkcollections import PKDict
import re

#: Cloud Run is stricter than other resources
VERSION_MAX_LEN = 20

#: Longest project id we accept
PROJECT_ID_MAX_LEN = 30

#: Cloud Run service names
SERVICE_NAME_MAX_LEN = 63

#: Service account ids (without domain)
SA_ID_MIN_LEN = 6
SA_ID_MAX_LEN = 30

#: Cloud Run service URLs are under this domain
PLATFORM_DOMAIN = "run.app"

_INVALID_CHARS = re.compile(r"[^a-z0-9-]")

_STARTS_WITH_LETTER = re.compile(r"^[a-z]")


def check_required(**kwargs):
    """Raise MissingParameter for the first empty value

    Args:
        kwargs (dict): parameter name to value, checked in order
    """
    for k, v in kwargs.items():
        if not v:
            raise error.MissingParameter(k)


def compute_service_account_email(project_number):
    """Identity which submits builds and runs services

    Args:
        project_number (str): numeric project id
    Returns:
        str: email of default compute service account
    """
    return f"{project_number}-compute@developer.gserviceaccount.com"


def image_path(project_id, version, region, repository):
    """Artifact Registry path for the version's container image"""
    return f"{region}-docker.pkg.dev/{project_id}/{repository}/{sanitize_version(version)}"


def sanitize_version(version):
    """Convert `version` to a name usable in resource ids

    Lowercases and replaces every character not in ``[a-z0-9-]`` with
    a hyphen. The result must start with a letter and be 1 to
    `VERSION_MAX_LEN` characters long.

    Args:
        version (str): raw version, e.g. a branch name
    Returns:
        str: sanitized version
    Raises:
        InvalidVersion: if empty or sanitized form is invalid
    """
    if not version:
        raise error.InvalidVersion(version, "is required")
    rv = _INVALID_CHARS.sub("-", version.lower())
    if not _STARTS_WITH_LETTER.search(rv):
        raise error.InvalidVersion(version, "must start with a letter")
    if not 1 <= len(rv) <= VERSION_MAX_LEN:
        raise error.InvalidVersion(
            version, f"must be between 1 and {VERSION_MAX_LEN} characters"
        )
    return rv


def service_account_email(project_id, version):
    return f"{service_account_id(version)}@{project_id}.iam.gserviceaccount.com"


def service_account_id(version):
    """Per-version service account id

    Args:
        version (str): raw version
    Returns:
        str: ``<sanitized>-sa``
    Raises:
        InvalidServiceAccountId: outside `SA_ID_MIN_LEN` and `SA_ID_MAX_LEN`
    """
    rv = f"{sanitize_version(version)}-sa"
    if not SA_ID_MIN_LEN <= len(rv) <= SA_ID_MAX_LEN:
        raise error.InvalidServiceAccountId(rv, SA_ID_MIN_LEN, SA_ID_MAX_LEN)
    return rv


def service_name(project_id, version):
    """Cloud Run service name for the version

    The project id limit is checked on its own, before the combined
    length.

    Args:
        project_id (str): GCP project id
        version (str): raw version
    Returns:
        str: ``<project_id>-<sanitized>``
    Raises:
        MissingParameter: no project_id
        InvalidProjectId: project_id too long
        NameTooLong: combined name too long
    """
    if not project_id:
        raise error.MissingParameter("project_id")
    if len(project_id) > PROJECT_ID_MAX_LEN:
        raise error.InvalidProjectId(project_id, PROJECT_ID_MAX_LEN)
    v = sanitize_version(version)
    rv = f"{project_id}-{v}"
    if len(rv) > SERVICE_NAME_MAX_LEN:
        raise error.NameTooLong(rv, SERVICE_NAME_MAX_LEN, project_id, v)
    return rv


def service_url(project_id, version, region):
    return f"https://{service_name(project_id, version)}-{region}.{PLATFORM_DOMAIN}"


def validate_resource_names(project_id, version, region, repository):
    """Validate and compute all names for a deployment

    Args:
        project_id (str): GCP project id
        version (str): raw version
        region (str): GCP region
        repository (str): Artifact Registry repository
    Returns:
        PKDict: version, service_name, image_path, service_account, service_url
    """
    check_required(
        project_id=project_id,
        version=version,
        region=region,
        repository=repository,
    )
    return PKDict(
        version=sanitize_version(version),
        service_name=service_name(project_id, version),
        image_path=image_path(project_id, version, region, repository),
        service_account=service_account_email(project_id, version),
        service_url=service_url(project_id, version, region),
    )
