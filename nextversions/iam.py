"""IAM bindings and permission checks

Bindings are always checked before they are added so every operation
may be repeated.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from nextversions import error
from nextversions import naming
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc, pkdlog

#: Roles the person deploying needs on the project
USER_REQUIRED_ROLES = (
    "roles/iam.serviceAccountUser",
    "roles/iam.serviceAccountTokenCreator",
)

#: Roles the compute service account needs to run the build
CLOUD_BUILD_REQUIRED_ROLES = (
    "roles/iam.serviceAccountUser",
    "roles/iam.securityAdmin",
    "roles/run.admin",
    "roles/run.developer",
    "roles/run.invoker",
    "roles/cloudbuild.builds.builder",
    "roles/iam.serviceAccountAdmin",
)

PUBLIC_MEMBER = "allUsers"

INVOKER_ROLE = "roles/run.invoker"


def ensure_project_binding(gcloud, project_id, member, role):
    """Add project binding unless it exists

    Args:
        gcloud (GCloud): cloud calls
        project_id (str): GCP project id
        member (str): e.g. ``serviceAccount:<email>``
        role (str): e.g. ``roles/secretmanager.secretAccessor``
    Returns:
        bool: True if the binding was added
    """
    if policy_has_binding(gcloud.project_iam_policy(project_id), member, role):
        pkdc("project={} member={} role={} exists", project_id, member, role)
        return False
    gcloud.add_project_iam_binding(project_id, member, role)
    return True


async def grant_public_access(gcloud, project_id, version, region):
    """Allow unauthenticated access to the version's service

    Waits for the service, then adds the invoker binding for
    ``allUsers`` if it is not already there.

    Args:
        gcloud (GCloud): cloud calls
        project_id (str): GCP project id
        version (str): raw version
        region (str): GCP region
    Returns:
        bool: True if the binding was added
    """
    naming.check_required(project_id=project_id, version=version, region=region)
    s = naming.service_name(project_id, version)
    await gcloud.wait_for_ready(
        "service",
        s,
        PKDict(region=region, project=project_id),
    )
    if has_binding(gcloud, s, PUBLIC_MEMBER, INVOKER_ROLE, region, project_id):
        pkdlog("service={} public access already granted", s)
        return False
    gcloud.add_service_iam_binding(s, PUBLIC_MEMBER, INVOKER_ROLE, region, project_id)
    pkdlog("service={} granted public access", s)
    return True


def has_binding(gcloud, service_name, member, role, region, project_id):
    """Does the service's policy bind `member` to `role`?

    A service that does not exist (yet) has no bindings.

    Returns:
        bool: True if bound
    """
    try:
        p = gcloud.service_iam_policy(service_name, region, project_id)
    except error.CommandFailed as e:
        if "NOT_FOUND" in (e.output or ""):
            pkdc("service={} not found", service_name)
            return False
        raise
    return policy_has_binding(p, member, role)


def policy_has_binding(policy, member, role):
    """Is `member` in the binding for `role`?

    Args:
        policy (dict): IAM policy as returned by ``get-iam-policy``
        member (str): e.g. ``allUsers``
        role (str): e.g. ``roles/run.invoker``
    Returns:
        bool: True if bound
    """
    for b in (policy or PKDict()).get("bindings") or ():
        if b.get("role") == role and member in (b.get("members") or ()):
            return True
    return False


def validate_gcloud_permissions(gcloud, project_id):
    """Check the current user and the compute service account

    Args:
        gcloud (GCloud): cloud calls
        project_id (str): GCP project id
    Raises:
        MissingRoles: for the first identity missing any roles
    """
    p = gcloud.project_iam_policy(project_id)
    validate_permissions(
        p,
        f"user:{gcloud.current_account()}",
        USER_REQUIRED_ROLES,
        "User account",
    )
    validate_permissions(
        p,
        "serviceAccount:"
        + naming.compute_service_account_email(gcloud.project_number(project_id)),
        CLOUD_BUILD_REQUIRED_ROLES,
        "Compute Engine service account",
    )
    pkdc("project={} permissions ok", project_id)


def validate_permissions(policy, member, required_roles, display_name):
    """Raise if `member` lacks any of `required_roles`

    Args:
        policy (dict): project IAM policy
        member (str): ``<type>:<account>``
        required_roles (iterable): roles to check
        display_name (str): identity description for the message
    Raises:
        MissingRoles: lists every missing role
    """
    m = [r for r in required_roles if not policy_has_binding(policy, member, r)]
    if m:
        raise error.MissingRoles(display_name, member, m)
