"""Shell commands which manage the per-version service account

The generated fragment is injected into ``setup_service_account`` of
``deploy-utils.sh`` and runs inside Cloud Build.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from nextversions import naming

#: Roles granted to the service account the service runs as
DEFAULT_ROLES = ("roles/secretmanager.secretAccessor",)

#: Seconds to wait after creating an account
PROPAGATION_SECS = 10


def create_command(sa_id, display_name):
    return f"""gcloud iam service-accounts create "{sa_id}" \\
        --display-name="{display_name}\""""


def grant_role_command(project_id, email, role):
    return f"""gcloud projects add-iam-policy-binding {project_id} \\
        --member="serviceAccount:{email}" \\
        --role="{role}\""""


def script(project_id, version, roles=DEFAULT_ROLES):
    """Bash fragment which creates the account if needed and grants `roles`

    The id length is checked again in shell so the failure is visible
    in the build log.

    Args:
        project_id (str): GCP project id
        version (str): raw version
        roles (iterable): roles to grant [`DEFAULT_ROLES`]
    Returns:
        str: bash, indented for a function body
    """
    i = naming.service_account_id(version)
    e = naming.service_account_email(project_id, version)
    return "\n".join(
        [
            f"""    local sa_id="{i}"
    if [ ${{#sa_id}} -lt {naming.SA_ID_MIN_LEN} ] || [ ${{#sa_id}} -gt {naming.SA_ID_MAX_LEN} ]; then
        echo "❌ ERROR: Service account ID '${{sa_id}}' is ${{#sa_id}} characters long"
        echo "Service account IDs must be between {naming.SA_ID_MIN_LEN} and {naming.SA_ID_MAX_LEN} characters"
        echo "Please use a shorter version name"
        exit 1
    fi
    if {validate_command(e)}; then
        echo "✓ Service account exists"
    else
        echo "Creating service account: {e}"
        if ! {create_command(i, f"Service Account for {version}")}; then
            echo "❌ ERROR: Failed to create service account"
            exit 1
        fi
        echo "Waiting for service account to be ready..."
        sleep {PROPAGATION_SECS}
    fi""",
        ]
        + [_grant(project_id, e, r) for r in roles]
        + ['    echo "✓ All roles granted"'],
    )


def validate_command(email):
    return f'gcloud iam service-accounts describe "{email}" >/dev/null 2>&1'


def _grant(project_id, email, role):
    return f"""    echo "Granting {role} to {email}"
    if ! {grant_role_command(project_id, email, role)}; then
        echo "❌ ERROR: Failed to grant {role} to {email}"
        echo "The Cloud Build service account needs roles/iam.securityAdmin"
        exit 1
    fi"""
