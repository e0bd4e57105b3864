"""Exceptions raised by deployment operations

All exceptions are subclasses of `Error` so callers (e.g.
`nextversions.pkcli.deploy`) can turn them into command errors
without catching programming errors.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern.pkdebug import pkdformat

#: Appended to permission errors
SETUP_HELP = """Please ensure you are logged in and have sufficient permissions:
$ gcloud auth login

Then run the setup script from the project README:
$ bash ./scripts/setup-gcloud-permissions.sh"""


class Error(Exception):
    """Superclass for all errors in this package"""

    def __init__(self, fmt, *args, **kwargs):
        super().__init__(pkdformat(fmt, *args, **kwargs) if args or kwargs else fmt)


class CommandFailed(Error):
    """External command exited non-zero or could not be started"""

    def __init__(self, cmd, status, output=""):
        self.cmd = cmd
        self.status = status
        self.output = output
        super().__init__(
            "command failed exit={} cmd={}{}",
            status,
            " ".join(cmd),
            f"\n{output}" if output else "",
        )


class InvalidProjectId(Error):
    def __init__(self, project_id, max_len):
        super().__init__(
            'project_id="{}" exceeds {} characters (length={})',
            project_id,
            max_len,
            len(project_id),
        )


class InvalidSecret(Error):
    def __init__(self, name, reason):
        super().__init__(
            "secret={} invalid format, must be valid JSON: {}", name, reason
        )


class InvalidServiceAccountId(Error):
    def __init__(self, sa_id, min_len, max_len):
        super().__init__(
            'service account id="{}" length={} must be between {} and {} characters',
            sa_id,
            len(sa_id),
            min_len,
            max_len,
        )


class InvalidVersion(Error):
    def __init__(self, version, reason):
        super().__init__('version="{}" {}', version, reason)


class MissingParameter(Error):
    def __init__(self, name, hint=None):
        self.name = name
        super().__init__(
            "{} is required{}",
            name,
            f"; {hint}" if hint else "",
        )


class MissingRoles(Error):
    """Lists every missing role, not just the first"""

    def __init__(self, display_name, member, roles):
        self.member = member
        self.roles = roles
        super().__init__(
            "{} member={} is missing required roles:\n{}\n\n{}",
            display_name,
            member,
            "\n".join(roles),
            SETUP_HELP,
        )


class NameTooLong(Error):
    def __init__(self, name, max_len, project_id, version):
        self.name = name
        super().__init__(
            'service name="{}" length={} exceeds {} characters.'
            " Consider using a shorter project id ({} chars)"
            " or version name ({} chars).",
            name,
            len(name),
            max_len,
            len(project_id),
            len(version),
        )


class ResourceNotReady(Error):
    def __init__(self, name, attempts, reason=None):
        self.attempts = attempts
        super().__init__(
            "resource={} not ready after attempts={}{}",
            name,
            attempts,
            f": {reason}" if reason else "",
        )


class SecretNotFound(Error):
    def __init__(self, name):
        super().__init__(
            "secret={} not found. Create it with:\n"
            '$ gcloud secrets create {} --replication-policy="automatic"\n'
            "$ echo '{{your-config-json}}' | gcloud secrets versions add {} --data-file=-",
            name,
            name,
            name,
        )
