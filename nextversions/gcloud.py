"""Calls to the ``gcloud`` command line tool

Every call goes through an executor so tests (and other callers) can
substitute their own. An executor is called as
``executor(cmd, return_output)`` and returns the stripped output (or
None) or raises `nextversions.error.CommandFailed`.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from nextversions import command
from nextversions import error
from pykern import pkconfig
from pykern import pkjson
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc, pkdlog
import asyncio

#: Name of the build descriptor passed to Cloud Build
CLOUDBUILD_FILE = "cloudbuild.yaml"


def _service_ready(value):
    return bool(isinstance(value, dict) and (value.get("status") or {}).get("url"))


def _secret_ready(value):
    return bool(isinstance(value, dict) and value.get("name"))


_READY = PKDict(
    service=PKDict(command=("run", "services", "describe"), is_ready=_service_ready),
    secret=PKDict(command=("secrets", "describe"), is_ready=_secret_ready),
)


class GCloud:
    def __init__(self, executor=None):
        self._executor = executor or command.run

    def access_secret(self, project_id, name, version="latest"):
        return self._run(
            "secrets",
            "versions",
            "access",
            version,
            f"--secret={name}",
            f"--project={project_id}",
        )

    def add_project_iam_binding(self, project_id, member, role):
        pkdlog("project={} member={} role={}", project_id, member, role)
        self._run(
            "projects",
            "add-iam-policy-binding",
            project_id,
            f"--member={member}",
            f"--role={role}",
            "--condition=None",
            "--quiet",
        )

    def add_service_iam_binding(self, service_name, member, role, region, project_id):
        pkdlog("service={} member={} role={}", service_name, member, role)
        self._run(
            "run",
            "services",
            "add-iam-policy-binding",
            service_name,
            f"--member={member}",
            f"--role={role}",
            f"--region={region}",
            f"--project={project_id}",
            "--quiet",
        )

    def current_account(self):
        return self._run("config", "get-value", "account")

    def describe(self, kind, name, params=None):
        """Describe a resource as parsed JSON

        Args:
            kind (str): ``service`` or ``secret``
            name (str): resource name
            params (dict): each becomes ``--<key>=<value>``
        Returns:
            object: parsed output
        """
        return pkjson.load_any(
            self._run(
                *_READY[kind].command,
                name,
                *(f"--{k}={v}" for k, v in (params or {}).items()),
                "--format=json",
            ),
        )

    def enable_service(self, project_id, api):
        pkdlog("project={} api={}", project_id, api)
        self._run("services", "enable", api, f"--project={project_id}")

    def project_iam_policy(self, project_id):
        return pkjson.load_any(
            self._run("projects", "get-iam-policy", project_id, "--format=json"),
        )

    def project_id(self):
        """Project configured with ``gcloud config set project``

        Returns:
            str: project id
        Raises:
            MissingParameter: no project is configured
        """
        rv = self._run("config", "get-value", "project")
        if not rv:
            raise error.MissingParameter(
                "project_id",
                "run: gcloud config set project YOUR_PROJECT_ID",
            )
        return rv

    def project_number(self, project_id):
        rv = self._run(
            "projects",
            "describe",
            project_id,
            "--format=value(projectNumber)",
        )
        if not rv:
            raise error.MissingParameter(
                "project_number",
                f"could not get project number for project={project_id}",
            )
        return rv

    def service_iam_policy(self, service_name, region, project_id):
        return pkjson.load_any(
            self._run(
                "run",
                "services",
                "get-iam-policy",
                service_name,
                f"--region={region}",
                f"--project={project_id}",
                "--format=json",
            ),
        )

    def service_url(self, service_name, region, project_id):
        return self._run(
            "run",
            "services",
            "describe",
            service_name,
            f"--region={region}",
            f"--project={project_id}",
            "--format=value(status.url)",
        )

    def submit_build(self, project_id, service_account):
        """Submit the build in the current directory

        Output goes to the terminal.

        Args:
            project_id (str): GCP project id
            service_account (str): email of account to impersonate
        """
        pkdlog("submitting build project={}", project_id)
        self._run(
            "beta",
            "builds",
            "submit",
            f"--config={CLOUDBUILD_FILE}",
            f"--project={project_id}",
            f"--impersonate-service-account={service_account}",
            return_output=False,
        )

    async def wait_for_ready(
        self, kind, name, params=None, max_attempts=None, delay_secs=None
    ):
        """Poll until the resource is ready

        A command failure or unparsable output counts as a failed
        attempt. There is no delay after the last attempt.

        Args:
            kind (str): ``service`` or ``secret``
            name (str): resource name
            params (dict): extra describe arguments, e.g. region
            max_attempts (int): defaults to config ``ready_max_attempts``
            delay_secs (float): defaults to config ``ready_delay_secs``
        Raises:
            ResourceNotReady: after `max_attempts` failures
        """
        assert kind in _READY, f"unsupported resource kind={kind}"
        m = _cfg.ready_max_attempts if max_attempts is None else max_attempts
        d = _cfg.ready_delay_secs if delay_secs is None else delay_secs
        r = None
        for a in range(1, m + 1):
            try:
                if _READY[kind].is_ready(self.describe(kind, name, params)):
                    pkdc("kind={} name={} ready attempt={}", kind, name, a)
                    return
                r = "not ready"
            except (error.CommandFailed, ValueError) as e:
                r = str(e)
            pkdc("kind={} name={} attempt={} reason={}", kind, name, a, r)
            if a < m:
                await asyncio.sleep(d)
        raise error.ResourceNotReady(name, m, r)

    def _run(self, *args, return_output=True):
        return self._executor(["gcloud", *args], return_output)


_cfg = pkconfig.init(
    ready_max_attempts=(
        5,
        pkconfig.parse_positive_int,
        "attempts before a resource is not ready",
    ),
    ready_delay_secs=(2, pkconfig.parse_seconds, "delay between readiness attempts"),
)
