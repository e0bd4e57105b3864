"""Run external commands (``gcloud``)

`run` is the default executor of `nextversions.gcloud.GCloud`. Any
callable with the same signature may replace it.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from nextversions import error
from pykern import pksubprocess
from pykern.pkdebug import pkdc
import subprocess


def run(cmd, return_output=False):
    """Run `cmd` and optionally return its output

    When `return_output` is False, the command's output goes to the
    terminal and SIGINT and SIGTERM are passed to it.

    Args:
        cmd (list): command and arguments
        return_output (bool): capture stdout [False]
    Returns:
        str: stripped stdout or None
    Raises:
        CommandFailed: non-zero exit or command not found
    """
    pkdc("cmd={} return_output={}", cmd, return_output)
    if not return_output:
        try:
            pksubprocess.check_call_with_signals(cmd, msg=pkdc)
        except (RuntimeError, OSError) as e:
            raise error.CommandFailed(cmd, None, str(e))
        return None
    try:
        p = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
        )
    except OSError as e:
        raise error.CommandFailed(cmd, None, str(e))
    if p.returncode != 0:
        pkdc("exit={} cmd={} stderr={}", p.returncode, cmd, p.stderr.strip())
        raise error.CommandFailed(cmd, p.returncode, p.stderr.strip())
    return p.stdout.strip()
