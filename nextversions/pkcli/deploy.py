"""Deploy a version of a Next.js application to Cloud Run

Usage::

    nextversions deploy feature-x --log-level debug

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern import pkcli
from pykern import pkdebug
import asyncio
import os

_LOG_LEVELS = ("debug", "info", "silent")


def default_command(version, log_level="info"):
    """Generate files, submit the build, and make the service public

    Args:
        version (str): version name, e.g. a branch
        log_level (str): debug, info, or silent [info]
    Returns:
        str: service URL
    """
    from nextversions import deploy, error

    _init_log(log_level)
    try:
        return asyncio.run(deploy.run(version))
    except error.Error as e:
        pkcli.command_error("{}", e)


def _init_log(level):
    if level not in _LOG_LEVELS:
        pkcli.command_error(
            "invalid log_level={} must be one of {}", level, ", ".join(_LOG_LEVELS)
        )
    if level == "debug":
        pkdebug.init(control="nextversions")
    elif level == "silent":
        pkdebug.init(output=os.devnull)
