"""Generate deployment files and write them to disk

Files are written to ``workspace/`` and copied to the current
directory where ``gcloud builds submit`` picks them up.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from nextversions import cloudbuild
from nextversions import dockerfile
from nextversions import next_config
from nextversions import shell_utils
from pykern import pkio
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc

#: Directory which holds the generated files
WORKSPACE = "workspace"

#: Created before the build so the Dockerfile's COPY lines succeed
DIRS = ("public", ".next/standalone", ".next/static", WORKSPACE)

_EXECUTABLE = 0o755


def create_dirs():
    for d in DIRS:
        pkio.mkdir_parent(d)


async def generate_files(project_id, version, cfg):
    """Generate every deployment file for `version`

    Args:
        project_id (str): GCP project id
        version (str): raw version
        cfg (PKDict): from `nextversions.config.load`
    Returns:
        PKDict: file name to contents
    """
    a = (project_id, version, cfg.region, cfg.repository)
    rv = PKDict()
    rv[cloudbuild.FILENAME] = await cloudbuild.generate(
        *a, hooks=cfg.cloudbuild_hooks
    )
    rv[shell_utils.FILENAME] = await shell_utils.generate(
        *a, hooks=cfg.shell_utils_hooks
    )
    rv[dockerfile.FILENAME] = await dockerfile.generate(
        *a, hooks=cfg.dockerfile_hooks
    )
    rv[next_config.FILENAME] = await next_config.generate(
        *a,
        hooks=cfg.next_config_hooks,
        base_config=cfg.next_config,
    )
    return rv


def write_files(files):
    """Write `files` to `WORKSPACE` and copy them to the current directory

    Shell scripts are made executable.

    Args:
        files (dict): file name to contents
    """
    w = pkio.mkdir_parent(WORKSPACE)
    for n, c in files.items():
        p = pkio.write_text(w.join(n), c)
        t = pkio.py_path(n)
        p.copy(t)
        if n.endswith(".sh"):
            p.chmod(_EXECUTABLE)
            t.chmod(_EXECUTABLE)
        pkdc("wrote file={}", t)
