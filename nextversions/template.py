"""Insert generated text after marker lines in templates

A marker is a literal comment, e.g. ``# [HOOK: before_deploy]``. The
marker stays in the output and the replacement goes on the lines
following it. Nothing here knows about the format of the template.

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern import pkio
from pykern import pkresource
from pykern.pkdebug import pkdc


def load(basename):
    """Read template from package_data

    Args:
        basename (str): file name in ``nextversions/package_data``
    Returns:
        str: template text
    """
    return pkio.read_text(pkresource.filename(basename, packages=["nextversions"]))


def marker(name, comment="#"):
    """Marker text for hook `name`

    Args:
        name (str): hook slot
        comment (str): line comment of the template's format ["#"]
    Returns:
        str: e.g. ``# [HOOK: after_deploy]``
    """
    return f"{comment} [HOOK: {name}]"


def substitute(text, replacements):
    """Insert each replacement after the first occurrence of its marker

    Markers not in `text` are ignored. Empty or None content leaves
    the marker line unchanged.

    Args:
        text (str): template
        replacements (dict): marker to content
    Returns:
        str: text with content inserted
    """
    for m, c in replacements.items():
        if not c:
            continue
        i = text.find(m)
        if i < 0:
            pkdc("marker={} not in template", m)
            continue
        i += len(m)
        text = text[:i] + "\n" + c + text[i:]
    return text
