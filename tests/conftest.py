"""Fixtures for nextversions tests

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

import pytest


class _Executor:
    """Scripted replacement for `nextversions.command.run`

    Responses are chosen by the first registered substring found in
    the command line. A response which is an exception is raised.
    With more than one response for a substring, each call consumes
    one until the last, which is repeated.
    """

    def __init__(self):
        self.calls = []
        self.return_outputs = []
        self._responses = []

    def __call__(self, cmd, return_output):
        c = " ".join(cmd)
        self.calls.append(c)
        self.return_outputs.append(return_output)
        for s, r in self._responses:
            if s in c:
                v = r.pop(0) if len(r) > 1 else r[0]
                if isinstance(v, BaseException):
                    raise v
                return v if return_output else None
        return "" if return_output else None

    def add(self, substring, *responses):
        self._responses.append((substring, list(responses)))
        return self

    def count(self, substring):
        return len([c for c in self.calls if substring in c])


@pytest.fixture(scope="function")
def executor():
    return _Executor()


@pytest.fixture(scope="function")
def gcloud(executor):
    from nextversions.gcloud import GCloud

    return GCloud(executor=executor)
