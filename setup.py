# -*- coding: utf-8 -*-
"""Install nextversions

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""
import setuptools

# pykern.pksetup is not used: it imports distutils and
# setuptools.command.test, which current Python and setuptools removed.
# argh (pkcli's parser) is installed with pykern.


def _requires():
    return [
        "pykern>=20240101",
        "ruamel.yaml>=0.16.0",
    ]


def _test_requires():
    return [
        "pytest>=2.7",
    ]


setuptools.setup(
    name="nextversions",
    version="20261018.0",
    description="Deploy versions of a Next.js application to Cloud Run",
    author="RadiaSoft LLC",
    author_email="pip@pykern.org",
    install_requires=_requires(),
    extras_require={"test": _test_requires()},
    license="http://www.apache.org/licenses/LICENSE-2.0.html",
    packages=["nextversions", "nextversions.pkcli"],
    package_data={"nextversions": ["package_data/*"]},
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "nextversions=nextversions.nextversions_console:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python",
        "Topic :: Software Development :: Build Tools",
        "Topic :: Utilities",
    ],
)
