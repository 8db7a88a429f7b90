################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

import setuptools


PACKAGE_NAME: str = "oasis_collections"

setuptools.setup(
    name=PACKAGE_NAME,
    version="1.0.0",
    author="Garrett Brown",
    maintainer="Garrett Brown",
    description="Fixed-size rolling collections for OASIS",
    url="https://github.com/eigendude/OASIS",
    license="Apache-2.0",
    zip_safe=True,
    keywords=[
        "collections",
        "ring buffer",
    ],
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Topic :: Software Development :: Libraries",
    ],
    packages=setuptools.find_packages(exclude=["test", "test.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
