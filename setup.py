#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2011-2024 North Carolina State University
#
# This file is part of Ncstate.
#
# Ncstate is free software; you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# Ncstate is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with Ncstate; if not, write to the Free Software Foundation,
# Inc., 59 Temple Place, Suite 330, Boston, MA 02111-1307, USA.
"""
Install script for the Ncstate modules.
"""

from setuptools import setup

import Ncstate


install_requires = [
    'requests',
    'python-ldap',
    'PyYAML',
    'zeep',
    'Pillow',
]

tests_require = [
    'pytest',
]


setup(
    name="Ncstate",
    version=Ncstate.__version__,
    url="https://webapps.ncsu.edu/",
    maintainer="Ncstate Developers",
    description="Python library for NC State web services and branding",
    license="GPL",
    long_description=("Clients for NC State web services (dining, OUC, "
                      "campus LDAP, Remedy), and helpers for on-brand web "
                      "pages and images"),
    platforms="UNIX",
    python_requires='>=3.8',
    packages=[
        'Ncstate',
        'Ncstate.brand',
        'Ncstate.config',
        'Ncstate.logutils',
        'Ncstate.service',
        'Ncstate.testutils',
        'Ncstate.utils',
    ],
    install_requires=install_requires,
    extras_require={
        'test': tests_require,
    },
)
