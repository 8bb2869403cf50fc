#! /usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright(C) 2026 pastoob contributors
#
# This file is part of pastoob.
#
# pastoob is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# pastoob is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with pastoob. If not, see <http://www.gnu.org/licenses/>.

import os
import sys

from setuptools import find_packages, setup


def install_pastoob():
    packages = find_packages(include=['pastoob', 'pastoob.*'])

    requirements = [
        'requests>=2.0.0',
        'PyYAML',
    ]

    try:
        if sys.argv[1] == 'requirements':
            print('\n'.join(requirements))
            sys.exit(0)
    except IndexError:
        pass

    setup(
        name='pastoob',
        version='1.0',
        description='Post and get single- and multi-file pastes on pastebins',
        license='LGPLv3+',
        python_requires='>=3.6',
        packages=packages,
        install_requires=requirements,
        extras_require={
            'test': ['pytest'],
        },
        entry_points={
            'console_scripts': [
                'pastoob = pastoob.applications.pastoob:Pastoob.run',
            ],
        },
    )


if os.getenv('PASTOOB_SETUP'):
    args = os.getenv('PASTOOB_SETUP').split()
else:
    args = sys.argv[1:]

sys.argv = [sys.argv[0]] + args

install_pastoob()
