#! /usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright(C) 2025 Beth Rennie
#
# This file is part of patisserie.
#
# patisserie is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# patisserie is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with patisserie. If not, see <https://www.gnu.org/licenses/>.

import os
import re
import sys

from setuptools import find_packages, setup


def get_version():
    with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'patisserie', '__init__.py')) as f:
        return re.search(r"^__version__ = '([^']+)'", f.read(), re.M).group(1)


def install_patisserie():
    packages = find_packages(exclude=['patisserie.tests'])

    requirements = [
        'requests>=2.0.0',
        'urllib3',
    ]

    test_requirements = [
        'pytest',
    ]

    try:
        if sys.argv[1] == 'requirements':
            print('\n'.join(requirements))
            sys.exit(0)
    except IndexError:
        pass

    setup(
        name='patisserie',
        version=get_version(),
        description='A CLI for pastery.net, the sweetest pastebin in the world',
        author='Beth Rennie',
        license='GPLv3+',
        classifiers=[
            'Environment :: Console',
            'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
            'Programming Language :: Python :: 3',
            'Topic :: Internet :: WWW/HTTP',
            'Topic :: Utilities',
        ],
        python_requires='>=3.6',
        packages=packages,
        install_requires=requirements,
        extras_require={
            'test': test_requirements,
        },
        entry_points={
            'console_scripts': [
                'patisserie = patisserie.application:Patisserie.run',
            ],
        },
    )


if os.getenv('PATISSERIE_SETUP'):
    args = os.getenv('PATISSERIE_SETUP').split()
else:
    args = sys.argv[1:]

sys.argv = [sys.argv[0]] + args

install_patisserie()
