#!/usr/bin/env python
from setuptools import setup, find_packages
import sys

long_description = ''

if 'sdist' in sys.argv:
    with open('README.rst') as f:
        long_description = f.read()


setup(
    name='twohand',
    version='0.1.0',
    description='Two-handed play detection for osu!droid replays',
    packages=find_packages(exclude=['tests']),
    long_description=long_description,
    license='LGPLv3+',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)',  # noqa
        'Natural Language :: English',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Games/Entertainment',
    ],
    entry_points={
        'console_scripts': [
            'twohand = twohand.__main__:main',
        ],
    },
    install_requires=[
        'click',
        'numpy',
    ],
    extras_require={
        'dev': [
            'flake8',
            'hypothesis',
            'pytest',
        ],
    },
)
