#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup


def read_version() -> str:
    # swapvm/__init__.py imports the runtime dependencies, which are not available at build time
    init_py = (Path(__file__).parent / 'swapvm' / '__init__.py').read_text()
    match = re.search(r"^__version__ = '([^']+)'", init_py, re.MULTILINE)
    assert match is not None, 'version not found'
    return match.group(1)


install_requires = [
    'colorama>=0.4',
    'configargparse>=1.7',
    'pydantic>=2.0,<3',
    'PyYAML>=6.0',
    'structlog>=23.1',
    'typing_extensions>=4.6',
]

tests_require = [
    'hypothesis>=6.80',
    'pytest>=7.4',
]

setup(
    name='swapvm',
    version=read_version(),
    description='Instruction codec for SwapVM programs',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    python_requires='>=3.11',
    entry_points={
        'console_scripts': ['swapvm-cli=swapvm_cli.main:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    packages=find_packages(exclude=('swapvm_tests', 'swapvm_tests.*')),
    package_data={'swapvm.conf': ['*.yml']},
    install_requires=install_requires,
    extras_require={'test': tests_require},
)
