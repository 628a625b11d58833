# -*- coding: utf-8 -*-
from setuptools import setup

import codecs
import re

with codecs.open('README.md', encoding="utf-8") as fp:
    long_description = fp.read()

with codecs.open('httprange/__version__.py', encoding="utf-8") as fp:
    version = re.search(r'__version__ = "([^"]+)"', fp.read()).group(1)

INSTALL_REQUIRES: list = []
EXTRAS_REQUIRE = {
    'test': [
        'pytest>=6.0',
    ],
    'check': [
        'black',
        'isort',
        'flake8',
        'mypy',
    ],
}

setup_kwargs = {
    'name': 'httprange',
    'version': version,
    'description': 'Parse HTTP Range headers into absolute byte offsets and lengths.',
    'long_description': long_description,
    'license': 'Apache-2.0',
    'packages': [
        'httprange',
    ],
    'long_description_content_type': 'text/markdown',
    'classifiers': [
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Internet :: WWW/HTTP :: HTTP Servers',
    ],
    'install_requires': INSTALL_REQUIRES,
    'extras_require': EXTRAS_REQUIRE,
    'python_requires': '>=3.8',

}
from speedup import build
build(setup_kwargs)


setup(**setup_kwargs)
