#!/usr/bin/env python

import toolexec
from setuptools import setup

install_requires = ['toml']
extras_require = {'test': ['pytest']}

# Get contents of README file
with open('README.md', 'r') as f:
    readme = f.read()

setup(name='toolexec',
      version=toolexec.__version__,
      packages=['toolexec'],
      license='MIT',
      long_description=readme,
      long_description_content_type='text/markdown',
      description='Run packaging tools and report their failures',
      keywords=['subprocess', 'bundletool', 'android', 'packaging'],
      python_requires='>=3.8',
      install_requires=install_requires,
      extras_require=extras_require)
