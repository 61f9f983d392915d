#!/usr/bin/env python
from setuptools import setup, find_packages

with open('README.rst') as f:
    long_description = f.read()

setup(
    name='bitnat',
    version='0.1.0',
    description='Persistent binary natural numbers with structurally shared bits',
    long_description=long_description,
    packages=find_packages(exclude=('tests', 'docs', 'examples')),
    python_requires='>=3.8',
    install_requires=[
        'attrs>=19.2',
        'graphviz',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
