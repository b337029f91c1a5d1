# -*- coding: utf-8 -*-

from setuptools import setup, find_packages


with open('README.md') as f:
    readme = f.read()

setup(
    name='py_fields',
    version='0.1.0',
    description='Prime and extension field arithmetic for pairing-friendly curves',
    long_description=readme,
    long_description_content_type='text/markdown',
    author='',
    author_email='',
    url='https://github.com/ethereum/research',
    packages=find_packages(exclude=('tests', 'docs')),
    python_requires='>=3.8',
    install_requires=[
        'gmpy2>=2.1',
    ],
    extras_require={
        'test': [
            'pytest',
            'py_ecc>=5.0',
        ],
    },
)
