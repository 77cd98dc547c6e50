#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import setup

try:
    with open('README.rst') as readme_file:
        readme = readme_file.read()
except FileNotFoundError:
    readme = ''

requirements = [
    'pyyaml',
]

test_requirements = [
    'biopython',
]

setup(
    name='fqdepth',
    version='0.1.0',
    description="fqdepth computes the average sequencing depth of FASTQ reads "
    "against a FASTA or GenBank reference genome.",
    long_description=readme,
    packages=[
        'fqdepth',
    ],
    package_dir={
        'fqdepth': 'fqdepth'
    },
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    entry_points={
        'console_scripts': ['fastq-depth=fqdepth.fqdepth:run'],
    },
    scripts=[
        'bin/genome_length.py',
        'bin/reads_size.py',
    ],
    license='GNU GPLv3',
    zip_safe=False,
    keywords='fqdepth coverage fastq',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
    ],
    test_suite='tests',
    tests_require=test_requirements
)
