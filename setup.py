"""The script for building the Tessera package."""

from pathlib import Path

from setuptools import find_packages, setup

DESCRIPTION = (
    'The behavior-composition layer for interactive UI elements: '
    'style flags, focus order and multiple choice widgets.'
)

LONG_DESCRIPTION = Path('README.md').read_text(encoding='utf-8')


with Path('requirements.txt').open(encoding='utf-8') as outfile:
    requirements = outfile.read().splitlines()

setup(
    name='tessera',
    version='0.1.0',
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    license='Apache License, Version 2.0',
    packages=find_packages(exclude=('demos.*', 'demos', 'tests.*', 'tests')),
    include_package_data=True,
    data_files=[('', ['requirements.txt'])],
    install_requires=requirements,
    python_requires='>=3.10',
    keywords='python widgets ui behaviors',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Software Development :: User Interfaces',
    ],
)
