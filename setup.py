"""
Set up package.
Required modules: pydantic_core, pydantic (basetypes.py, supertypes.py; Pair is used by combine.py and mappings.py), toolz (transform.py, grouping.py, segment.py)
"""
from setuptools import setup, find_packages

setup(
    name='kollect',
    version='0.3',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    python_requires='>=3.10',
    install_requires=[
        'pydantic_core',
        'pydantic>=2',
        'toolz',
    ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
        ],
    },
)
