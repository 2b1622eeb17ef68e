from pathlib import Path
from setuptools import setup, find_packages


def read_requirements(filename):
    with open(filename) as f:
        return [req for req in (req.partition('#')[0].strip() for req in f) if req]


setup(
    name='pggeom',
    version='0.1.0',
    description='PostGIS geometry value model with WKT support.',
    long_description=Path('README.rst').read_text(),
    license='MIT',
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={'pggeom': ['config.yml']},
    install_requires=read_requirements('requirements.in'),
    extras_require={
        'test': read_requirements('requirements-test.in'),
    },
    python_requires='>=3.9',
    entry_points={
        'console_scripts': [
            'pggeom = pggeom.cli.main:app',
        ]
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Database',
        'Topic :: Scientific/Engineering :: GIS',
    ],
)
