"""
Setup script for the pointgeom package.
"""
from setuptools import setup, find_packages
import os

# Read version from __init__.py
def read_version():
    with open(os.path.join('pointgeom', '__init__.py'), 'r') as f:
        for line in f:
            if line.startswith('__version__'):
                return line.split('=')[1].strip().strip('"').strip("'")
    return '0.1.0'

# Read long description from README
def read_readme():
    if os.path.exists('README.md'):
        with open('README.md', 'r', encoding='utf-8') as f:
            return f.read()
    return ''

setup(
    name='pointgeom',
    version=read_version(),
    author='pointgeom Development Team',
    description='Flat manifold point types (Point2, Point3, StereoPoint2) for factor-graph estimation',
    long_description=read_readme(),
    long_description_content_type='text/markdown',
    packages=find_packages(include=['pointgeom', 'pointgeom.*']),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Mathematics',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.20.0',
        'scipy>=1.9.0',
        'pyyaml>=5.4.0',
    ],
    extras_require={
        'dev': [
            'pytest>=6.2.0',
            'pytest-cov>=2.11.0',
            'black>=21.0',
            'flake8>=3.9.0',
            'mypy>=0.910',
        ],
    },
    include_package_data=True,
    package_data={
        'pointgeom': ['config/*.yaml'],
    },
    zip_safe=False,
)
