#!/usr/bin/env python3
"""
Setup script for pinkmoon - Moon Phase Display Widget
"""

from setuptools import setup, find_packages
import os

# Read the README file
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return 'Moon phase calculation and disc rendering for e-ink displays'

# Read requirements
def read_requirements(filename):
    req_path = os.path.join(os.path.dirname(__file__), filename)
    requirements = []
    if os.path.exists(req_path):
        with open(req_path, 'r') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#') and not line.startswith('-r'):
                    requirements.append(line)
    return requirements

setup(
    name='pinkmoon',
    version='0.1.0',
    description='Moon phase calculation and disc rendering for e-ink displays',
    long_description=read_readme(),
    long_description_content_type='text/markdown',

    # Package discovery
    packages=find_packages(include=['moonphase', 'moonphase.*']),
    py_modules=[
        'http_server',
        'moon_example',
    ],

    # Include non-Python files
    package_data={
        'moonphase': ['templates/*.html'],
    },
    include_package_data=True,

    # Dependencies
    install_requires=read_requirements('requirements.txt'),
    extras_require={
        'dev': read_requirements('requirements-dev.txt'),
    },

    python_requires='>=3.9',

    # Entry points for command-line scripts
    entry_points={
        'console_scripts': [
            'moon-server=http_server:run_server',
            'moon-preview=moon_example:main',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Scientific/Engineering :: Astronomy',
    ],

    keywords='moon phase lunar display eink trmnl pillow',

    license='MIT',

    zip_safe=False,
)
