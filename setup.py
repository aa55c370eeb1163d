"""
Setup script for mergestats package.
"""

from setuptools import setup, find_packages
import os

# Read the README file for long description
readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
if os.path.exists(readme_path):
    with open(readme_path, 'r', encoding='utf-8') as f:
        long_description = f.read()
else:
    long_description = "mergestats: exact descriptive statistics with mergeable accumulators"

# Read requirements
requirements = [
    'numpy>=1.24.0',
    'pandas>=1.5.0',
]

# Development requirements
dev_requirements = [
    'pytest>=6.0.0',
    'hypothesis>=6.0.0',
]

setup(
    name='mergestats',
    version='0.1.0',
    description='Exact descriptive statistics with mergeable accumulators',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='mergestats Development Team',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    python_requires='>=3.11',
    install_requires=requirements,
    extras_require={
        'dev': dev_requirements,
        'test': dev_requirements,
        'all': requirements + dev_requirements,
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    keywords='statistics, streaming, online algorithms, mergeable accumulators, median, variance',
    include_package_data=True,
    zip_safe=False,
)
