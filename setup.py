# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Dynasor — Dynamic N-dimensional Tensors                             ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
Dynasor build configuration.

Pure Python on top of NumPy; there are no compiled extensions.

Build
-----
    pip install -e .                          # editable install
    pip install -e .[dev]                     # with test tooling
    python setup.py bdist_wheel               # wheel

Runtime environment variables (see ``dynasor.config``):
    DYNASOR_POLICY              — default execution policy (seq / par)
    DYNASOR_NUM_THREADS         — worker count for parallel fills
    DYNASOR_PARALLEL_THRESHOLD  — minimum elements before fills go parallel
    DYNASOR_CHECK_BOUNDS        — set to 0 to skip per-axis bounds checks
    DYNASOR_BIT_GENERATOR       — mt19937 (default) or pcg64
"""
import os

from setuptools import setup

# ── Package metadata ──
_readme = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'README.md')
try:
    with open(_readme, 'r', encoding='utf-8') as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = ''

setup(
    name='dynasor',
    version='0.1.0',
    author='Pictofeed, LLC',
    author_email='engineering@pictofeed.io',
    description=(
        'Dynamically-shaped dense N-dimensional tensors with seeded '
        'random factories — NumPy backed'
    ),
    long_description=long_description,
    long_description_content_type='text/markdown',
    url='https://github.com/pictofeed/dynasor',
    license='Proprietary',

    package_dir={
        'dynasor': '.',
    },
    packages=[
        'dynasor',
    ],

    python_requires='>=3.10',
    install_requires=[
        'numpy>=1.24',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: Other/Proprietary License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    zip_safe=False,
)
