"""Install file for planckview.

Typical install procedure, plus:

- use README.md as long_description, if it exists
- read version number from __version__.txt


Examples
--------

Install (normal, use-only)::

    pip install .

Or (create an alias, so you can still edit)::

    pip install -e .[dev]

Notes
-----

For developers:

when creating a new version, just update the planckview/__version__.txt file
"""
import io
from os.path import abspath, dirname, exists, join

from setuptools import find_packages, setup

# Build description from README
# -----------------------------

description = "Blackbody radiation simulator: Planck spectrum, visible energy fraction and perceptual colors"
readme_path = join(abspath(dirname(__file__)), "README.md")
if not exists(readme_path):
    long_description = description
else:
    with io.open(readme_path, encoding="utf-8") as f:
        long_description = f.read()

# Read version number from file
with open(join(dirname(__file__), "planckview", "__version__.txt")) as version_file:
    __version__ = version_file.read().strip()


#%% Main install routine
def run_setup():
    setup(
        name="planckview",
        version=__version__,
        description=description,
        long_description=long_description,
        long_description_content_type="text/markdown",
        license="GNU Lesser General Public License v3 (LGPLv3)",
        keywords=[
            "blackbody",
            "planck",
            "spectrum",
            "radiation",
            "visible",
            "color",
            "simulator",
        ],
        packages=find_packages(include=["planckview", "planckview.*"]),
        install_requires=[
            "astropy>=4.3.1",  # Unit aware calculations
            "hjson",  # Json with comments (for default_planckview.json)
            "numpy",
            "numba",  # just-in-time compiler
            "plotly>=2.5.1",  # for HTML output of the spectrum
            "termcolor",  # terminal colors
        ],
        extras_require={
            "dev": [
                "numpydoc",  # for Jedi (autocompletion) to recognize
                "black>=20.8b1",  # for code-linting in accordance to PEP8
                "isort",  # for sorting imports
                "pre-commit",  # to enforce Black before each commit
                "pytest",  # to run test suite
            ],
        },
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Science/Research",
            "Intended Audience :: Education",
            "License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)",
            "Topic :: Scientific/Engineering",
            "Programming Language :: Python",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Operating System :: OS Independent",
        ],
        include_package_data=True,
        package_data={"planckview": ["default_planckview.json", "__version__.txt"]},
        zip_safe=False,  # impossible as long as we have external files read with __file__ syntax
        platforms="any",
    )


# %% Run Main install routine
run_setup()
