#!/usr/bin/env python
import os

from setuptools import find_packages, setup

here = os.path.abspath(os.path.dirname(__file__))

about = {}
with open(os.path.join(here, "src", "qoi_tools", "version.py")) as f:
    exec(f.read(), about)


setup(
    name="qoi-tools",
    version=about["__version__"],
    description="Python package for encoding and decoding QOI images",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "attrs>=23.0.0",
        "numpy",
        "Pillow>=10.3.0",
    ],
    extras_require={
        "tests": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "qoi-tools=qoi_tools.__main__:main",
        ],
    },
)
