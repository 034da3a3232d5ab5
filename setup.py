# setup.py - Build the coxeter-inversions distribution
from setuptools import setup, find_packages

setup(
    name="coxeter-inversions",
    version="0.1.0",
    description="Reflection and inversion-sequence engine for Coxeter systems",
    packages=find_packages(include=["coxeter_core", "coxeter_core.*",
                                    "coxeter_inversions", "coxeter_inversions.*"]),
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)
