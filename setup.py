"""
Setup script for pysatl-distributions.
"""

from setuptools import find_packages, setup

setup(
    name="pysatl-distributions",
    version="0.1.0",
    description=(
        "Probability distributions with special functions and random-variate "
        "generators for the PySATL project"
    ),
    author="Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.12",
    install_requires=[
        "numpy>=2.0",
        "scipy>=1.13",
        "mypy_extensions>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
)
