"""Setup configuration for fluent-assert."""

from setuptools import setup, find_packages

setup(
    name="fluent-assert",
    version="0.1.0",
    description="Fluent assertions and ordered scenario verification for tests",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
