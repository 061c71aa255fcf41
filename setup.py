"""Setup script for tfvc-core."""

from setuptools import find_packages, setup

setup(
    name="tfvc-core",
    version="0.1.0",
    description="TFVC path-space canonicalization and pending-change classification",
    python_requires=">=3.10",
    packages=find_packages(include=["tfvc", "tfvc.*"]),
    install_requires=[
        "click>=8.1",
        "dependency-injector>=4.41",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "tomli>=2.0; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "tfvc=tfvc.__main__:main",
        ],
    },
)
