from __future__ import annotations

from setuptools import find_packages, setup  # type: ignore


setup(
    name="stockroom",
    version="0.1.0",
    description="In-memory inventory registry indexed by id and by description",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "stockroom=stockroom.__main__:main",
        ],
    },
)
