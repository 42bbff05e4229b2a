"""
Setup script for the rumble-engine package.

Installs the rumble_engine package from src/ together with its SQLite
schema, and the `rumble-engine` host console command.
"""

from setuptools import setup, find_packages

setup(
    name="rumble-engine",
    version="1.0.0",
    description="Elimination match engine for battle royal watch parties",
    author="Rumble Party Team",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    package_data={
        "rumble_engine._store": ["schema.sql"],
    },
    entry_points={
        "console_scripts": [
            "rumble-engine=rumble_engine.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
