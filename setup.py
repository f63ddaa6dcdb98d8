"""
Setup script for mental-arith.

Mental Arith is the soroban (abacus) arithmetic engine behind the
mental arithmetic trainer. It serves three roles:

1. Formula Catalog - Named abacus techniques with difficulty tiers
2. Step Tracer - Column-by-column explanations of every calculation
3. Drill Generator - Randomized, contract-safe practice problems

The 'mental-arith' command is a terminal front-end for all three.
"""

from setuptools import find_packages, setup

setup(
    name="mental-arith",
    version="1.0.0",
    description="Soroban mental arithmetic formulas, step traces and drill generation",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="Mental Arith",
    packages=find_packages(include=["mental_arithmetic", "mental_arithmetic.*"]),
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "mental-arith=mental_arithmetic.cli.main:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="soroban abacus mental-arithmetic education drills",
)
