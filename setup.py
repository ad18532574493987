#!/usr/bin/env python3
"""
Setup script for mcstatusio
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_path = Path(__file__).parent / "README.md"
if readme_path.exists():
    with open(readme_path, "r", encoding="utf-8") as f:
        long_description = f.read()
else:
    long_description = "Client for the mcstatus.io Minecraft server status API"

# Read requirements
requirements_path = Path(__file__).parent / "requirements.txt"
if requirements_path.exists():
    with open(requirements_path, "r", encoding="utf-8") as f:
        requirements = [
            line.strip() 
            for line in f 
            if line.strip() and not line.startswith("#")
        ]
else:
    requirements = [
        "aiohttp>=3.8.5",
        "pyyaml>=6.0.1",
        "rich>=13.4.2",
        "pillow>=10.0.0",
    ]

# Optional dependencies
extras_require = {
    "dev": [
        "pytest>=7.4.0",
        "pytest-asyncio>=0.21.1",
        "black>=23.7.0",
        "flake8>=6.0.0",
        "mypy>=1.5.0",
    ],
}
extras_require["test"] = extras_require["dev"][:2]

setup(
    name="mcstatusio",
    version="0.1.0",
    author="mcstatusio contributors",
    description="Client for the mcstatus.io Minecraft server status API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["mcstatusio", "mcstatusio.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Games/Entertainment",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "mcstatusio=mcstatusio.main:run",
        ],
    },
    zip_safe=False,
    keywords=[
        "minecraft",
        "mcstatus",
        "server",
        "status",
        "api",
        "bedrock",
    ],
)
