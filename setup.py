"""
Setup script for the Nigeria geo data library.
"""

from setuptools import setup, find_packages

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

# Separate development requirements
dev_requirements = [req for req in requirements if any(dev in req for dev in ["pytest", "black", "flake8", "mypy", "sphinx"])]
install_requirements = [req for req in requirements if req not in dev_requirements]

setup(
    name="nigeria-geo",
    version="1.0.0",
    author="Data Analytics Team",
    description="Read-only access to Nigerian geopolitical zones, states and LGAs",
    long_description="Nigeria Geo Data - indexed, case-insensitive lookups, search and per-region statistics over the 6 geopolitical zones, 37 states and 774 Local Government Areas of Nigeria.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=install_requirements,
    extras_require={
        "dev": dev_requirements,
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
