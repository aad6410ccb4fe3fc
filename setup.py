"""Setup script for Loot Backpack."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
readme_path = Path(__file__).parent / "README.md"
if readme_path.exists():
    with open(readme_path, "r", encoding="utf-8") as f:
        long_description = f.read()
else:
    long_description = "A terminal loot backpack with a fixed number of slots"

# Read requirements
def read_requirements(filename):
    """Read requirements from file."""
    req_path = Path(__file__).parent / "requirements" / filename
    if req_path.exists():
        with open(req_path, "r") as f:
            return [line.strip() for line in f if line.strip() and not line.startswith("#") and not line.startswith("-r")]
    return []

setup(
    name="loot-backpack",
    version="0.1.0",
    description="A terminal loot backpack with a fixed number of slots",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=read_requirements("base.txt"),
    extras_require={
        "dev": read_requirements("dev.txt"),
        "test": read_requirements("test.txt"),
    },
    entry_points={
        "console_scripts": [
            "loot-backpack=backpack.client.terminal_menu:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment",
    ],
    keywords="inventory backpack game text terminal",
    include_package_data=True,
    zip_safe=False,
)
