import re
from pathlib import Path
from setuptools import setup, find_packages

ROOT = Path(__file__).resolve().parent


def read_readme() -> str:
    readme_path = ROOT / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


def read_version() -> str:
    text = (ROOT / "hutch" / "version.py").read_text(encoding="utf-8")
    return re.search(r'^ENGINE_VERSION = "([^"]+)"', text, re.M).group(1)


setup(
    name="hutch",
    version=read_version(),
    packages=find_packages(include=["hutch", "hutch.*"]),
    install_requires=[
        "colorama>=0.4.6",
        "cryptography>=41.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["hutch=hutch.main:main"],
    },
    python_requires=">=3.10",
    description="Stateless site password generator",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
