"""
PanelComposer – compose interactive plots into nested, axis-linked grids.
"""

import re
from pathlib import Path
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()


def read_version():
    """Read version from PanelComposer/version.py without importing package."""
    version_path = Path(__file__).resolve().parent / "PanelComposer" / "version.py"
    text = version_path.read_text(encoding="utf-8")
    match = re.search(r'^__version__\s*=\s*"([^"]+)"', text, re.MULTILINE)
    if not match:
        raise RuntimeError("Unable to find __version__ in PanelComposer/version.py")
    return match.group(1)


setup(
    name="panelcomposer",
    version=read_version(),
    author="PanelComposer Team",
    description="Arrange multiple interactive plots into composite subplot layouts",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Visualization",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "matplotlib>=3.4.0",
        "pandas>=1.3.0",
        "plotly>=6.1.1",
    ],
    entry_points={
        'console_scripts': [
            'panelcomposer-preview=PanelComposer.web_app.app_cli:main',
        ],
    },
    extras_require={
        "web": [
            "streamlit>=1.20.0",
        ],
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
        ],
    },
)
