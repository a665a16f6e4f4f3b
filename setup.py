from pathlib import Path
from setuptools import setup, find_packages

here = Path(__file__).parent
version_ns = {}
with open(here / "jupyverse_client" / "_version.py") as f:
    exec(f.read(), {}, version_ns)

setup(
    name="jupyverse_client",
    version=version_ns["__version__"],
    url="https://github.com/jupyter-server/jupyverse.git",
    author="Jupyter Development Team",
    author_email="jupyter@googlegroups.com",
    description="An async client for the Jupyter contents API",
    packages=find_packages(include=["jupyverse_client", "jupyverse_client.*"]),
    python_requires=">=3.10",
    install_requires=[
        "anyio>=4.0",
        "httpx",
        "pydantic>=2",
        "structlog",
        "rich-click",
    ],
    extras_require={
        "test": [
            "pytest",
            "black",
            "mypy",
            "flake8",
        ],
    },
    entry_points={
        "console_scripts": ["jupyverse-contents = jupyverse_client.cli:main"],
    },
    classifiers=(
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
    ),
)
