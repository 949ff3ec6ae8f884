from pathlib import Path
import re

from setuptools import find_packages, setup

_INIT = Path(__file__).parent / "src" / "ghwrap" / "__init__.py"
_VERSION = re.search(r"__version__ = '([^']+)'", _INIT.read_text(encoding="utf-8")).group(1)


setup(
    name="ghwrap",
    version=_VERSION,
    description="git wrapper that expands hosting shorthands before running git",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["ghwrap = ghwrap.cli:main"]},
)
