from pathlib import Path
import re

from setuptools import find_packages, setup

_INIT = Path(__file__).parent / "src" / "catpath" / "__init__.py"
_VERSION = re.search(r"__version__ = '([^']+)'", _INIT.read_text(encoding="utf-8")).group(1)


setup(
    name="catpath",
    version=_VERSION,
    description="Merge directory path lists, dropping duplicates and missing directories",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "catpath=catpath.cli:main",
        ],
    },
)
