import io
import re

from setuptools import setup


with io.open("emmett_fastxml/__version__.py", "rt", encoding="utf8") as f:
    version = re.search(r'__version__ = "(.*?)"', f.read()).group(1)

setup(
    name="emmett-fastxml",
    version=version,
    description="Fast xml serialization of Emmett ORM records",
    license="BSD-3-Clause",
    packages=["emmett_fastxml"],
    python_requires=">=3.8",
    install_requires=[
        "emmett",
        "lxml"
    ],
    extras_require={
        "test": ["pytest"]
    }
)
