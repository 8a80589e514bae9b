import re

from setuptools import setup, find_packages


def get_version(filename):
    with open(filename) as fh:
        metadata = dict(re.findall('__([a-z]+)__ = "([^"]+)"', fh.read()))
        return metadata["version"]


setup(
    name="minilisp",
    version=get_version("minilisp/__init__.py"),
    description="Minimal Lisp reader and tree-walking evaluator",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["minilisp", "minilisp.*"]),
    install_requires=[],
    extras_require={"test": ["tox", "pytest"]},
    python_requires=">=3.7",
    classifiers=[
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
    ],
)
