import runpy

from setuptools import setup

# Load constants without importing the package (which needs its runtime dependencies).
_const = runpy.run_path("optkit/const.py")
VERSION_STR = _const["VERSION_STR"]
DESCRIPTION = _const["DESCRIPTION"]

setup(
    name="optkit",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    author="Cute Engineering",
    author_email="contact@cute.engineering",
    url="https://cute.engineering/",
    packages=["optkit"],
    install_requires=[
        "dataclasses-json",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "optkit = optkit:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
