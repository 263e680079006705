# setup.py
from setuptools import setup, find_packages

setup(
    name="lispette",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    # core.scm is read from disk at session start-up
    package_data={"lispette": ["prelude/*.scm"]},
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
