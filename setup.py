# setup.py
from setuptools import setup, find_packages

setup(
    name="slisp",
    version="0.1.0",
    description="A minimal s-expression interpreter",
    packages=find_packages(include=["slisp", "slisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["slisp=slisp.__main__:main"],
    },
    zip_safe=False,
)
