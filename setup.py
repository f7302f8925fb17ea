# setup.py
from setuptools import setup, find_packages

setup(
    name="risp",
    version="0.1.0",
    description="A small embeddable expression language for decision rules",
    packages=find_packages(include=["risp", "risp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["risp=risp.cli:main"],
    },
    zip_safe=False,
)
