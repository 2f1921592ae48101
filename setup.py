# setup.py
from setuptools import setup, find_packages

setup(
    name="lambda-expression",
    version="0.1.0",
    description="Untyped lambda calculus on host closures, with Church and Scott codecs",
    packages=find_packages(include=["lambda_expression", "lambda_expression.*"]),
    python_requires=">=3.11",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
