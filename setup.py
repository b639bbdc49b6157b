# setup.py
from setuptools import setup, find_packages

setup(
    name="fractal_perception",
    version="0.1.0",
    description="Online multi-level sequence abstraction over streams of feature vectors",
    packages=find_packages(include=["fractal_perception", "fractal_perception.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
