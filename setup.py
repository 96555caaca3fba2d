"""Setup for Cuey Python SDK"""

from setuptools import setup, find_packages

setup(
    name="cuey-sdk",
    version="0.1.0",
    description="Python SDK for the Cuey webhook scheduling API",
    author="Cuey Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "httpx>=0.25.2",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
        ],
    },
    python_requires=">=3.11",
)
