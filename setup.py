import os

from setuptools import find_packages, setup


def read_package_variable(key, filename="__init__.py"):
    """Read the value of a variable from the package without importing."""
    module_path = os.path.join("src/gqlhttp", filename)
    with open(module_path) as module:
        for line in module:
            parts = line.strip().split(" ", 2)
            if parts[:-1] == [key, "="]:
                return parts[-1].strip("'").strip('"')
    return None


setup(
    name="gqlhttp",
    version=read_package_variable("VERSION"),
    description="gqlhttp: serve a GraphQL schema over HTTP",
    license="MIT",
    keywords="graphql http starlette asgi api python",
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["test", "test.*"]),
    include_package_data=True,
    entry_points={
        "console_scripts": ["gqlhttp=gqlhttp.cli:main", "gqlh=gqlhttp.cli:main"],
    },
    install_requires=[
        "anyio>=3.4",
        "appdirs>=1.4.3",
        "click>=7",
        "graphql-core>=3.2,<3.4",
        "starlette>=0.21",
        "uvicorn>=0.12",
    ],
    extras_require={
        "test": ["pytest", "pytest-cov", "httpx"],
        "dev": ["pylint", "black", "pre-commit"],
    },
)
