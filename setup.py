import builtins

import setuptools
from setuptools import setup

builtins.__KIOSKMAP_SETUP__ = True
import kioskmap


def setup_package():
    with open("README.md", "r", encoding="utf-8") as f:
        readme = f.read()

    setup(
        name="kioskmap",
        version=kioskmap.__version__,
        packages=setuptools.find_packages(exclude=["tests"]),
        license="BSD",
        description="Map navigation core for wayfinding kiosks",
        long_description=readme,
        long_description_content_type="text/markdown",
        python_requires=">=3.8",
        classifiers=[
            "Intended Audience :: Developers",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "License :: OSI Approved",
        ],
        entry_points={
            "console_scripts": ["kioskmap-fit = kioskmap.cmdline:run_fit"]
        },
        install_requires=[
            "fsspec[http]>=2024.12.0",
        ],
        extras_require={
            "test": [
                "pytest>=6.2.5,<9",
                "black==22.3.0",
                "pytest-httpserver",
            ],
            "development": ["pre-commit==2.6.0"],
        },
    )


if __name__ == "__main__":
    setup_package()

    del builtins.__KIOSKMAP_SETUP__
