from setuptools import setup, find_packages

setup(
    name="consoleprinter",
    version="0.1.1",
    description="Styled, indentation-aware console documents and the hw command line",
    packages=find_packages(include=["consoleprinter", "consoleprinter.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "hw=consoleprinter.cli:main",
        ],
    },
    python_requires=">=3.12",
)
