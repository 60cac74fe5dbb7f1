from setuptools import setup, find_packages

setup(
    name="tui-styles",
    version="0.1.0",
    description="Terminal text styling and layout: box model, borders and block composition",
    packages=find_packages(exclude=("tests", "tests.*", "examples", "examples.*")),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    python_requires=">=3.9",
)
