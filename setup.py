from setuptools import setup, find_packages

setup(
    name="metrika",
    version="0.1.0",
    packages=find_packages(include=["metrika", "metrika.*"]),
    install_requires=[
        "numpy>=1.21.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
        "docs": ["sphinx", "furo"],
    },
    description=(
        "Typed physical measurements (length, mass, time, temperature and data size) "
        "with safe, accurate conversion between units of the same kind."
    ),
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.10",
)
