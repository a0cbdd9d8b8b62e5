import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="graphsearch",
    version="0.1.0",
    author="Graphsearch developers",
    description="Generic shortest-path search and union-find for puzzle solvers.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["graphsearch", "graphsearch.*"]),
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "frozendict>=2.3.8",
        "numpy>=1.24",
        "typing_extensions>=4.6",
    ],
    extras_require={
        "test": [
            "pytest",
            "parameterized",
        ],
        "docs": [
            "sphinx",
            "sphinx_rtd_theme",
        ],
    },
)
