from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="campuspaths",
    version="0.1.0",
    description="Shortest walking routes between campus buildings over a weighted multigraph.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"campuspaths.data": ["*.csv"]},
    python_requires=">=3.9",
    install_requires=[
        "networkx>=2.8",
        "numpy>=1.22",
        "pandas>=1.5",
        "PyYAML>=6.0",
        "Flask>=2.2",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["campuspaths=campuspaths.cli:main"]},
)
