from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="flownet",
    version="0.1.0",
    description="Maximum flow on capacitated directed networks (Edmonds-Karp).",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=["networkx", "numpy", "PyYAML"],
    extras_require={"test": ["pytest"]},
    tests_require=["pytest"],
    entry_points={"console_scripts": ["flownet=flownet.cli:main"]},
)
