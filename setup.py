"""Setup.py file
"""
import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="DeMultiSeq",
    version="0.1.0",
    author="Noam Teyssier",
    description="Demultiplexes MULTI-seq paired-end reads into UMI counts per cell barcode and sample tag",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    entry_points={"console_scripts": ["DeMultiSeq = demultiseq.__main__:main"]},
    classifiers=(
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ),
    install_requires=[
        "polars>=0.20.3",
        "rapidfuzz>=3.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0.0",
            "pytest-dependency>=0.5.1",
        ]
    },
    python_requires=">=3.10",
)
