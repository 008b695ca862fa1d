from setuptools import setup, find_packages


setup(
    name="biosymbols",
    version="0.4.0",
    description="Alphabets, sequences and genetic codes for biological "
                "sequence analysis",
    long_description="Polymorphic alphabets mapping the letters of "
                     "biological sequences to compact integer state codes, "
                     "with support for gaps, ambiguity codes, words, "
                     "codons and allelic states.",
    author="The biosymbols developers",
    license="BSD 3-Clause",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
    packages=find_packages("src"),
    package_dir={"": "src"},
    package_data={
        "biosymbols": ["*.pyi"],
        "biosymbols.sequence": ["codon_tables.txt"],
        "biosymbols.sequence.index": [
            "index_data/*.txt", "index_data/pairwise/*.txt"
        ],
    },
    python_requires=">=3.9",
    install_requires=["numpy >= 1.21"],
    extras_require={
        "test": ["pytest"],
    },
)
