#!/usr/bin/env python3
"""
Setup script for transcriptqda package.
"""

from setuptools import setup, find_packages

setup(
    name="transcriptqda",
    version="0.1.0",
    description="Exploratory text analysis for interview transcripts",
    author="transcriptqda Team",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[
        "pandas>=2.0",
        "numpy>=1.24",
        "scipy>=1.10",
        "scikit-learn>=1.3",
        "spacy>=3.7",
        "nltk>=3.8",
        "matplotlib>=3.7",
        "seaborn>=0.13",
        "wordcloud>=1.9",
        "typer>=0.9",
        "rich>=13.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "transcriptqda=transcriptqda.cli.main:main",
        ],
    },
)
