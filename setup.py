#!python

import os.path, sys
from setuptools import setup, find_packages

sys.path.insert(0, os.path.abspath("src"))
from raiz import __version__, versionstring


if __name__ == "__main__":
    setup(
        name="Raiz",
        version=versionstring(),
        package_dir={'': 'src'},
        packages=find_packages("src"),

        author="Matt Chaput",
        author_email="matt@whoosh.ca",

        description="Pure-Python Porter-style stemmer for Spanish words.",
        long_description=open("README.txt").read(),

        license="Two-clause BSD license",
        keywords="stem stemmer spanish search index text",

        zip_safe=True,
        python_requires=">=3.6",
        extras_require={"test": ["pytest"]},

        classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: Spanish",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing :: Indexing",
        "Topic :: Text Processing :: Linguistic",
        ],
    )
