# -*- coding: utf-8 -*-

"""
observerdemo setuptools configuration file.
"""

from setuptools import setup


def readme():
    """Re-use the README.md file."""
    with open("README.md") as f:
        return f.read()


setup(
    name="observerdemo",
    version="0.1.0",
    description="A console demonstration of the Observer design pattern.",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Natural Language :: English",
        "License :: CeCILL-C Free Software License Agreement (CECILL-C)",
        "Programming Language :: Python :: 3",
    ],
    keywords="observer design-pattern",
    license="CECILL-C",
    package_dir={"": "src"},
    packages=["observerdemo", "observerdemo.entrypoints"],
    scripts=[
        "bin/observerdemo_demo.py",
        "bin/observerdemo_tui.py",
        "bin/observerdemo_dumppalette.py",
    ],
    install_requires=["urwid>=2.4"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.7",
    include_package_data=True,
    zip_safe=True,
)
