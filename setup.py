#!/usr/bin/env python3
"""Setup script for GraphSketch."""

from setuptools import setup, find_packages


setup(
    name="graphsketch",
    version="1.0.0",
    description="An interactive node and edge sketchpad for the desktop",
    author="GraphSketch Project",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "PyGObject>=3.46.0",
        "pycairo>=1.25.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "graphsketch=graphsketch.launcher:main",
        ],
        "gui_scripts": [
            "graphsketch-gui=graphsketch.launcher:main",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: X11 Applications :: GTK",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Graphics :: Editors",
    ],
)
