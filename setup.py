#!/usr/bin/env python3

from setuptools import setup, find_packages
import os

# Read README file
readme_path = os.path.join(os.path.dirname(__file__), "README.md")
try:
    with open(readme_path, "r", encoding="utf-8") as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = "Simple web file server with optional upload and WebDAV"

requirements = [
    "Flask>=2.3.0",
    "Werkzeug>=2.3.0",
    "Jinja2>=3.1.0",
    "WsgiDAV>=4.3.0",
    "waitress>=2.1.0",
    "cheroot>=10.0.0",
    "click>=8.1.0",
    "requests>=2.31.0",
]

setup(
    name="sweb",
    version="1.0.0",
    author="sweb contributors",
    description="Simple web file server with optional upload and WebDAV",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=['sweb', 'sweb.*']),
    package_data={'sweb': ['templates/*.html']},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "sweb=sweb.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
