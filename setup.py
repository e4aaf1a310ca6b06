#!/usr/bin/env python3
"""Installation script for the pnmenc library.

Adapted from
https://www.jeffknupp.com/blog/2013/08/16/open-sourcing-a-python-project-the-right-way/.
"""
__author__ = "pnmenc contributors"
__since__ = "2019/09/19"

import os
import importlib
import configparser
from setuptools import setup, find_packages

setup_package_list = ["setuptools", "wheel"]

for module_name in setup_package_list:
    try:
        importlib.import_module(module_name)
    except (ModuleNotFoundError, ImportError) as ex:
        raise ModuleNotFoundError(
            f"\n\n{'@' * 80}\n"
            f"{'@' * 80}\n"
            "\n"
            f"Package {module_name} needs to be installed in your python environment "
            f"to be able to install pnmenc.\n"
            f"The full list of pre-installation requirements is: "
            f"{', '.join(setup_package_list)}.\n\n"
            f"Please run `pip install {' '.join(setup_package_list)}` "
            f"before installing pnmenc\n\n"
            f"{'@' * 80}\n"
            f"{'@' * 80}\n"
            "\n") from ex

# Read the configuration from ./pnmenc/config/pnmenc.ini, section "pnmenc"
pnmenc_options = configparser.ConfigParser()
pnmenc_options.read(
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "pnmenc", "config",
                 "pnmenc.ini"), encoding="utf-8")
pnmenc_options = pnmenc_options["pnmenc"]

with open("README.md", "r", encoding="utf-8") as readme_file:
    setup(
        # Metadata about the project
        name=pnmenc_options["name"],
        version=pnmenc_options["version"],
        license=pnmenc_options["license"],
        author=pnmenc_options["author"],
        description=pnmenc_options["description"],
        long_description=readme_file.read(),
        long_description_content_type="text/markdown",
        platforms=pnmenc_options["platforms"],
        python_requires=pnmenc_options["python_requires"],
        classifiers=[
            "Programming Language :: Python",
            f"Development Status :: {pnmenc_options['development_status']}",
            "Natural Language :: English",
            "Intended Audience :: Developers",
            f"License :: OSI Approved :: {pnmenc_options['license']}",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3",
            "Topic :: Multimedia :: Graphics :: Graphics Conversion",
        ],

        # Dependencies
        setup_requires=setup_package_list,

        install_requires=["appdirs", "numpy", "rich"],
        extras_require={"test": ["imageio", "pillow", "pytest"]},

        packages=[p for p in find_packages() if p.startswith("pnmenc")],
        package_data={"pnmenc": ["config/*.ini"]},
        include_package_data=True)
