from setuptools import setup

setup(
    name = "yangpath",
    packages = ["yangpath"],
    version = "1.0.0",
    description = "Export of XPath and RESTCONF paths from YANG modules",
    author = "Yangpath contributors",
    entry_points = {
        "console_scripts": ["yangpath=yangpath.__main__:main"]
        },
    python_requires = ">=3.9",
    install_requires = ["yangson", "Jinja2", "termcolor>=2.1"],
    extras_require = {"test": ["pytest"]},
    keywords = ["yang", "xpath", "restconf", "paths"],
    classifiers = [
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries",
        "Topic :: System :: Systems Administration"],
    long_description = """\
.. |date| date::

*******************
Welcome to Yangpath
*******************

*Yangpath* is a Python 3 tool for exporting paths of all leaves
defined in a YANG_ module, either in XPath or RESTCONF_ style, as
plain text or as an HTML table.

Installation
============

::

    python -m pip install yangpath

Usage
=====

::

    yangpath export -m interfaces.yang -y yang-modules -s restconf

.. _YANG: https://tools.ietf.org/html/rfc7950
.. _RESTCONF: https://tools.ietf.org/html/rfc8040
"""
    )
