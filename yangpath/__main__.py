# Copyright © 2020–2026 Yangpath contributors
#
# This file is part of Yangpath.
#
# Yangpath is free software: you can redistribute it and/or modify it under the
# terms of the GNU Lesser General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option) any
# later version.
#
# Yangpath is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU Lesser General Public License for more
# details.
#
# You should have received a copy of the GNU Lesser General Public License along
# with Yangpath.  If not, see <http://www.gnu.org/licenses/>.

"""This module defines the entry point for the path export script."""

import argparse
import importlib.metadata
import logging
import os
import sys
from typing import Optional
from yangson.exceptions import (
    BadYangLibraryData, FeaturePrerequisiteError, ModuleNotFound,
    ModuleNotRegistered, YangsonException)
from .enumerations import NodeFilter, OutputFormat, PathStyle, TypeVerbosity
from .exceptions import ModuleFileNotFound, TemplateError
from .loader import load_module
from .path import paths
from .renderer import RenderOptions, render


def main(argv: Optional[list[str]] = None) -> int:
    """Entry-point for the command-line utility.

    Args:
        argv: Command-line arguments, ``sys.argv[1:]`` by default.

    Returns:
        Numeric return code (0=no error, 2=YANG error, 1=other)
    """
    parser = argparse.ArgumentParser(
        prog="yangpath",
        description="Export paths from YANG modules.")
    parser.add_argument(
        "-V", "--version", action="version",
        version=f"%(prog)s {importlib.metadata.version('yangpath')}")
    parser.add_argument(
        "--debug", action="store_true", help="enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)
    export = subparsers.add_parser(
        "export", help="export xpath-styled paths from a given YANG module")
    export.add_argument(
        "-m", "--module", required=True, metavar="FILE",
        help="path to the YANG file to use for path export")
    export.add_argument(
        "-y", "--yang-dir", action="append", metavar="DIR",
        help=("directory with YANG modules, can be used multiple times"
              " (default: $YANG_MODPATH or current directory)"))
    export.add_argument(
        "-f", "--format", choices=["text", "html"], default="text",
        help="paths output format (default: %(default)s)")
    export.add_argument(
        "-s", "--style", choices=["xpath", "restconf"], default="xpath",
        help="style of the path (default: %(default)s)")
    export.add_argument(
        "--with-module", choices=["yes", "no"], default="no",
        help="print module name (default: %(default)s)")
    export.add_argument(
        "--node-state", action=argparse.BooleanOptionalAction, default=True,
        help="print node state")
    export.add_argument(
        "-o", "--only-nodes", choices=["all", "config", "state"],
        default="all",
        help="display only nodes of the given type (default: %(default)s)")
    export.add_argument(
        "--types", choices=["yes", "no", "detailed"], default="detailed",
        help="display path type information (default: %(default)s)")
    export.add_argument(
        "--template", metavar="FILE",
        help="path to HTML template to use instead of the default one")
    export.add_argument(
        "--template-vars", action="append", default=[], metavar="KEY:::VALUE",
        help="extra template variable, can be used multiple times")
    export.add_argument(
        "--no-color", action="store_true",
        help="disable colored terminal output")
    args = parser.parse_args(argv)
    logging.basicConfig(
        format="%(levelname)s: %(message)s",
        level=logging.DEBUG if args.debug else logging.WARNING)
    return export_paths(args)


def export_paths(args: argparse.Namespace) -> int:
    """Run the export command with parsed arguments."""
    yang_dirs = (args.yang_dir if args.yang_dir else
                 os.environ.get("YANG_MODPATH", ".").split(":"))
    options = RenderOptions(
        format=OutputFormat[args.format],
        style=PathStyle[args.style],
        with_module=args.with_module == "yes",
        node_state=args.node_state,
        only_nodes=NodeFilter[args.only_nodes],
        types=TypeVerbosity[args.types],
        template=args.template,
        template_vars=args.template_vars)
    try:
        tree = load_module(args.module, yang_dirs)
    except ModuleFileNotFound as e:
        print("Module file not found:", str(e), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print("YANG module:", str(e), file=sys.stderr)
        return 1
    except BadYangLibraryData as e:
        print("Invalid YANG library:", str(e), file=sys.stderr)
        return 2
    except FeaturePrerequisiteError as e:
        print("Unsupported pre-requisite feature:", str(e), file=sys.stderr)
        return 2
    except ModuleNotFound as e:
        print("Module not found:", str(e), file=sys.stderr)
        return 2
    except ModuleNotRegistered as e:
        print("Module not registered:", str(e), file=sys.stderr)
        return 2
    except YangsonException as e:
        print("YANG error:", f"{type(e).__name__}: {e}", file=sys.stderr)
        return 2
    colorize = options.format == OutputFormat.text and not args.no_color
    try:
        render(paths(tree, colorize), options)
    except TemplateError as e:
        print("Template:", str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
