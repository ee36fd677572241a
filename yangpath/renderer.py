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

"""Rendering of path records.

This module implements the following class:

* RenderOptions: Options controlling the output.

and functions:

* parse_template_vars: Parse ``KEY:::VALUE`` template variables.
* render: Write path records in the format given by options.
* render_html: Write path records using an HTML template.
* render_text: Write path records as lines of text.
"""

import logging
import sys
from typing import Iterable, Optional, TextIO
import jinja2
from .enumerations import (ConfigState, NodeFilter, OutputFormat, PathStyle,
                           TypeVerbosity)
from .exceptions import TemplateError, TemplateNotFound, TemplateSyntaxError
from .path import PathRecord
from .typealiases import TemplateVar, TemplateVars

logger = logging.getLogger(__name__)

VAR_SEPARATOR = ":::"
"""Separator of key and value in template variable arguments."""

DEFAULT_TEMPLATE = """\
<table class="table table-striped">
<thead>
  <tr>
    <th>#</th>
    <th>Module</th>
    <th>Path</th>
    <th>Leaf Type</th>
  </tr>
</thead>
<tbody>
{% for p in paths %}
  <tr>
    <td>{{ loop.index0 }}</td>
    <td>{{ p.module }}</td>
    <td>{{ p.xpath }}</td>
    <td>{{ p.type.name }}</td>
  </tr>
{% endfor %}
</tbody>
</table>
"""
"""Template used for HTML output if no other is given."""


class RenderOptions:
    """Options controlling the output of path records."""

    def __init__(self: "RenderOptions",
                 format: OutputFormat = OutputFormat.text,
                 style: PathStyle = PathStyle.xpath,
                 with_module: bool = False,
                 node_state: bool = True,
                 only_nodes: NodeFilter = NodeFilter.all,
                 types: TypeVerbosity = TypeVerbosity.detailed,
                 template: Optional[str] = None,
                 template_vars: Iterable[TemplateVar] = ()) -> None:
        """Initialize the class instance.

        Args:
            format: Output format.
            style: Path style (text output).
            with_module: Prepend module name (text output).
            node_state: Prepend ``[rw]`` or ``[ro]`` (text output).
            only_nodes: Filter nodes by config state (text output).
            types: Amount of type information (text output).
            template: Name of a file with HTML template.
            template_vars: Extra variables for HTML template.
        """
        self.format = format
        self.style = style
        self.with_module = with_module
        self.node_state = node_state
        self.only_nodes = only_nodes
        self.types = types
        self.template = template
        self.template_vars = list(template_vars)


def render(records: list[PathRecord], options: RenderOptions,
           out: Optional[TextIO] = None) -> None:
    """Write path records in the format given by `options`.

    Args:
        records: Path records in output order.
        options: Output options.
        out: Output stream, standard output by default.

    Raises:
        TemplateError: If the HTML template cannot be used.
    """
    out = out if out else sys.stdout
    if options.format == OutputFormat.html:
        render_html(records, options, out)
    else:
        render_text(records, options, out)


def render_text(records: list[PathRecord], options: RenderOptions,
                out: TextIO) -> None:
    """Write one line per path record that passes the node filter."""
    for rec in records:
        if not _passes(rec, options.only_nodes):
            continue
        fields = []
        if options.with_module:
            fields.append(rec.module)
        if options.node_state:
            fields.append("[ro]" if rec.read_only else "[rw]")
        fields.append(rec.xpath if options.style == PathStyle.xpath
                      else rec.restconf)
        if options.types == TypeVerbosity.yes:
            fields.append(rec.type.name)
        elif options.types == TypeVerbosity.detailed:
            fields.append(rec.stype)
        out.write("  ".join(fields) + "\n")


def _passes(rec: PathRecord, only: NodeFilter) -> bool:
    if only == NodeFilter.config:
        return rec.config == ConfigState.true
    if only == NodeFilter.state:
        return rec.config != ConfigState.true
    return True


def render_html(records: list[PathRecord], options: RenderOptions,
                out: TextIO) -> None:
    """Render the HTML template once with all path records.

    The template context contains ``paths`` (list of path records) and
    ``vars`` (dictionary of template variables).

    Raises:
        TemplateNotFound: If the template file cannot be read.
        TemplateSyntaxError: If the template is invalid.
        TemplateError: If rendering fails.
    """
    name = options.template if options.template else "<default>"
    template = load_template(options.template)
    context = {"paths": records,
               "vars": parse_template_vars(options.template_vars)}
    try:
        out.write(template.render(context))
    except jinja2.TemplateError as e:
        raise TemplateError(name, str(e)) from None


def load_template(filename: Optional[str] = None) -> jinja2.Template:
    """Return compiled HTML template.

    Args:
        filename: Name of the template file; default template if missing.

    Raises:
        TemplateNotFound: If the template file cannot be read.
        TemplateSyntaxError: If the template is invalid.
    """
    if filename:
        try:
            with open(filename, encoding="utf-8") as infile:
                text = infile.read()
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateNotFound(filename, str(e)) from None
    else:
        filename, text = "<default>", DEFAULT_TEMPLATE
    env = jinja2.Environment(autoescape=True)
    try:
        return env.from_string(text)
    except jinja2.TemplateSyntaxError as e:
        raise TemplateSyntaxError(filename, e.message, e.lineno) from None


def parse_template_vars(args: Iterable[TemplateVar]) -> TemplateVars:
    """Parse template variable arguments.

    Everything after the first separator is the value, so it may itself
    contain the separator. Arguments without separator are ignored.

    Args:
        args: Arguments in the form ``KEY:::VALUE``.
    """
    res: TemplateVars = {}
    for arg in args:
        key, sep, value = arg.partition(VAR_SEPARATOR)
        if not sep:
            logger.warning("ignoring variable %s", arg)
            continue
        res[key] = value
    return res
