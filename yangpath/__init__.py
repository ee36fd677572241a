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

"""Export of XPath and RESTCONF paths from YANG modules."""

from .enumerations import (ConfigState, NodeFilter, NodeKind, OutputFormat,
                           PathStyle, TypeKind, TypeVerbosity)
from .exceptions import (ModuleFileNotFound, TemplateError, TemplateNotFound,
                         TemplateSyntaxError, YangPathException)
from .loader import load_module
from .path import PathAccumulator, PathRecord, paths, type_string, walk
from .renderer import (RenderOptions, parse_template_vars, render,
                       render_html, render_text)
from .schemanode import SchemaNode, TypeDescriptor
