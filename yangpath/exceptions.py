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

"""Exceptions used by the Yangpath package.

This module defines the following exceptions:

* :exc:`ModuleFileNotFound`: The YANG module file to export doesn't exist.
* :exc:`TemplateError`: Base class for errors of HTML output templates.
* :exc:`TemplateNotFound`: A template file cannot be read.
* :exc:`TemplateSyntaxError`: A template is syntactically invalid.
* :exc:`YangPathException`: Base class for all Yangpath exceptions.
"""

from typing import Optional


class YangPathException(Exception):
    """Base class for all Yangpath exceptions."""
    pass


class ModuleFileNotFound(YangPathException):
    """The YANG module file to export doesn't exist."""

    def __init__(self, filename: str):
        self.filename = filename

    def __str__(self):
        return self.filename


class TemplateError(YangPathException):
    """Abstract class for template errors."""

    def __init__(self, name: str, reason: Optional[str] = None):
        self.name = name
        self.reason = reason

    def __str__(self):
        return (f"{self.name}: {self.reason}" if self.reason
                else self.name)


class TemplateNotFound(TemplateError):
    """A template file cannot be read."""
    pass


class TemplateSyntaxError(TemplateError):
    """A template is syntactically invalid."""

    def __init__(self, name: str, reason: str, lineno: Optional[int] = None):
        super().__init__(name, reason)
        self.lineno = lineno

    def __str__(self):
        loc = f"{self.name}:{self.lineno}" if self.lineno else self.name
        return f"{loc}: {self.reason}"
