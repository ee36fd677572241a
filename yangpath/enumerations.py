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

"""Enumeration classes."""

from enum import Enum

class NodeKind(Enum):
    """Enumeration of schema node kinds relevant for path export."""

    module = 1
    """Module, the root of a schema tree."""
    container = 2
    """Container node."""
    list = 3
    """List node, possibly with keys."""
    leaf_list = 4
    """Leaf-list node."""
    leaf = 5
    """Leaf node."""
    other = 6
    """Any other node (choice, case, rpc, notification, anydata etc.)."""

class TypeKind(Enum):
    """Enumeration of leaf type kinds that affect type rendering."""

    plain = 1
    """Any type without decoration."""
    identityref = 2
    """Identity reference."""
    leafref = 3
    """Reference to another leaf."""
    enumeration = 4
    """Enumeration."""
    union = 5
    """Union of member types."""

class ConfigState(Enum):
    """Tri-state value of the "config" property of a schema node."""

    unset = 0
    """Not declared, inherited from the ancestors."""
    true = 1
    """Configuration (read-write) data."""
    false = 2
    """State (read-only) data."""

class OutputFormat(Enum):
    """Enumeration of output formats."""

    text = 1
    """Plain text, one path per line."""
    html = 2
    """HTML rendered from a template."""

class PathStyle(Enum):
    """Enumeration of path addressing styles."""

    xpath = 1
    """XPath style with key predicates, e.g. ``/a/b[k=*]/c``."""
    restconf = 2
    """RESTCONF style with key lists, e.g. ``/a/b=k/c``."""

class NodeFilter(Enum):
    """Enumeration of node filters for text output."""

    all = 1
    """All nodes."""
    config = 2
    """Configuration nodes only."""
    state = 3
    """State nodes only (including nodes with unset config)."""

class TypeVerbosity(Enum):
    """Enumeration of type information levels in text output."""

    no = 1
    """No type information."""
    yes = 2
    """Bare type name."""
    detailed = 3
    """Type name with identity, leafref, enumeration and union details."""
