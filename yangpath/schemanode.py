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

"""Schema tree consumed by the path walker.

This module implements the following classes:

* SchemaNode: Node of a schema tree.
* TypeDescriptor: Type of a leaf or leaf-list node.

The tree is normally produced by :func:`yangpath.loader.load_module`
but it can also be assembled by hand, which is mostly useful in tests.
"""

from typing import Iterable, Optional
from .enumerations import ConfigState, NodeKind, TypeKind
from .typealiases import YangIdentifier


class TypeDescriptor:
    """Description of a leaf type."""

    def __init__(self: "TypeDescriptor", name: YangIdentifier,
                 kind: TypeKind = TypeKind.plain,
                 identity_base: Optional[YangIdentifier] = None,
                 path: Optional[str] = None,
                 enum: Iterable[str] = (),
                 types: Iterable["TypeDescriptor"] = ()) -> None:
        """Initialize the class instance.

        Args:
            name: Type name, either built-in or derived (typedef).
            kind: Kind of the resolved type.
            identity_base: Name of the identity base (identityref).
            path: Referenced path string (leafref).
            enum: Enum labels in declaration order (enumeration).
            types: Member types (union).
        """
        self.name = name
        """Name of the type."""
        self.kind = kind
        """Kind of the resolved type."""
        self.identity_base = identity_base
        """Name of the identity base."""
        self.path = path
        """Path referenced by a leafref."""
        self.enum = list(enum)
        """Enum labels."""
        self.types = list(types)
        """Member types of a union."""

    def __str__(self: "TypeDescriptor") -> str:
        return self.name

    def __repr__(self: "TypeDescriptor") -> str:
        return f"TypeDescriptor({self.name!r}, {self.kind})"


class SchemaNode:
    """Node of a schema tree."""

    def __init__(self: "SchemaNode", name: YangIdentifier,
                 kind: NodeKind = NodeKind.other,
                 config: ConfigState = ConfigState.unset,
                 type: Optional[TypeDescriptor] = None,
                 keys: Iterable[YangIdentifier] = ()) -> None:
        """Initialize the class instance.

        Args:
            name: Node name.
            kind: Node kind.
            config: Declared config state.
            type: Type of a leaf or leaf-list.
            keys: Ordered names of list keys.
        """
        self.name = name
        """Name of the receiver."""
        self.kind = kind
        """Kind of the receiver."""
        self.config = config
        """Declared config state of the receiver."""
        self.type = type
        """Type of a terminal node."""
        self.keys = list(keys)
        """Names of list keys."""
        self.children: dict[YangIdentifier, "SchemaNode"] = {}
        """Children of the receiver indexed by name."""

    def __repr__(self: "SchemaNode") -> str:
        return f"SchemaNode({self.name!r}, {self.kind})"

    def add_child(self: "SchemaNode", node: "SchemaNode") -> "SchemaNode":
        """Add a child node and return it.

        A child of the same name is replaced.
        """
        self.children[node.name] = node
        return node

    def add_children(self: "SchemaNode",
                     nodes: Iterable["SchemaNode"]) -> "SchemaNode":
        """Add child nodes and return the receiver."""
        for node in nodes:
            self.add_child(node)
        return self

    def sorted_children(self: "SchemaNode") -> list["SchemaNode"]:
        """Return children sorted by name."""
        return [self.children[n] for n in sorted(self.children)]
