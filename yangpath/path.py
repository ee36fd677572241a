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

"""Export of paths from a schema tree.

This module implements the following classes:

* PathAccumulator: Path state passed down the schema tree.
* PathRecord: Path of a single leaf.

and functions:

* paths: Return path records of all leaves in a schema tree.
* type_string: Return string representation of a leaf type.
* walk: Collect path records of all leaves under a schema node.
"""

from typing import NamedTuple, Optional
from .colors import Colorizer
from .enumerations import ConfigState, NodeKind, TypeKind
from .schemanode import SchemaNode, TypeDescriptor
from .typealiases import ModuleName, RestconfPath, XPath


class PathRecord(NamedTuple):
    """Path of a leaf node."""

    module: ModuleName
    """Name of the module the leaf belongs to."""
    xpath: XPath
    """Path in XPath style."""
    restconf: RestconfPath
    """Path in RESTCONF style."""
    stype: str
    """String representation of the leaf type."""
    type: TypeDescriptor
    """Leaf type."""
    config: ConfigState
    """Effective config state of the leaf."""

    @property
    def read_only(self: "PathRecord") -> bool:
        """Is the leaf state (read-only) data?"""
        return self.config == ConfigState.false


class PathAccumulator(NamedTuple):
    """Path state accumulated on the way from the root to a node.

    The accumulator is immutable: every step creates a new one so that
    paths built in sibling subtrees are independent.
    """

    module: ModuleName = ""
    xpath: XPath = ""
    restconf: RestconfPath = ""
    config: ConfigState = ConfigState.unset
    type: Optional[TypeDescriptor] = None
    stype: str = ""

    def inherit(self: "PathAccumulator",
                config: ConfigState) -> "PathAccumulator":
        """Return accumulator with `config` applied, unless it is unset."""
        if config == ConfigState.unset:
            return self
        return self._replace(config=config)

    def append(self: "PathAccumulator", xseg: str,
               rseg: str) -> "PathAccumulator":
        """Return accumulator extended with XPath and RESTCONF segments."""
        return self._replace(xpath=self.xpath + xseg,
                             restconf=self.restconf + rseg)

    def record(self: "PathAccumulator") -> PathRecord:
        """Return path record for the current leaf."""
        return PathRecord(self.module, self.xpath, self.restconf,
                          self.stype, self.type, self.config)


def paths(node: SchemaNode, colorize: bool = True) -> list[PathRecord]:
    """Return path records of all leaves in the subtree of `node`.

    Args:
        node: Root of the schema tree, normally a module.
        colorize: Decorate list keys and types for a terminal.
    """
    res: list[PathRecord] = []
    walk(node, PathAccumulator(), res, colorize)
    return res


def walk(node: SchemaNode, acc: PathAccumulator,
         collector: list[PathRecord], colorize: bool = True) -> None:
    """Append path records of all leaves under `node` to `collector`.

    Children are visited in the order of their names.

    Args:
        node: Schema node to process.
        acc: Path state of the parent of `node`.
        collector: List receiving path records.
        colorize: Decorate list keys and types for a terminal.
    """
    acc = _step(node, acc, Colorizer(colorize))
    if node.kind == NodeKind.leaf:
        collector.append(acc.record())
    for child in node.sorted_children():
        walk(child, acc, collector, colorize)


def _step(node: SchemaNode, acc: PathAccumulator,
          col: Colorizer) -> PathAccumulator:
    """Return path state of `node` given that of its parent."""
    kind = node.kind
    if kind == NodeKind.module:
        return acc._replace(module=node.name)
    if kind == NodeKind.container:
        seg = "/" + node.name
        return acc.inherit(node.config).append(seg, seg)
    if kind == NodeKind.list:
        xkeys = "".join(col.bold(f"[{k}=*]") for k in node.keys)
        rkeys = col.bold(",".join(node.keys)) if node.keys else ""
        return acc.inherit(node.config).append(
            f"/{node.name}{xkeys}", f"/{node.name}={rkeys}")
    if kind == NodeKind.leaf_list:
        return acc.inherit(node.config)
    if kind == NodeKind.leaf:
        seg = "/" + node.name
        return acc.inherit(node.config).append(seg, seg)._replace(
            type=node.type, stype=type_string(node.type, col))
    return acc


def type_string(typ: TypeDescriptor,
                colorizer: Optional[Colorizer] = None) -> str:
    """Return string representation of a leaf type.

    The following parts are concatenated, each of them only if it
    applies:

    1. type name,
    2. ``->BASE`` for identityref,
    3. ``->PATH`` for leafref,
    4. list of labels for enumeration,
    5. member types in braces for union.

    Args:
        typ: Leaf type.
        colorizer: Decoration of the parts; none if missing.
    """
    col = colorizer if colorizer else Colorizer(False)
    parts = [typ.name]
    if typ.identity_base is not None:
        parts.append("->" + typ.identity_base)
    if typ.kind == TypeKind.leafref:
        parts.append(f"->{typ.path}")
    if typ.kind == TypeKind.enumeration:
        parts.append(_enum_labels(typ.enum))
    if typ.kind == TypeKind.union:
        members = " ".join(_union_member(t) for t in typ.types)
        parts.append("{" + members + "}")
    return "".join(col.faint(p) for p in parts)


def _union_member(typ: TypeDescriptor) -> str:
    if typ.identity_base is not None:
        return "identityref->" + typ.identity_base
    if typ.kind == TypeKind.enumeration:
        return "enumeration" + _enum_labels(typ.enum)
    return typ.name


def _enum_labels(labels: list[str]) -> str:
    return '"[' + " ".join(labels) + ']"'
