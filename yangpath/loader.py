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

"""Loading of YANG modules into a schema tree.

Parsing and resolution of YANG modules is done by Yangson. This module
only prepares YANG library data for the module being exported and its
dependencies, and converts the resulting Yangson schema to
:class:`yangpath.schemanode.SchemaNode` objects.

This module implements the following classes:

* DeclaredLeafrefType: Leafref type keeping its path as written.
* YangLibrary: YANG library data collected from module files.

and functions:

* load_module: Return schema tree of a YANG module file.
* schema_tree: Convert Yangson schema of a module.
"""

import glob
import json
import logging
import os
from typing import Any, Iterable, Optional
from yangson import DataModel
from yangson.datatype import (DataType, EnumerationType, IdentityrefType,
                              LeafrefType, UnionType)
from yangson.exceptions import ModuleNotFound
from yangson.schemadata import SchemaContext
from yangson.schemanode import (ContainerNode, InternalNode, LeafListNode,
                                LeafNode, ListNode, SchemaNode as YangsonNode,
                                SchemaTreeNode)
from yangson.statement import ModuleParser, Statement
from .enumerations import ConfigState, NodeKind, TypeKind
from .exceptions import ModuleFileNotFound
from .schemanode import SchemaNode, TypeDescriptor
from .typealiases import YangIdentifier

logger = logging.getLogger(__name__)


def load_module(module_file: str,
                yang_dirs: Iterable[str] = (".",)) -> SchemaNode:
    """Return schema tree of a YANG module.

    The directory containing `module_file` is searched first for
    imported modules and included submodules, then `yang_dirs`.

    Args:
        module_file: Name of the file with the YANG module.
        yang_dirs: Directories to search for other modules.

    Raises:
        ModuleFileNotFound: If `module_file` doesn't exist.
        YangsonException: If a module cannot be found, parsed or
            resolved.
    """
    if not os.path.isfile(module_file):
        raise ModuleFileNotFound(module_file)
    mod_path = [os.path.dirname(module_file) or "."]
    for d in yang_dirs:
        if d not in mod_path:
            mod_path.append(d)
    ylib = YangLibrary(mod_path)
    name = ylib.add_module(module_file)
    dm = _data_model(json.dumps(ylib.as_raw()), tuple(mod_path))
    return schema_tree(dm, name)


class DeclaredLeafrefType(LeafrefType):
    """Leafref type that also keeps its path argument as written."""

    def _handle_properties(self: "DeclaredLeafrefType", stmt: Statement,
                           sctx: SchemaContext) -> None:
        super()._handle_properties(stmt, sctx)
        self.path_text: str = stmt.find1("path", required=True).argument
        """Argument of the "path" statement."""


def _data_model(yltxt: str, mod_path: tuple[str, ...]) -> DataModel:
    """Return data model whose leafref types are DeclaredLeafrefType."""
    dtypes = DataType.dtypes
    DataType.dtypes = {**dtypes, "leafref": DeclaredLeafrefType}
    try:
        return DataModel(yltxt, mod_path)
    finally:
        DataType.dtypes = dtypes


class YangLibrary:
    """YANG library data [RFC7895]_ for one implemented module.

    Imported modules and included submodules are found in the search
    path and registered too. All features are considered supported.
    """

    def __init__(self: "YangLibrary", mod_path: Iterable[str]) -> None:
        self.mod_path = list(mod_path)
        """Directories where to look for YANG modules."""
        self.modules: dict[YangIdentifier, dict[str, Any]] = {}
        """Module entries indexed by module name."""

    def add_module(self: "YangLibrary", filename: str) -> YangIdentifier:
        """Register the module to be implemented and its dependencies.

        Args:
            filename: Name of the file with the YANG module.

        Returns:
            Name of the module.
        """
        mst = self._parse(filename)
        return self._register(mst, self._revision(filename), "implement")

    def as_raw(self: "YangLibrary") -> dict[str, Any]:
        """Return YANG library data as a raw object."""
        return {
            "ietf-yang-library:modules-state": {
                "module-set-id": "",
                "module": list(self.modules.values())
            }
        }

    def _register(self: "YangLibrary", mst: Statement, rev: str,
                  conformance: str) -> YangIdentifier:
        name = mst.argument
        if name in self.modules:
            return name
        men: dict[str, Any] = {
            "name": name, "revision": rev,
            "namespace": mst.find1("namespace", required=True).argument,
            "conformance-type": conformance}
        self.modules[name] = men
        logger.debug("registering module %s (%s)", name, conformance)
        features = [f.argument for f in mst.find_all("feature")]
        subs = []
        for inc in mst.find_all("include"):
            sst, srev = self._find(inc.argument, self._revision_date(inc))
            subs.append({"name": inc.argument, "revision": srev})
            features += [f.argument for f in sst.find_all("feature")]
            self._imports(sst)
        if features:
            men["feature"] = features
        if subs:
            men["submodule"] = subs
        self._imports(mst)
        return name

    def _imports(self: "YangLibrary", stmt: Statement) -> None:
        for imp in stmt.find_all("import"):
            if imp.argument in self.modules:
                continue
            ist, irev = self._find(imp.argument, self._revision_date(imp))
            self._register(ist, irev, "import")

    def _find(self: "YangLibrary", name: YangIdentifier,
              rev: Optional[str]) -> tuple[Statement, str]:
        """Find, parse and return a (sub)module and its revision.

        Without `rev`, a file with no revision in its name is preferred,
        then the latest revision.
        """
        for d in self.mod_path:
            if rev:
                cands = [f"{d}/{name}@{rev}.yang"]
            else:
                cands = [f"{d}/{name}.yang"] + sorted(
                    glob.glob(f"{d}/{name}@*.yang"), reverse=True)
            for fn in cands:
                if os.path.isfile(fn):
                    return self._parse(fn), self._revision(fn)
        raise ModuleNotFound(name, rev if rev else "")

    @staticmethod
    def _parse(filename: str) -> Statement:
        with open(filename, encoding="utf-8") as infile:
            return ModuleParser(infile.read()).parse()

    @staticmethod
    def _revision(filename: str) -> str:
        """Return revision encoded in a module file name, or empty string."""
        stem = os.path.basename(filename)[:-len(".yang")]
        return stem.partition("@")[2]

    @staticmethod
    def _revision_date(stmt: Statement) -> Optional[str]:
        rd = stmt.find1("revision-date")
        return rd.argument if rd else None


def schema_tree(dm: DataModel, module: YangIdentifier) -> SchemaNode:
    """Convert Yangson schema of a module to a schema tree.

    Only data nodes are converted, RPCs, actions and notifications are
    skipped. A node declares config state only where its effective
    config differs from what the path walker inherits from above.

    Args:
        dm: Data model.
        module: Name of the module.
    """
    res = SchemaNode(module, NodeKind.module)
    for ch in dm.schema.children:
        if ch.ns == module and not isinstance(ch, SchemaTreeNode):
            res.add_child(_convert(ch, None))
    return res


def _convert(ynode: YangsonNode, inherited: Optional[bool]) -> SchemaNode:
    kind = _node_kind(ynode)
    if kind == NodeKind.other:
        config = ConfigState.unset
    else:
        if ynode.config == inherited:
            config = ConfigState.unset
        else:
            config = ConfigState.true if ynode.config else ConfigState.false
        inherited = ynode.config
    res = SchemaNode(ynode.name, kind, config)
    if isinstance(ynode, ListNode):
        res.keys = [k[0] for k in ynode.keys]
    elif isinstance(ynode, (LeafNode, LeafListNode)):
        res.type = _type_descriptor(ynode.type)
    if isinstance(ynode, InternalNode):
        for ch in ynode.children:
            if not isinstance(ch, SchemaTreeNode):
                res.add_child(_convert(ch, inherited))
    return res


def _node_kind(ynode: YangsonNode) -> NodeKind:
    if isinstance(ynode, ContainerNode):
        return NodeKind.container
    if isinstance(ynode, ListNode):
        return NodeKind.list
    if isinstance(ynode, LeafListNode):
        return NodeKind.leaf_list
    if isinstance(ynode, LeafNode):
        return NodeKind.leaf
    return NodeKind.other


def _type_descriptor(dtype: DataType) -> TypeDescriptor:
    name = dtype.name if dtype.name else dtype.yang_type()
    if isinstance(dtype, IdentityrefType):
        base = dtype.bases[0][0] if dtype.bases else None
        return TypeDescriptor(name, TypeKind.identityref, identity_base=base)
    if isinstance(dtype, LeafrefType):
        return TypeDescriptor(name, TypeKind.leafref, path=dtype.path_text)
    if isinstance(dtype, EnumerationType):
        return TypeDescriptor(name, TypeKind.enumeration, enum=dtype.enum)
    if isinstance(dtype, UnionType):
        return TypeDescriptor(name, TypeKind.union,
                              types=[_type_descriptor(t) for t in dtype.types])
    return TypeDescriptor(name)
