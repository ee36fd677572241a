import os
import pytest
from yangson.exceptions import ModuleNotFound
from yangpath.enumerations import ConfigState, NodeKind, TypeKind
from yangpath.exceptions import ModuleFileNotFound
from yangpath.loader import YangLibrary, load_module
from yangpath.path import paths
from test_path import leaf_count

MODDIR = os.path.join(os.path.dirname(__file__), os.pardir,
                      "yang-modules", "test-paths")


@pytest.fixture(scope="module")
def tree():
    return load_module(os.path.join(MODDIR, "example-paths.yang"))


@pytest.fixture(scope="module")
def records(tree):
    return {r.xpath: r for r in paths(tree, False)}


def test_yang_library():
    ylib = YangLibrary([MODDIR])
    assert ylib.add_module(os.path.join(MODDIR, "example-paths.yang")) == (
        "example-paths")
    mods = ylib.as_raw()["ietf-yang-library:modules-state"]["module"]
    assert [(m["name"], m["conformance-type"]) for m in mods] == [
        ("example-paths", "implement"), ("example-types", "import")]
    assert mods[0]["namespace"] == "urn:example:paths"
    assert mods[0]["revision"] == ""


def test_missing_module_file():
    with pytest.raises(ModuleFileNotFound):
        load_module(os.path.join(MODDIR, "nonexistent.yang"))


def test_missing_import(tmp_path):
    modfile = tmp_path / "lonely.yang"
    modfile.write_text("""module lonely {
  namespace "urn:example:lonely";
  prefix "l";
  import absent {
    prefix "a";
  }
  leaf x {
    type string;
  }
}
""", encoding="utf-8")
    with pytest.raises(ModuleNotFound):
        load_module(str(modfile), [str(tmp_path)])


def test_tree_shape(tree):
    assert tree.kind == NodeKind.module
    assert tree.name == "example-paths"
    assert sorted(tree.children) == ["interfaces", "routing"]
    iface = tree.children["interfaces"].children["interface"]
    assert iface.kind == NodeKind.list
    assert iface.keys == ["name"]
    assert iface.children["address"].kind == NodeKind.leaf_list
    assert tree.children["routing"].children["mode"].kind == NodeKind.other
    assert tree.children["routing"].children["route"].keys == [
        "prefix", "next-hop"]
    assert "reset" not in tree.children


def test_paths(records, tree):
    assert list(records) == [
        "/interfaces/interface[name=*]/mtu",
        "/interfaces/interface[name=*]/name",
        "/interfaces/interface[name=*]/state/oper-status",
        "/interfaces/interface[name=*]/state/utilization",
        "/interfaces/interface[name=*]/type",
        "/routing/log/message",
        "/routing/protocol",
        "/routing/static-id",
        "/routing/route[prefix=*][next-hop=*]/interface",
        "/routing/route[prefix=*][next-hop=*]/next-hop",
        "/routing/route[prefix=*][next-hop=*]/prefix"]
    assert len(records) == leaf_count(tree)
    assert records["/routing/log/message"].restconf == "/routing/log=/message"
    assert records["/routing/route[prefix=*][next-hop=*]/prefix"].restconf == (
        "/routing/route=prefix,next-hop/prefix")


def test_config(records, tree):
    assert tree.children["interfaces"].config == ConfigState.true
    state = records["/interfaces/interface[name=*]/state/oper-status"]
    assert state.config == ConfigState.false
    assert records["/routing/log/message"].config == ConfigState.false
    assert records["/interfaces/interface[name=*]/mtu"].config == (
        ConfigState.true)
    assert records["/routing/static-id"].config == ConfigState.true


def test_types(records):
    assert records["/interfaces/interface[name=*]/mtu"].stype == "uint16"
    assert records["/interfaces/interface[name=*]/type"].stype == (
        "identityref->interface-type")
    assert records["/interfaces/interface[name=*]/state/oper-status"].stype == (
        'enumeration"[up down testing]"')
    util = records["/interfaces/interface[name=*]/state/utilization"]
    assert util.stype == "percent"
    assert util.type.kind == TypeKind.plain
    ref = records["/routing/route[prefix=*][next-hop=*]/interface"]
    assert ref.type.kind == TypeKind.leafref
    assert ref.type.path == "/ep:interfaces/ep:interface/ep:name"
    assert ref.stype == "leafref->/ep:interfaces/ep:interface/ep:name"
    assert records["/routing/static-id"].stype == (
        'union{identityref->interface-type enumeration"[auto manual]"}')


def test_leafref_path_as_written(tmp_path):
    modfile = tmp_path / "leafrefs.yang"
    modfile.write_text("""module leafrefs {
  namespace "urn:example:leafrefs";
  prefix "lr";
  typedef item-ref {
    type leafref {
      path "/lr:item/lr:name";
    }
  }
  list item {
    key "name";
    leaf name {
      type string;
    }
  }
  container refs {
    leaf name {
      type string;
    }
    leaf sibling {
      type leafref {
        path "../name";
      }
    }
    leaf target {
      type leafref {
        path "../../item[name = current()/../name]/name";
      }
    }
    leaf typed {
      type item-ref;
    }
  }
}
""", encoding="utf-8")
    recs = {r.xpath: r.stype for r in paths(load_module(str(modfile)), False)}
    assert recs["/refs/sibling"] == "leafref->../name"
    assert recs["/refs/target"] == (
        "leafref->../../item[name = current()/../name]/name")
    assert recs["/refs/typed"] == "item-ref->/lr:item/lr:name"
