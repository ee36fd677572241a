import os
import pytest
from yangpath.__main__ import main

MODDIR = os.path.join(os.path.dirname(__file__), os.pardir,
                      "yang-modules", "test-paths")
MODULE = os.path.join(MODDIR, "example-paths.yang")


def test_export_text(capsys):
    assert main(["export", "-m", MODULE, "--no-color"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 11
    assert lines[0] == "[rw]  /interfaces/interface[name=*]/mtu  uint16"
    assert ("[ro]  /interfaces/interface[name=*]/state/oper-status"
            '  enumeration"[up down testing]"') in lines


def test_export_restconf_options(capsys):
    assert main(["export", "-m", MODULE, "-y", MODDIR, "--no-color",
                 "-s", "restconf", "--with-module", "yes",
                 "--no-node-state", "--types", "no",
                 "-o", "state"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "example-paths  /interfaces/interface=name/state/oper-status",
        "example-paths  /interfaces/interface=name/state/utilization",
        "example-paths  /routing/log=/message"]


def test_export_config_only(capsys):
    assert main(["export", "-m", MODULE, "--no-color", "--types", "yes",
                 "-o", "config"]) == 0
    out = capsys.readouterr().out
    assert "[ro]" not in out
    assert "/routing/static-id  union" in out


def test_export_html(capsys):
    assert main(["export", "-m", MODULE, "-f", "html"]) == 0
    out = capsys.readouterr().out
    assert "<table" in out
    assert out.count("<tr>") == 12
    assert "\x1b[" not in out


def test_export_html_template(capsys):
    assert main(["export", "-m", MODULE, "-f", "html",
                 "--template", os.path.join(MODDIR, "interfaces.tmpl"),
                 "--template-vars", "title:::Example Paths"]) == 0
    out = capsys.readouterr().out
    assert "<h1>Example Paths</h1>" in out
    assert "<li>/routing/log=/message (string)</li>" in out


def test_missing_template(capsys):
    assert main(["export", "-m", MODULE, "-f", "html",
                 "--template", os.path.join(MODDIR, "missing.tmpl")]) == 1
    assert "Template:" in capsys.readouterr().err


def test_missing_module(capsys):
    assert main(["export", "-m", os.path.join(MODDIR, "missing.yang")]) == 1
    assert "Module file not found" in capsys.readouterr().err


def test_module_required():
    with pytest.raises(SystemExit):
        main(["export"])
