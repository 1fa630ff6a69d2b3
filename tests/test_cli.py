"""Tests for the dyntype command line."""

import pytest

from dyntype.__main__ import main


ENTITY = "Entity\nid: int = 0\nname: string\n"
WEAPON = "Weapon: Entity\ndamage: int = 50\nrange: double = 10.5\nmagical: bool = false\n"


@pytest.fixture
def decl_files(tmp_path):
    entity = tmp_path / "entity.type"
    entity.write_text(ENTITY, encoding="utf-8")
    weapon = tmp_path / "weapon.type"
    weapon.write_text(WEAPON, encoding="utf-8")
    return [str(entity), str(weapon)]


def test_demo(capsys):
    assert main(["--demo"]) == 0
    out = capsys.readouterr().out
    assert "type_name: Weapon" in out
    assert "object_type: Player" in out
    assert '    value: "Hero"' in out
    assert '    value: "Excalibur"' in out
    assert "    value: 75" in out


def test_show_type(decl_files, capsys):
    assert main(decl_files + ["--type", "Weapon"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("type_name: Weapon\nbase: Entity\n")
    assert "  - id:" in out
    assert "type_name: Entity" not in out


def test_create(decl_files, capsys):
    assert main(decl_files + ["--type", "Entity", "--create", "Weapon"]) == 0
    out = capsys.readouterr().out
    assert "object_type: Weapon" in out
    assert "    value: 10.500000" in out


def test_create_unknown(decl_files, capsys):
    assert main(decl_files + ["--create", "Armor"]) == 1
    assert "Type 'Armor' not found" in capsys.readouterr().err


def test_malformed_file(tmp_path, capsys):
    path = tmp_path / "bad.type"
    path.write_text("Bad\ncount: int = lots\n", encoding="utf-8")
    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert "Invalid int default 'lots' for property 'count' (line 2)" in err


def test_empty_file(tmp_path, capsys):
    path = tmp_path / "empty.type"
    path.write_text("\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "No type declared" in capsys.readouterr().err


def test_cycle_reported(tmp_path, capsys):
    a = tmp_path / "a.type"
    a.write_text("A: B\nx: int\n", encoding="utf-8")
    b = tmp_path / "b.type"
    b.write_text("B: A\ny: int\n", encoding="utf-8")
    assert main([str(a), str(b)]) == 1
    assert "Cyclic inheritance" in capsys.readouterr().err


def test_override_duplicates(tmp_path, capsys):
    base = tmp_path / "base.type"
    base.write_text("Base\nname: string = base\n", encoding="utf-8")
    child = tmp_path / "child.type"
    child.write_text("Child: Base\nname: string = child\n", encoding="utf-8")
    assert main([str(base), str(child), "--type", "Child", "--override-duplicates"]) == 0
    out = capsys.readouterr().out
    assert out.count("  - name:") == 1
    assert '"child"' in out


def test_lark_tree(decl_files, capsys):
    assert main([decl_files[1], "--lark"]) == 0
    out = capsys.readouterr().out
    assert "header:" in out
    assert "property:" in out


def test_requires_input():
    with pytest.raises(SystemExit):
        main([])


def test_create_cyclic_type(tmp_path, capsys):
    a = tmp_path / "a.type"
    a.write_text("A: B\nx: int\n", encoding="utf-8")
    b = tmp_path / "b.type"
    b.write_text("B: A\ny: int\n", encoding="utf-8")
    assert main([str(a), str(b), "--create", "A"]) == 1
    assert "Cyclic inheritance: A -> B -> A" in capsys.readouterr().err


def test_lark_tree_empty_file(tmp_path, capsys):
    path = tmp_path / "empty.type"
    path.write_text("", encoding="utf-8")
    assert main([str(path), "--lark"]) == 1
    assert f"Error parsing {path}" in capsys.readouterr().err


def test_lark_tree_missing_file(tmp_path, capsys):
    path = tmp_path / "missing.type"
    assert main([str(path), "--lark"]) == 1
    assert f"Error parsing {path}" in capsys.readouterr().err
