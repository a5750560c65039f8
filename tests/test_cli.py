"""Testy komend CLI zebra wywoływanych przez main(argv)."""

import json

import pytest

from zebra.cli import main

from conftest import ZEBRA_JSON

SMALL = {
    "houses": 2,
    "domains": {"Color": ["red", "blue"], "drink": ["tea", "milk"]},
    "rules": [
        {"leftCategory": "color", "leftValue": "red", "operator": "same",
         "rightCategory": "drink", "rightValue": "tea"},
        {"leftCategory": "position", "leftValue": 1, "operator": "same",
         "rightCategory": "color", "rightValue": "blue"},
    ],
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("ZEBRA_MODELS", "ZEBRA_TIMEOUT", "ZEBRA_CATEGORY_ALIASES"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def small_file(tmp_path):
    path = tmp_path / "small.json"
    path.write_text(json.dumps(SMALL), encoding="utf-8")
    return path


def test_validate_ok():
    main(["validate", str(ZEBRA_JSON)])


def test_validate_invalid_file_exits_1(tmp_path):
    bad = dict(SMALL, rules=[{
        "leftCategory": "pet", "leftValue": "dog", "operator": "same",
        "rightCategory": "color", "rightValue": "red",
    }])
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(bad), encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["validate", str(path)])
    assert excinfo.value.code == 1


def test_validate_missing_file_exits_1(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["validate", str(tmp_path / "missing.json")])
    assert excinfo.value.code == 1


def test_compile_writes_normalized_program(small_file, tmp_path):
    out = tmp_path / "small.lp"
    main(["compile", str(small_file), "-o", str(out)])

    program = out.read_text(encoding="utf-8")
    assert "house(1..2)." in program
    assert "color(red; blue)." in program
    assert "beverage(tea; milk)." in program
    assert ":- assign(blue, H), H != 1." in program


def test_compile_honours_alias_configuration(small_file, tmp_path, monkeypatch):
    monkeypatch.setenv("ZEBRA_CATEGORY_ALIASES", "drink=liquid")
    out = tmp_path / "small.lp"
    main(["compile", str(small_file), "-o", str(out)])

    assert "liquid(tea; milk)." in out.read_text(encoding="utf-8")


def test_invalid_configuration_exits_1(small_file, monkeypatch):
    monkeypatch.setenv("ZEBRA_MODELS", "many")
    with pytest.raises(SystemExit) as excinfo:
        main(["solve", str(small_file)])
    assert excinfo.value.code == 1


def test_solve_small_puzzle(small_file):
    main(["solve", str(small_file)])


def test_solve_unsatisfiable_exits_2(tmp_path):
    data = dict(SMALL, domains={"color": ["red", "blue", "green"], "drink": ["tea", "milk"]})
    path = tmp_path / "unsat.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["solve", str(path)])
    assert excinfo.value.code == 2


def test_decode_saved_result(small_file, tmp_path):
    result = tmp_path / "result.json"
    result.write_text(json.dumps({
        "Result": "SATISFIABLE",
        "Call": [{"Witnesses": [{"Value": [
            "assign(blue,1)", "assign(milk,1)", "assign(red,2)", "assign(tea,2)",
        ]}]}],
        "Models": {"Number": 1, "More": "no"},
    }), encoding="utf-8")

    main(["decode", str(small_file), "--result", str(result)])


def test_decode_error_result_exits_1(small_file, tmp_path):
    result = tmp_path / "result.json"
    result.write_text(json.dumps({"Result": "ERROR", "Error": "parse"}), encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["decode", str(small_file), "--result", str(result)])
    assert excinfo.value.code == 1


def test_rules_listing(small_file):
    main(["rules", str(small_file)])
