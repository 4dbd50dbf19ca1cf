from __future__ import annotations

import json
import logging

import pytest

from abbr_cli.cli import build_parser, main
from abbr_cli.logging_setup import configure_logging
from abbr_cli.persistence import Storage


@pytest.fixture
def run(storage_path, capsys):
    def _run(*argv: str) -> tuple[int, str, str]:
        code = main(["--storage-file", str(storage_path), *argv])
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


def test_put_then_get(run, storage_path):
    code, out, _ = run("put", "cpu", "Central Processing Unit")
    assert code == 0
    assert "meaning 1 of CPU" in out
    assert storage_path.exists()

    code, out, _ = run("get", "CPU")
    assert code == 0
    assert out == "CPU:\n 1) Central Processing Unit\n"


def test_get_without_storage_file(run, storage_path):
    code, out, _ = run("get", "CPU")

    assert code == 0
    assert out.startswith("Nothing stored yet")
    assert not storage_path.exists()


def test_get_unknown_abbreviation(run):
    run("put", "CPU", "Central Processing Unit")

    code, out, _ = run("get", "gpu")

    assert code == 0
    assert out == "GPU has no matches\n"


def test_duplicate_put_fails(run, storage_path):
    run("put", "CPU", "Central Processing Unit")

    code, _, err = run("put", "CPU", "Central Processing Unit")

    assert code == 1
    assert err.startswith("Error: 'CPU' already means")
    assert len(Storage.load(storage_path).get("CPU")) == 1


def test_put_with_description_and_listing(run):
    run("put", "CPU", "Central Processing Unit")
    run("put", "CPU", "Critical Path Utility", "--description", "Project planning")

    code, out, _ = run("get", "cpu")

    assert code == 0
    assert out == (
        "CPU is one of the following:\n"
        " 1) Central Processing Unit\n"
        " 2) Critical Path Utility\n"
        "    Project planning\n"
    )


def test_modify_uses_one_based_id(run, storage_path):
    run("put", "CPU", "Central Processing Unit")
    run("put", "CPU", "Critical Path Utility", "--description", "Project planning")

    code, _, _ = run("modify", "CPU", "--id", "2", "--meaning", "Critical Path Unit")
    assert code == 0
    code, _, _ = run("modify", "CPU", "--id", "2", "--clear-description")
    assert code == 0

    item = Storage.load(storage_path).get("CPU").items[1]
    assert (item.name, item.description) == ("Critical Path Unit", None)


def test_modify_without_id_is_ambiguous(run):
    run("put", "CPU", "Central Processing Unit")
    run("put", "CPU", "Critical Path Utility")

    code, _, err = run("modify", "CPU", "--meaning", "x")

    assert code == 1
    assert "--id" in err


def test_modify_without_changes(run):
    run("put", "CPU", "Central Processing Unit")

    code, _, err = run("modify", "CPU")

    assert code == 1
    assert "nothing to modify" in err


def test_modify_without_storage_file(run):
    code, _, err = run("modify", "CPU", "--meaning", "x")

    assert code == 1
    assert err == "Error: 'CPU' is not stored\n"


def test_delete_last_meaning_drops_abbreviation(run, storage_path):
    run("put", "CPU", "Central Processing Unit")

    code, out, _ = run("delete", "cpu")

    assert code == 0
    assert out == "Removed 'Central Processing Unit' from CPU\n"
    assert json.loads(storage_path.read_text(encoding="utf-8")) == {"data": {}}


def test_delete_out_of_range_id(run):
    run("put", "CPU", "Central Processing Unit")

    code, _, err = run("delete", "CPU", "--id", "3")

    assert code == 1
    assert err == "Error: 'CPU' has no meaning with id 3\n"


@pytest.mark.parametrize("bad_id", ["0", "-2", "two"])
def test_id_must_be_positive_integer(bad_id):
    parser = build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["delete", "CPU", "--id", bad_id])


def test_empty_abbreviation_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["get", "  "])


def test_description_options_are_exclusive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(
            ["modify", "CPU", "--description", "x", "--clear-description"]
        )


def test_list_and_validate(run):
    code, out, _ = run("list")
    assert out.startswith("Nothing stored yet")

    run("put", "RAM", "Random Access Memory")
    run("put", "CPU", "Central Processing Unit")
    run("put", "CPU", "Critical Path Utility")

    code, out, _ = run("list")
    lines = out.splitlines()
    assert code == 0
    assert lines[0].startswith("CPU")
    assert "2 meanings" in lines[0]
    assert "1 meaning |" in lines[1]

    code, out, _ = run("validate")
    assert code == 0
    assert out.startswith("OK: 2 abbreviations, 3 meanings")


def test_corrupt_storage_is_reported(run, storage_path):
    storage_path.parent.mkdir(parents=True, exist_ok=True)
    storage_path.write_text("not json", encoding="utf-8")

    code, _, err = run("get", "CPU")

    assert code == 1
    assert err.startswith("Error: Could not read storage file")
    assert storage_path.read_text(encoding="utf-8") == "not json"


def test_validate_without_storage_file(run):
    code, _, err = run("validate")

    assert code == 1
    assert "does not exist" in err


def test_storage_dir_from_environment(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("ABBR_STORAGE_DIR", str(tmp_path / "env"))

    assert main(["put", "CPU", "Central Processing Unit"]) == 0
    assert (tmp_path / "env" / "storage.json").exists()
    capsys.readouterr()


def test_verbose_logs_to_stderr(run):
    try:
        code, out, err = run("--verbose", "put", "CPU", "Central Processing Unit")
    finally:
        configure_logging(False, environ={})

    assert code == 0
    assert "meaning 1 of CPU" in out
    assert "DEBUG abbr_cli" in err


def test_configure_logging_levels():
    try:
        assert configure_logging(True).level == logging.DEBUG
        assert configure_logging(False, environ={"ABBR_LOG_LEVEL": "info"}).level == logging.INFO
        assert configure_logging(False, environ={"ABBR_LOG_LEVEL": "bogus"}).level == logging.WARNING
    finally:
        configure_logging(False, environ={})


def test_huge_integer_in_storage_is_reported(run, storage_path):
    storage_path.parent.mkdir(parents=True, exist_ok=True)
    storage_path.write_text('{"data": {}, "total_stored_items": ' + "9" * 5000 + "}", encoding="utf-8")

    code, _, err = run("get", "CPU")

    assert code == 1
    assert err.startswith("Error: Could not read storage file")


def test_logger_does_not_propagate_to_root():
    try:
        assert configure_logging(False, environ={}).propagate is False
    finally:
        configure_logging(False, environ={})
