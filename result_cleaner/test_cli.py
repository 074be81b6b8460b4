"""
Tests for the command-line interface.
"""

import io
import json

import pytest

from result_cleaner.cli import main
from result_cleaner.parser import parse
from result_cleaner.writer import encode


PASTE = """Jane Doe - Senior Analyst
Phone: +1 555-123-4567
Email: jane@acme.com
https://example.com/jane

Ana · Data Engineer · Acme
"""


def test_stdout_prints_csv(tmp_path, capsys):
    source = tmp_path / "paste.txt"
    source.write_text(PASTE, encoding="utf-8")

    assert main([str(source), "--stdout"]) == 0

    out = capsys.readouterr().out
    assert out == encode(parse(PASTE)) + "\n"


def test_reads_stdin_and_writes_csv_file(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(PASTE))
    out_dir = tmp_path / "out"

    assert main(["--out-dir", str(out_dir)]) == 0

    files = list(out_dir.glob("contacts-*.csv"))
    assert len(files) == 1
    assert files[0].read_text(encoding="utf-8") == encode(parse(PASTE))


def test_json_output_with_limit(tmp_path):
    source = tmp_path / "paste.txt"
    source.write_text(PASTE, encoding="utf-8")
    out_dir = tmp_path / "out"

    assert main([str(source), "-o", "json", "-l", "1", "--out-dir", str(out_dir)]) == 0

    data = json.loads(next(out_dir.glob("*.json")).read_text(encoding="utf-8"))
    assert data["metadata"]["totalContacts"] == 1
    assert data["contacts"][0]["name"] == "Jane Doe"


def test_empty_input_is_not_an_error(tmp_path, capsys):
    source = tmp_path / "empty.txt"
    source.write_text("\n\n   \n", encoding="utf-8")

    assert main([str(source), "--stdout"]) == 0

    captured = capsys.readouterr()
    assert captured.out == '"nama","jabatan","phone","email","url"\n'
    assert "No contacts found" in captured.err


def test_missing_source_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt"), "--stdout"]) == 1
    assert "Cleaning failed" in capsys.readouterr().err


def test_log_file(tmp_path):
    source = tmp_path / "paste.txt"
    source.write_text(PASTE, encoding="utf-8")
    log_file = tmp_path / "logs" / "cleaner.log"

    assert main([str(source), "--stdout", "--log-file", str(log_file)]) == 0
    assert "Found 2 contacts" in log_file.read_text(encoding="utf-8")


def test_log_file_gets_debug_lines_at_info_level(tmp_path):
    source = tmp_path / "paste.txt"
    source.write_text(PASTE, encoding="utf-8")
    log_file = tmp_path / "cleaner.log"

    assert main([str(source), "--stdout", "--log-level", "INFO", "--log-file", str(log_file)]) == 0

    log_text = log_file.read_text(encoding="utf-8")
    assert "[DEBUG]" in log_text
    assert "Parsed 2 contacts from 2 blocks" in log_text


@pytest.mark.parametrize("limit", ["-1", "0"])
def test_limit_below_one_is_rejected(limit, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--stdout", "--limit", limit])

    assert exc.value.code == 2
    assert "must be at least 1" in capsys.readouterr().err


def test_limit_keeps_first_contacts(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("A\n\nB"))

    assert main(["--stdout", "--limit", "1"]) == 0

    assert capsys.readouterr().out == encode(parse("A")) + "\n"
