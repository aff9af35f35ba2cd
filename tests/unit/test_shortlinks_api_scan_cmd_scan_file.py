"""Unit tests for shortlinks.api.scan.cmd_scan_file module."""

from shortlinks.api.scan.cmd_scan_file import cmd_scan_file


def test_cmd_scan_file_reads_utf8(empty_home, tmp_path, run_cmd):
    notes = tmp_path / "notes.md"
    notes.write_text("Closes rnystrom/githawk#4321 and ünïcode #7\n", encoding="utf-8")

    result = run_cmd(cmd_scan_file, notes, owner="o", repo="r")

    assert result.success is True
    assert result.output["text"] == "Closes rnystrom/githawk#4321 and ünïcode #7\n"
    assert [m["number"] for m in result.output["matches"]] == [4321, 7]


def test_cmd_scan_file_invalid_utf8_fails_cleanly(empty_home, tmp_path, run_cmd):
    bad = tmp_path / "bad.md"
    bad.write_bytes(b"Fixes #12 \xff\xfe")

    result = run_cmd(cmd_scan_file, str(bad), owner="o", repo="r")

    assert result.success is False
    assert result.result.startswith(f"Cannot read {bad}")
    assert "utf-8" in result.output["errors"][0]
    assert result.output["matches"] == []


def test_cmd_scan_file_missing_file_fails_cleanly(empty_home, tmp_path, run_cmd):
    result = run_cmd(cmd_scan_file, tmp_path / "missing.md", owner="o", repo="r")

    assert result.success is False
    assert "missing.md" in result.result


def test_cmd_scan_file_uses_config_context(shortlinks_home, tmp_path, run_cmd):
    notes = tmp_path / "notes.md"
    notes.write_text("#5", encoding="utf-8")

    result = run_cmd(cmd_scan_file, notes)

    assert result.output["context"] == {"owner": "rnystrom", "repo": "GitHawk"}
