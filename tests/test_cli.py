import io

import pytest
from rich.console import Console

from pvlscan.cli.main import PvlScanCLI


def _run(argv):
    buffer = io.StringIO()
    cli = PvlScanCLI(out=Console(file=buffer, width=200, color_system=None))
    code = cli.run(argv)
    return code, buffer.getvalue()


def test_get_prints_typed_value(sample_label_file):
    code, out = _run(["get", str(sample_label_file), "EXPOSURE_DURATION"])
    assert code == 0
    assert "EXPOSURE_DURATION = 12.5 (FLOAT)" in out


def test_get_missing_key(sample_label_file):
    code, out = _run(["get", str(sample_label_file), "NO_SUCH_KEY"])
    assert code == 1
    assert "not found" in out


def test_scan_lists_entries(sample_label_file):
    code, out = _run(["scan", str(sample_label_file), "--comments"])
    assert code == 0
    assert "SAMPLE_BIT_MASK" in out
    assert "BITMASK" in out
    assert "FILE DATA ELEMENTS" in out


def test_export_renders_tree(sample_label_file):
    code, out = _run(["export", str(sample_label_file)])
    assert code == 0
    assert "INSTRUMENT_STATE_PARMS" in out


def test_missing_path(tmp_path):
    code, out = _run(["scan", str(tmp_path / "nope.LBL")])
    assert code == 2
    assert "not found" in out


def test_no_command_prints_help():
    code, _ = _run([])
    assert code == 0


def test_version(capsys):
    with pytest.raises(SystemExit):
        PvlScanCLI().run(["--version"])
    assert "pvlscan" in capsys.readouterr().out


def test_scan_directory(tmp_path, sample_label_file):
    (tmp_path / "second.LBL").write_text("A = 1\nEND\n")
    code, out = _run(["scan", str(tmp_path)])
    assert code == 0
    assert "Total Files:    2" in out


def test_issue_text_is_not_read_as_markup(tmp_path):
    path = tmp_path / "broken.LBL"
    path.write_text("GROUP = A\nEND_GROUP = [bold]B\n")
    code, out = _run(["scan", str(path)])
    assert code == 1
    assert "[bold]B" in out
