"""CLI entry point tests."""

from __future__ import annotations

from main import SAMPLE_ROWS, main


class TestMain:
    def test_sample_batch_has_invalid_pans(self, capsys) -> None:
        assert main([]) == 1
        out = capsys.readouterr().out
        assert "PAN VALIDATION REPORT" in out
        assert f"Processed:           {len(SAMPLE_ROWS)}" in out

    def test_all_valid_file_exits_zero(self, tmp_path, capsys) -> None:
        path = tmp_path / "pans.txt"
        path.write_text("axbcd1243f\nPQRTZ5081K\n", encoding="utf-8")
        assert main([str(path)]) == 0
        assert "ALL PANS PASSED" in capsys.readouterr().out

    def test_missing_file_exits_two(self, tmp_path, capsys) -> None:
        assert main([str(tmp_path / "missing.txt")]) == 2
        assert "INPUT_UNREADABLE" in capsys.readouterr().err

    def test_blank_only_file_reports_no_pans(self, tmp_path, capsys) -> None:
        path = tmp_path / "pans.txt"
        path.write_text("\n   \n\n", encoding="utf-8")
        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert "NO PANS FOUND" in out
        assert "ALL PANS PASSED" not in out

    def test_unknown_log_level_falls_back(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        assert main([]) == 1
        assert "Unknown LOG_LEVEL 'VERBOSE'" in capsys.readouterr().err
