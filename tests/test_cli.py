"""Tests for CLI commands."""

import json
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from dagseg.cli import app
from dagseg.core.exceptions import DictionaryFetchError


runner = CliRunner()


class TestCutCommand:
    """Tests for the cut command."""

    def test_default_dictionary(self):
        result = runner.invoke(app, ["cut", "我爱北京天安门"])

        assert result.exit_code == 0
        assert "我 / 爱 / 北京 / 天安门" in result.output

    def test_json_output(self):
        result = runner.invoke(app, ["cut", "我爱北京天安门", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output.strip()) == ["我", "爱", "北京", "天安门"]

    def test_custom_separator(self):
        result = runner.invoke(app, ["cut", "我爱北京", "--sep", "|"])

        assert result.exit_code == 0
        assert "我|爱|北京" in result.output

    def test_all_candidates(self):
        result = runner.invoke(app, ["cut", "北京天安门", "--all", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output.strip()) == ["北京", "京", "天安门", "安", "门"]

    def test_hmm_flag(self):
        result = runner.invoke(app, ["cut", "我爱北京", "--hmm", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output.strip().splitlines()[-1]) == ["我", "爱", "北京"]

    def test_dict_file(self, dict_file: Path):
        result = runner.invoke(app, ["cut", "我爱北京大学", "--dict", str(dict_file), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output.strip().splitlines()[-1]) == ["我", "爱", "北京大学"]

    def test_dict_from_env(self, dict_file: Path, monkeypatch):
        monkeypatch.setenv("DAGSEG_DICT_PATH", str(dict_file))

        result = runner.invoke(app, ["cut", "北京大学", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output.strip().splitlines()[-1]) == ["北京大学"]

    def test_missing_dict_file_fails(self, tmp_path: Path):
        result = runner.invoke(app, ["cut", "北京", "--dict", str(tmp_path / "missing.txt")])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_non_utf8_dict_file_fails(self, gbk_dict_file: Path):
        result = runner.invoke(app, ["cut", "北京", "--dict", str(gbk_dict_file)])

        assert result.exit_code == 1
        assert "Error: could not load dictionary" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_full_dictionary(self):
        with patch(
            "dagseg.core.segmenter.load_entries", return_value=[("北京天安门", 1), ("北京", 1)]
        ) as mock_load:
            result = runner.invoke(app, ["cut", "北京天安门", "--full", "--json"])

        assert result.exit_code == 0
        assert mock_load.call_args[0][0] is None
        assert json.loads(result.output.strip().splitlines()[-1]) == ["北京天安门"]


class TestKeywordsCommand:
    """Tests for the keywords command."""

    def test_lists_keywords(self):
        result = runner.invoke(app, ["keywords", "学习中文，我们学习中文", "--top-k", "2"])

        assert result.exit_code == 0
        assert "1. 学习" in result.output
        assert "2. 中文" in result.output

    def test_no_keywords(self):
        result = runner.invoke(app, ["keywords", "hello"])

        assert result.exit_code == 0
        assert "No keywords found" in result.output


class TestStatsCommand:
    """Tests for the stats command."""

    def test_default_stats(self):
        result = runner.invoke(app, ["stats"])

        assert result.exit_code == 0
        assert "default" in result.output
        assert "Words:" in result.output

    def test_json_stats(self, dict_file: Path):
        result = runner.invoke(app, ["stats", "--dict", str(dict_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output.strip().splitlines()[-1])
        assert data["word_count"] == 6
        assert data["total"] == 53
        assert data["is_full_dictionary"] is True


class TestDoctorCommand:
    """Tests for the doctor command."""

    @patch("dagseg.cli.load_bundled_dictionary")
    def test_all_checks_pass(self, mock_bundled):
        mock_bundled.return_value = [("北京", 1), ("天安门", 1)]

        result = runner.invoke(app, ["doctor"])

        assert result.exit_code == 0
        assert "OK" in result.output
        assert "2 words" in result.output
        assert "NOT SET" in result.output
        assert "passed" in result.output.lower()

    @patch("dagseg.cli.load_bundled_dictionary")
    def test_configured_source_checked(self, mock_bundled, dict_file: Path, monkeypatch):
        mock_bundled.return_value = [("北京", 1)]
        monkeypatch.setenv("DAGSEG_DICT_PATH", str(dict_file))

        result = runner.invoke(app, ["doctor"])

        assert result.exit_code == 0
        assert "6 words" in result.output

    @patch("dagseg.cli.load_bundled_dictionary")
    def test_bundled_failure(self, mock_bundled):
        mock_bundled.side_effect = OSError("dict.txt not found")

        result = runner.invoke(app, ["doctor"])

        assert result.exit_code == 1
        assert "FAILED" in result.output
        assert "failed" in result.output.lower()

    @patch("dagseg.cli.load_entries")
    @patch("dagseg.cli.load_bundled_dictionary")
    def test_configured_url_failure(self, mock_bundled, mock_entries, monkeypatch):
        mock_bundled.return_value = [("北京", 1)]
        mock_entries.side_effect = DictionaryFetchError("HTTP error 404", status_code=404)
        monkeypatch.setenv("DAGSEG_DICT_URL", "https://example.com/dict.txt")

        result = runner.invoke(app, ["doctor"])

        assert result.exit_code == 1
        assert "404" in result.output

    @patch("dagseg.cli.load_bundled_dictionary")
    def test_configured_non_utf8_file(self, mock_bundled, gbk_dict_file: Path, monkeypatch):
        mock_bundled.return_value = [("北京", 1)]
        monkeypatch.setenv("DAGSEG_DICT_PATH", str(gbk_dict_file))

        result = runner.invoke(app, ["doctor"])

        assert result.exit_code == 1
        assert "FAILED" in result.output
        assert "not valid UTF-8" in result.output
