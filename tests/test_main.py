"""Tests for the command-line entry point."""
import json
from unittest.mock import AsyncMock, patch

import pytest

from legitmate.main import EXIT_FAILED, EXIT_INVALID, EXIT_OK, build_parser, main
from legitmate.models import PredictionResult, Verdict
from legitmate.pipeline import BackendResolver, PredictionContext

FAKE_RESULT = PredictionResult(verdict=Verdict.FAKE, confidence=0.9, keywords=["telegram"])


class TestParser:
    """Tests for argument parsing."""

    def test_predict_arguments(self):
        args = build_parser().parse_args(
            ["--api-base", "http://x.test", "predict", "--title", "Dev", "--description", "Role"]
        )
        assert args.command == "predict"
        assert args.api_base == "http://x.test"
        assert args.company == ""

    def test_description_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["predict", "--title", "Dev"])

    def test_strategy_choices(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--strategy", "neural", "predict-link", "https://x.com"])


class TestMain:
    """Tests for running commands."""

    def test_predict_prints_json(self, capsys):
        with patch.object(BackendResolver, "predict", new=AsyncMock(return_value=FAKE_RESULT)) as mock:
            code = main(
                ["--api-base", "http://x.test/", "predict", "--title", "Dev", "--description", "Role"]
            )

        assert code == EXIT_OK
        assert json.loads(capsys.readouterr().out) == FAKE_RESULT.to_dict()
        job, context = mock.call_args.args
        assert job.title == "Dev"
        assert context == PredictionContext(api_base="http://x.test")

    def test_predict_description_file(self, tmp_path, capsys):
        path = tmp_path / "posting.txt"
        path.write_text("Earn $500 a day on telegram")

        with patch.object(BackendResolver, "predict", new=AsyncMock(return_value=FAKE_RESULT)) as mock:
            code = main(["predict", "--title", "Dev", "--description-file", str(path)])

        assert code == EXIT_OK
        job, _ = mock.call_args.args
        assert job.description == "Earn $500 a day on telegram"

    def test_blank_description_is_invalid(self):
        with patch.object(BackendResolver, "predict", new=AsyncMock(return_value=FAKE_RESULT)) as mock:
            code = main(["predict", "--title", "Dev", "--description", "   "])

        assert code == EXIT_INVALID
        mock.assert_not_called()

    def test_invalid_link(self):
        assert main(["predict-link", "ftp://jobs.example.com"]) == EXIT_INVALID

    def test_predict_link(self, capsys):
        with patch.object(BackendResolver, "predict_link", new=AsyncMock(return_value=FAKE_RESULT)):
            code = main(["predict-link", "https://bit.ly/abcd"])

        assert code == EXIT_OK
        assert json.loads(capsys.readouterr().out)["verdict"] == "Fake"

    def test_bulk_without_api_base_fails(self, tmp_path):
        path = tmp_path / "jobs.csv"
        path.write_text("title,description\n")

        assert main(["--api-base", "", "predict-bulk", str(path)]) == EXIT_FAILED

    def test_bulk_prints_list(self, tmp_path, capsys):
        path = tmp_path / "jobs.csv"
        path.write_text("title,description\n")

        with patch.object(BackendResolver, "predict_bulk", new=AsyncMock(return_value=[FAKE_RESULT])):
            code = main(["--api-base", "http://x.test", "predict-bulk", str(path)])

        assert code == EXIT_OK
        assert json.loads(capsys.readouterr().out) == [FAKE_RESULT.to_dict()]
