"""
🧪 Tests Launcher
Command-line solve and version commands
"""

import json
import logging

import pytest
from typer.testing import CliRunner

from core.config import get_settings
from launcher.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NUMBERS_GA_LOG_TO_FILE", "false")
    get_settings.cache_clear()
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    yield
    root_logger.handlers = handlers
    get_settings.cache_clear()


class TestSolveCommand:

    def test_exact_solution(self):
        result = runner.invoke(app, [
            "solve", "1", "2", "3", "4", "5", "6",
            "--target", "21", "--seed", "42", "--population", "300"
        ])

        assert result.exit_code == 0, result.output
        assert "EXACT SOLUTION" in result.output
        assert "Generations" in result.output

    def test_approximate_solution(self):
        result = runner.invoke(app, [
            "solve", "2", "2", "2", "2", "2", "2",
            "--target", "1000000", "--seed", "1", "--population", "10", "--generations", "5"
        ])

        assert result.exit_code == 0, result.output
        assert "CLOSEST SOLUTION" in result.output

    def test_output_file(self, tmp_path):
        output = tmp_path / "out" / "result.json"
        result = runner.invoke(app, [
            "solve", "3", "7", "9", "25", "50", "100", "-t", "853",
            "--seed", "5", "--population", "20", "--generations", "10",
            "--output", str(output)
        ])

        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["numbers"] == [3, 7, 9, 25, 50, 100]
        assert data["target"] == 853
        assert 1 <= data["generations"] <= 10

    def test_prompts_for_missing_input(self):
        result = runner.invoke(
            app,
            ["solve", "--seed", "3", "--population", "20", "--generations", "5"],
            input="1\n2\n3\n4\n5\n6\n21\n"
        )

        assert result.exit_code == 0, result.output
        assert "Number 6" in result.output
        assert "Target" in result.output

    def test_wrong_number_count(self):
        result = runner.invoke(app, ["solve", "1", "2", "3", "--target", "10"])

        assert result.exit_code == 2
        assert "Invalid input" in result.output

    def test_invalid_population(self):
        result = runner.invoke(app, [
            "solve", "1", "2", "3", "4", "5", "6", "--target", "21", "--population", "0"
        ])

        assert result.exit_code == 2
        assert "population_size" in result.output


class TestVersionCommand:

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
