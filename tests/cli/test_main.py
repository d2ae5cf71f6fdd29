"""Tests for the rangeprim CLI."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from rangeprim.cli.main import cli


class TestExamples:
    """Tests for the examples command."""

    def test_one_and_two_dimensional_results(self, cli_runner: CliRunner) -> None:
        """Test that the example values are reported."""
        result = cli_runner.invoke(
            cli, ["--log-level", "WARNING", "examples", "--seed", "42"]
        )

        assert result.exit_code == 0, f"Command failed: {result.output}"
        for expected in ("12", "51", "90", "129", "168", "156", "0.16", "False"):
            assert expected in result.output

    def test_seed_makes_output_reproducible(self, cli_runner: CliRunner) -> None:
        """Test that equal seeds give equal output."""
        args = ["--log-level", "WARNING", "examples", "--seed", "3"]
        first = cli_runner.invoke(cli, args)
        second = cli_runner.invoke(cli, args)
        assert first.exit_code == 0
        assert first.output == second.output

    def test_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that settings come from the configuration file."""
        config = tmp_path / "rangeprim.yaml"
        config.write_text(
            "logging:\n  level: WARNING\n  rich: false\n"
            "examples:\n  seed: 1\n  lerp_samples: 3\n  random_points: 1\n"
        )

        result = cli_runner.invoke(cli, ["--config", str(config), "examples"])

        assert result.exit_code == 0, f"Command failed: {result.output}"
        assert "lerp(0.5)" in result.output
        assert "lerp(0.25)" not in result.output

    def test_invalid_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that an invalid configuration exits with an error."""
        config = tmp_path / "bad.yaml"
        config.write_text("examples:\n  lerp_samples: 0\n")

        result = cli_runner.invoke(cli, ["--config", str(config), "examples"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestInspect:
    """Tests for the inspect command."""

    def test_integer_range(self, cli_runner: CliRunner) -> None:
        """Test inspecting an integer range with a probe value."""
        result = cli_runner.invoke(
            cli,
            ["--log-level", "WARNING", "inspect", "12", "168", "--t", "0.25", "--value", "37"],
        )

        assert result.exit_code == 0, f"Command failed: {result.output}"
        assert "156" in result.output
        assert "51" in result.output
        assert "0.1603" in result.output
        assert "True" in result.output

    def test_descending_float_range(self, cli_runner: CliRunner) -> None:
        """Test a range whose boundaries need the -- separator."""
        result = cli_runner.invoke(
            cli, ["--log-level", "WARNING", "inspect", "--t", "0.25", "--", "99.5", "-5.5"]
        )

        assert result.exit_code == 0, f"Command failed: {result.output}"
        assert "73.25" in result.output
        assert "-105" in result.output

    def test_vector_range(self, cli_runner: CliRunner) -> None:
        """Test inspecting a 2-D integer range."""
        result = cli_runner.invoke(
            cli,
            ["--log-level", "WARNING", "inspect", "10,-100", "100,100", "--value", "200,0"],
        )

        assert result.exit_code == 0, f"Command failed: {result.output}"
        assert "(55, 0)" in result.output
        assert "(100, 0)" in result.output
        assert "False" in result.output

    def test_mismatched_dimensions(self, cli_runner: CliRunner) -> None:
        """Test that boundaries of different dimension are rejected."""
        result = cli_runner.invoke(cli, ["inspect", "1,2", "3"])

        assert result.exit_code == 2
        assert "expected 2 component(s)" in result.output

    def test_not_a_number(self, cli_runner: CliRunner) -> None:
        """Test that non-numeric boundaries are rejected."""
        result = cli_runner.invoke(cli, ["inspect", "abc", "3"])

        assert result.exit_code == 2
        assert "is not a number" in result.output
