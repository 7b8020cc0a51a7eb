"""Tests for the interactive calculate command."""

import pytest
from typer.testing import CliRunner

from grade_calculator.main import app


@pytest.fixture
def runner():
    """Return a CLI runner."""
    return CliRunner()


def _lines(*values):
    return "".join(f"{v}\n" for v in values)


class TestCalculateCommand:
    """Tests for the calculate command."""

    def test_complete_course(self, runner):
        """Fully weighted course prints average and scale."""
        result = runner.invoke(app, ["calculate"], input=_lines(2, 50, 80, 50, 100))
        assert result.exit_code == 0
        assert "Welcome to the Average Grade Calculator!" in result.output
        assert "Your current average grade is: 90.00" in result.output
        assert "letter grade form is: A" in result.output
        assert "desired overall average" not in result.output

    def test_partial_course_asks_for_target(self, runner):
        """Remaining weight triggers the desired average prompt."""
        result = runner.invoke(app, ["calculate"], input=_lines(1, 50, 80, 90))
        assert result.exit_code == 0
        assert "Enter your desired overall average" in result.output
        assert "You need an average of 100.00 on the rest." in result.output

    def test_unattainable_target(self, runner):
        """Targets above 100 are reported as unattainable."""
        result = runner.invoke(app, ["calculate"], input=_lines(1, 50, 50, 100))
        assert result.exit_code == 0
        assert "The desired average is unattainable." in result.output

    def test_target_already_met(self, runner):
        """Met targets need an average of zero."""
        result = runner.invoke(app, ["calculate"], input=_lines(2, 50, 95, 40, 90, 80))
        assert result.exit_code == 0
        assert "You need an average of 0.00 on the rest." in result.output

    def test_decimal_weights_summing_to_100(self, runner):
        """Decimal weights adding up to 100 do not ask for a target."""
        result = runner.invoke(app, ["calculate"], input=_lines(3, 71.3, 80, 22.9, 80, 5.8, 80))
        assert result.exit_code == 0
        assert "desired overall average" not in result.output
        assert "unattainable" not in result.output
        assert "Your current average grade is: 80.00" in result.output

    def test_invalid_count_reprompts(self, runner):
        """Bad item counts are rejected until a positive integer is given."""
        result = runner.invoke(app, ["calculate"], input=_lines("abc", 0, 1, 100, 75))
        assert result.exit_code == 0
        assert result.output.count("Please enter a positive integer.") == 2
        assert "Your current average grade is: 75.00" in result.output

    def test_non_numeric_weight_reprompts(self, runner):
        """Non-numeric values are rejected."""
        result = runner.invoke(app, ["calculate"], input=_lines(1, "heavy", 100, 75))
        assert result.exit_code == 0
        assert "Please enter a numeric value." in result.output

    def test_out_of_range_grade_reprompts(self, runner):
        """Values outside 0-100 are rejected."""
        result = runner.invoke(app, ["calculate"], input=_lines(1, 100, 120, -3, 75))
        assert result.exit_code == 0
        assert result.output.count("Please enter a value between 0 and 100.") == 2
        assert "Your current average grade is: 75.00" in result.output

    def test_zero_total_weight_fails(self, runner):
        """All-zero weights exit with an error."""
        result = runner.invoke(app, ["calculate"], input=_lines(1, 0, 80))
        assert result.exit_code == 1
        assert "average grade is undefined" in result.output

    def test_input_ends_early(self, runner):
        """Running out of input exits with an error."""
        result = runner.invoke(app, ["calculate"], input=_lines(2, 50))
        assert result.exit_code == 1
        assert "Input ended" in result.output

    def test_json_format(self, runner):
        """JSON output contains the summary fields."""
        result = runner.invoke(app, ["calculate", "--format", "json"], input=_lines(2, 50, 80, 50, 100))
        assert result.exit_code == 0
        assert '"letter_grade": "A"' in result.output
        assert '"grade_point": 4.0' in result.output

    def test_invalid_format(self, runner):
        """Unknown output formats are rejected."""
        result = runner.invoke(app, ["calculate", "--format", "xml"], input=_lines(1, 100, 75))
        assert result.exit_code == 1
        assert "Invalid format: xml" in result.output


class TestVersionCommand:
    """Tests for the version command."""

    def test_prints_version(self, runner):
        """Version command prints the package version."""
        from grade_calculator import __version__

        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert f"grade-calculator version {__version__}" in result.output


class TestCalculateLogging:
    """Tests for logging options of the calculate command."""

    def test_verbose_logs_to_stderr_only(self, runner):
        """Debug records go to stderr and stay out of the summary."""
        result = runner.invoke(app, ["calculate", "-v"], input=_lines(2, 50, 80, 50, 100))
        assert result.exit_code == 0
        assert "grade_calculator" in result.stderr
        assert "DEBUG" in result.stderr
        assert "DEBUG" not in result.stdout
        assert "Your current average grade is: 90.00" in result.stdout

    def test_default_run_has_no_log_lines(self, runner):
        """Without --verbose nothing is logged."""
        result = runner.invoke(app, ["calculate"], input=_lines(2, 50, 80, 50, 100))
        assert result.exit_code == 0
        assert "DEBUG" not in result.output
        assert result.stderr == ""

    def test_log_file_written(self, runner, tmp_path):
        """--log-file receives the same records as stderr."""
        log_path = tmp_path / "calc.log"
        result = runner.invoke(
            app,
            ["calculate", "-v", "--log-file", str(log_path)],
            input=_lines(1, 50, 80, 90),
        )
        assert result.exit_code == 0
        content = log_path.read_text(encoding="utf-8")
        assert "DEBUG" in content
        assert "Collected 1 items" in content

    def test_log_file_quiet_without_verbose(self, runner, tmp_path):
        """Debug records are not written to the file by default."""
        log_path = tmp_path / "calc.log"
        result = runner.invoke(app, ["calculate", "--log-file", str(log_path)], input=_lines(1, 100, 75))
        assert result.exit_code == 0
        assert "DEBUG" not in log_path.read_text(encoding="utf-8")
