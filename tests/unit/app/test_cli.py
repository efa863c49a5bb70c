"""Tests for CLI interface."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from textconv.app.cli import StrictNumber, cli

# The package re-exports the click group under the same name as the module
cli_module = importlib.import_module("textconv.app.cli")


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def no_discovered_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep configuration files on the test machine out of the way."""
    monkeypatch.setattr(cli_module, "discover_config_file", lambda: None)


class TestCLIBasicFunctionality:
    """Test group options."""

    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ['--help'])

        assert result.exit_code == 0
        assert '--config' in result.output
        assert '--log-level' in result.output
        for command in ('parse', 'bytes', 'count', 'interval', 'replace', 'lines'):
            assert command in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ['--version'])

        assert result.exit_code == 0
        assert 'textconv' in result.output
        assert 'version' in result.output.lower()

    def test_invalid_log_level(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ['--log-level', 'LOUD', 'count', '1'])

        assert result.exit_code == 2
        assert 'Invalid log level' in result.output

    def test_log_level_case_insensitive(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ['-l', 'debug', 'count', '1'])

        assert result.exit_code == 0
        assert logging.getLogger("textconv").level == logging.DEBUG

    def test_config_directory_rejected(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ['--config', str(tmp_path), 'count', '1'])

        assert result.exit_code == 2
        assert 'must be a file' in result.output

    def test_config_extension_rejected(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ['-c', str(tmp_path / 'config.json'), 'count', '1'])

        assert result.exit_code == 2
        assert 'Invalid configuration file extension' in result.output

    def test_missing_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ['-c', str(tmp_path / 'absent.yaml'), 'count', '1'])

        assert result.exit_code == 1
        assert 'Configuration file not found' in result.output

    def test_invalid_config_values(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / 'textconv.yaml'
        _ = path.write_text('lines:\n  max_lines: 0\n', encoding='utf-8')

        result = runner.invoke(cli, ['-c', str(path), 'count', '1'])

        assert result.exit_code == 1
        assert 'lines.max_lines' in result.output

    def test_discovered_config_used(
        self, runner: CliRunner, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(cli_module, "discover_config_file", lambda: config_file)

        result = runner.invoke(cli, ['interval', '65000'])

        assert result.exit_code == 0
        assert result.output.startswith(' 1m05s')


class TestParseCommand:
    """Tests for the parse subcommand."""

    @pytest.mark.parametrize(
        ("kind", "value", "expected"),
        [
            ('int16', '32767', '32767'),
            ('uint64', '18446744073709551615', '18446744073709551615'),
            ('int', '  12', '12'),
            ('double', '0.5', '0.5'),
            ('double', '0x1p4', '16.0'),
        ],
    )
    def test_valid(self, runner: CliRunner, kind: str, value: str, expected: str) -> None:
        result = runner.invoke(cli, ['parse', kind, value])

        assert result.exit_code == 0
        assert result.output.strip() == expected

    def test_negative_after_separator(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ['parse', 'int32', '--', '-5'])

        assert result.exit_code == 0
        assert result.output.strip() == '-5'

    @pytest.mark.parametrize(
        ("kind", "value"),
        [('int16', '32768'), ('uint32', '12abc'), ('double', '1e400'), ('int64', '')],
    )
    def test_invalid(self, runner: CliRunner, kind: str, value: str) -> None:
        result = runner.invoke(cli, ['parse', kind, value])

        assert result.exit_code == 1
        assert f'invalid {kind} value' in result.output

    def test_unknown_kind(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ['parse', 'int128', '1'])

        assert result.exit_code == 2


class TestRenderingCommands:
    """Tests for bytes, count and interval."""

    @pytest.mark.parametrize(
        ("args", "expected"),
        [
            (['bytes', '1023'], '1023 B'),
            (['bytes', '17179869184'], '16 GB'),
            (['count', '12345'], '12 345'),
            (['count', '1234567890'], '1234 million'),
            (['interval', '1500'], '1s500'),
            (['interval', '90000000'], '1d01h'),
        ],
    )
    def test_output(self, runner: CliRunner, args: list[str], expected: str) -> None:
        result = runner.invoke(cli, args)

        assert result.exit_code == 0
        assert result.output.strip() == expected

    def test_interval_aligned_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ['interval', '--aligned', '500'])

        assert result.exit_code == 0
        assert result.output == '500ms\n'

    def test_interval_flag_overrides_config(self, runner: CliRunner, config_file: Path) -> None:
        result = runner.invoke(cli, ['-c', str(config_file), 'interval', '--no-aligned', '65000'])

        assert result.exit_code == 0
        assert result.output.startswith('1m05s')

    def test_buffer_size_truncates(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / 'textconv.yaml'
        _ = path.write_text('formatting:\n  buffer_size: 4\n', encoding='utf-8')

        result = runner.invoke(cli, ['-c', str(path), 'bytes', '1023'])

        assert result.exit_code == 0
        assert result.output.strip() == '102'

    @pytest.mark.parametrize("value", ['-1', '1.5', '18446744073709551616', '12 '])
    def test_rejects_invalid_count(self, runner: CliRunner, value: str) -> None:
        result = runner.invoke(cli, ['bytes', '--', value])

        assert result.exit_code == 2
        assert 'is not a valid uint64 value' in result.output


class TestReplaceCommand:
    """Tests for the replace subcommand."""

    def test_from_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ['replace', 'ab', 'xyz'], input='ababab\n')

        assert result.exit_code == 0
        assert result.output == 'xyzxyzxyz\n'

    def test_from_file(self, runner: CliRunner) -> None:
        with runner.isolated_filesystem():
            _ = Path('input.txt').write_text('hello world', encoding='utf-8')

            result = runner.invoke(cli, ['replace', 'o', '0', 'input.txt'])

        assert result.exit_code == 0
        assert result.output == 'hell0 w0rld'

    def test_no_match_echoes_source(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ['replace', 'zz', 'y'], input='hello')

        assert result.exit_code == 0
        assert result.output == 'hello'

    def test_line_endings_preserved(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "crlf.txt"
        _ = path.write_bytes(b"a\r\nb\r\n")

        result = runner.invoke(cli, ["replace", "zz", "y", str(path)])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"a\r\nb\r\n"

    def test_crlf_replaced_with_match(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["replace", "b", "B"], input=b"ab\r\nab\r\n")

        assert result.exit_code == 0
        assert result.stdout_bytes == b"aB\r\naB\r\n"

    def test_invalid_utf8_passes_through(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "latin1.bin"
        _ = path.write_bytes(b"ab\xffab")

        result = runner.invoke(cli, ["replace", "ab", "x", str(path)])

        assert result.exit_code == 0
        assert result.exception is None
        assert result.stdout_bytes == b"x\xffx"

    def test_non_ascii_pattern(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["replace", "\u00e9t\u00e9", "summer"], input="\u00e9t\u00e9 2024".encode())

        assert result.exit_code == 0
        assert result.stdout_bytes == b"summer 2024"

    def test_empty_pattern(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ['replace', '', 'x'], input='abc')

        assert result.exit_code == 2
        assert 'PATTERN must not be empty' in result.output


class TestLinesCommand:
    """Tests for the lines subcommand."""

    def test_logs_each_line(self, runner: CliRunner, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="textconv.subprocess"):
            result = runner.invoke(cli, ['lines'], input='first\n\nsecond\n')

        assert result.exit_code == 0
        assert '2 line(s) emitted' in result.output
        messages = [r.getMessage() for r in caplog.records if r.name == "textconv.subprocess"]
        assert messages == ['first', 'second']
        assert all(r.levelno == logging.INFO for r in caplog.records if r.name == "textconv.subprocess")

    def test_error_flag(self, runner: CliRunner, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="textconv.subprocess"):
            result = runner.invoke(cli, ['lines', '--error'], input='boom\n')

        assert result.exit_code == 0
        records = [r for r in caplog.records if r.name == "textconv.subprocess"]
        assert [r.levelno for r in records] == [logging.ERROR]

    def test_max_lines(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ['lines', '-n', '2'], input='a\nb\nc\n')

        assert result.exit_code == 0
        assert '2 line(s) emitted' in result.output

    def test_max_lines_from_config(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / 'textconv.yaml'
        _ = path.write_text('lines:\n  max_lines: 1\n', encoding='utf-8')

        result = runner.invoke(cli, ['-c', str(path), 'lines'], input='a\nb\n')

        assert result.exit_code == 0
        assert '1 line(s) emitted' in result.output

    def test_invalid_max_lines(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ['lines', '-n', 'many'], input='a\n')

        assert result.exit_code == 2
        assert 'is not a valid uint32 value' in result.output


class TestStrictNumber:
    """Tests for the StrictNumber parameter type."""

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="Unknown number kind"):
            _ = StrictNumber("int8")

    def test_passes_converted_defaults(self) -> None:
        assert StrictNumber("uint32").convert(5, None, None) == 5
