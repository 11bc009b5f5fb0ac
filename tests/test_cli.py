# test_cli.py

import pytest
from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from consoleprinter import cli, messages
from consoleprinter.cli import main, parse_args, process
from consoleprinter.config import SigHash, SigHashType
from consoleprinter.display import Renderer
from consoleprinter.errors import ConsoleError, plain_text


class TestParseArgs:
    """Options may appear anywhere on the command line."""

    def test_intermixed_options(self):
        """Options after the command are still options."""
        options, words = parse_args(["listaddr", "-c", "3", "-H", "NONE", "-A", "savings"])
        assert options.count == 3
        assert options.sighash == SigHash(SigHashType.NONE, True)
        assert words == ["listaddr", "savings"]

    def test_defaults(self):
        options, words = parse_args([])
        assert options.count == 5
        assert options.require == 2
        assert words == []

    def test_invalid_value_raises(self):
        """Validation problems surface as console errors."""
        with pytest.raises(ConsoleError, match="Invalid index option"):
            parse_args(["-i", "abc"])

    def test_unknown_option_raises(self):
        """Unknown options are reported together with the usage text."""
        with pytest.raises(ConsoleError) as exc_info:
            parse_args(["--bogus"])
        assert "--bogus" in str(exc_info.value)
        assert messages.USAGE_HEADER in plain_text(exc_info.value.doc)


class TestMain:
    """End-to-end runs of the hw entry point."""

    @pytest.fixture(autouse=True)
    def home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HASKOIN_HOME", str(tmp_path))
        self.home = tmp_path

    def test_help(self, capsys):
        """-h prints usage and returns normally."""
        main(["-h", "--no-color"])
        out = capsys.readouterr().out
        assert out.startswith(messages.USAGE_HEADER + "\n")
        assert "Options:\n  -c, --count=INT" in out
        assert "\n  decodetx <tx>" in out

    def test_usage_without_command(self, capsys):
        """No command prints usage."""
        main(["--no-color"])
        assert capsys.readouterr().out.startswith(messages.USAGE_HEADER)

    def test_version(self, capsys):
        main(["-v", "--no-color"])
        assert capsys.readouterr().out == f"haskoin wallet version {messages.VERSION}\n"

    def test_invalid_command(self, capsys):
        """An unknown command exits with failure after printing the error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--no-color", "frobnicate"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().out == "Invalid command: frobnicate\n"
        assert not (self.home / ".haskoin").exists()

    def test_invalid_option_value(self, capsys):
        """Bad option values are fatal."""
        with pytest.raises(SystemExit) as exc_info:
            main(["-c", "0", "listaddr"])
        assert exc_info.value.code == 1
        assert "Invalid count option: 0" in capsys.readouterr().out

    def test_wrong_arity_prints_usage(self, capsys):
        """init needs exactly one seed."""
        main(["--no-color", "init"])
        out = capsys.readouterr().out
        assert "Haskoin working directory created:" in out
        assert messages.USAGE_HEADER in out

    def test_wallet_command_not_implemented(self, capsys):
        """Wallet commands stop after setup with a fatal error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--no-color", "listaddr", "default"])
        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "experimental" in out
        assert out.endswith("Command not implemented: listaddr\n")
        assert (self.home / ".haskoin" / "wallet").is_dir()

    def test_notice_only_on_creation(self, capsys):
        """The working directory notice appears on first use only."""
        main(["--no-color", "init"])
        capsys.readouterr()
        main(["--no-color", "init"])
        assert "working directory created" not in capsys.readouterr().out


class TestProcess:
    """Command dispatch with injected collaborators."""

    def setup_method(self):
        self.renderer = Mock(spec=Renderer)
        self.logger = Mock()
        self.console = Mock()

    def test_help_skips_setup(self, monkeypatch):
        """Help never touches the working directory."""
        get_work_dir = Mock()
        monkeypatch.setattr(cli, "get_work_dir", get_work_dir)
        options, words = parse_args(["-h", "init", "seed"])
        process(options, words, self.renderer, self.logger, self.console)
        get_work_dir.assert_not_called()
        self.renderer.render.assert_called_once()

    def test_warning_panel_printed(self, tmp_path, monkeypatch):
        """The experimental warning goes to the Rich console."""
        monkeypatch.setenv("HASKOIN_HOME", str(tmp_path))
        options, words = parse_args(["dumpkey"])
        with pytest.raises(ConsoleError, match="Command not implemented: dumpkey"):
            process(options, words, self.renderer, self.logger, self.console)
        self.console.print.assert_called_once()

    def test_no_color_applies_to_parse_errors(self, capsys):
        """Option errors honor --no-color even though parsing failed."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--no-color", "-c", "0", "listaddr"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().out == "Invalid count option: 0\n"

    def test_no_color_applies_to_unknown_options(self, capsys):
        """Argument parser errors are plain text under --no-color."""
        with pytest.raises(SystemExit):
            main(["--bogus", "--no-color"])
        out = capsys.readouterr().out
        assert "\033[" not in out
        assert out.startswith("unrecognized arguments: --bogus\n")

    def test_signtx_reports_and_succeeds(self, capsys):
        """signtx announces it is unavailable without failing."""
        main(["--no-color", "signtx"])
        assert capsys.readouterr().out.endswith("Command not implemented: signtx\n")


class TestWarningPanelStyling:
    """The warning panel follows the same color rule as rendered documents."""

    @pytest.fixture(autouse=True)
    def home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HASKOIN_HOME", str(tmp_path))
        monkeypatch.setenv("TERM", "xterm-256color")
        monkeypatch.delenv("NO_COLOR", raising=False)

    def setup_method(self):
        self.renderer = Mock(spec=Renderer)
        self.logger = Mock()

    def test_styled_when_piped(self, capsys):
        """Color is forced even though captured stdout is not a tty."""
        options, words = parse_args(["signtx"])
        process(options, words, self.renderer, self.logger)
        out = capsys.readouterr().out
        assert "experimental" in out
        assert "\033[" in out

    def test_plain_with_no_color(self, capsys):
        """--no-color strips styling from the panel too."""
        options, words = parse_args(["--no-color", "signtx"])
        process(options, words, self.renderer, self.logger)
        out = capsys.readouterr().out
        assert "experimental" in out
        assert "\033[" not in out
