"""Unit tests for CLI argument parsing and rendering."""
from __future__ import annotations

from dataclasses import replace
from unittest.mock import patch

import pytest

from quoteboard.cli import _run, build_parser, render_state
from quoteboard.config import AppConfig, SymbolsConfig
from quoteboard.models import Quote, QuoteState
from quoteboard.services import QuoteBoard


class TestBuildParser:
    def test_fetch_command(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["fetch"])
        assert args.command == "fetch"
        assert args.symbols == []

    def test_fetch_with_symbols(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["fetch", "AAPL", "MSFT"])
        assert args.symbols == ["AAPL", "MSFT"]

    def test_watch_command_default_interval(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["watch"])
        assert args.command == "watch"
        assert args.interval is None

    def test_watch_command_custom_interval(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["watch", "120"])
        assert args.interval == 120

    def test_config_flag(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["--config", "/tmp/c.yaml", "fetch"])
        assert args.config == "/tmp/c.yaml"

    @pytest.mark.parametrize("interval", ["0", "-5", "abc"])
    def test_watch_rejects_non_positive_interval(
        self, interval: str, capsys: pytest.CaptureFixture
    ) -> None:
        parser = build_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["watch", interval])
        assert exc_info.value.code == 2
        assert "interval" in capsys.readouterr().err

    def test_log_level_flag(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["--log-level", "DEBUG", "fetch"])
        assert args.log_level == "DEBUG"

    def test_no_command(self) -> None:
        parser = build_parser()
        args = parser.parse_args([])
        assert args.command is None


class TestRenderState:
    def test_rows_sorted_by_symbol(self) -> None:
        state = QuoteState(quotes=(Quote("MSFT", 300.0), Quote("AAPL", 150.0)))
        lines = render_state(state).splitlines()
        assert lines[0].startswith("AAPL")
        assert "$150.00" in lines[0]
        assert lines[1].startswith("MSFT")
        assert "$300.00" in lines[1]

    def test_empty_batch(self) -> None:
        assert render_state(QuoteState()) == "No quotes."

    def test_error_shown_above_quotes(self) -> None:
        state = QuoteState(quotes=(Quote("AAPL", 1.5),), error="Symbol file not found: x")
        lines = render_state(state).splitlines()
        assert lines[0] == "Error: Symbol file not found: x"
        assert lines[1].startswith("AAPL")


class TestRunFetch:
    @pytest.mark.asyncio
    async def test_fetch_prints_quotes(
        self, sample_app_config: AppConfig, fake_client, capsys: pytest.CaptureFixture
    ) -> None:
        args = build_parser().parse_args(["fetch", "AAPL", "BADSYM"])

        def make_board(config: AppConfig, source=None) -> QuoteBoard:
            return QuoteBoard(config, source=source, client=fake_client)

        with patch("quoteboard.cli.load_config", return_value=sample_app_config):
            with patch("quoteboard.cli.QuoteBoard", side_effect=make_board):
                code = await _run(args)

        assert code == 0
        assert fake_client.calls == ["AAPL", "BADSYM"]
        out = capsys.readouterr().out
        assert "AAPL" in out
        assert "BADSYM" not in out

    @pytest.mark.asyncio
    async def test_fetch_load_error_exits_nonzero(
        self, sample_app_config: AppConfig, fake_client, tmp_path, capsys: pytest.CaptureFixture
    ) -> None:
        config = replace(
            sample_app_config, symbols=SymbolsConfig(path=str(tmp_path / "missing.json"))
        )
        args = build_parser().parse_args(["fetch"])

        def make_board(config: AppConfig, source=None) -> QuoteBoard:
            return QuoteBoard(config, source=source, client=fake_client)

        with patch("quoteboard.cli.load_config", return_value=config):
            with patch("quoteboard.cli.QuoteBoard", side_effect=make_board):
                code = await _run(args)

        assert code == 1
        assert "Error: Symbol file not found" in capsys.readouterr().out
