"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error/critical
- Context binding
- Renderer selection
- Default context bound at construction

Architecture:
- Unit tests with mocked structlog
- NO real logging output
"""

from unittest.mock import MagicMock, patch

import pytest

from portfolio_ledger.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "portfolio_ledger.infrastructure.logging.console_adapter.structlog"


@pytest.fixture
def mock_structlog():
    with patch(STRUCTLOG) as mocked:
        mocked.get_logger.return_value = MagicMock()
        yield mocked


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("method", ["debug", "info", "warning"])
    def test_forwards_message_and_context(self, mock_structlog, method):
        """Test level methods pass message and structured context through."""
        adapter = ConsoleAdapter()

        getattr(adapter, method)("asset_added", symbol="BTC", total_assets=1)

        getattr(mock_structlog.get_logger.return_value, method).assert_called_once_with(
            "asset_added", symbol="BTC", total_assets=1
        )

    def test_error_adds_exception_details(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.error("save_failed", error=RuntimeError("disk full"), attempt=2)

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "save_failed",
            attempt=2,
            error_type="RuntimeError",
            error_message="disk full",
        )

    def test_critical_without_exception(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.critical("database_down")

        mock_structlog.get_logger.return_value.critical.assert_called_once_with(
            "database_down"
        )

    def test_bind_returns_new_adapter(self, mock_structlog):
        """Test bind() wraps the bound structlog logger."""
        adapter = ConsoleAdapter()
        bound_logger = MagicMock()
        mock_structlog.get_logger.return_value.bind.return_value = bound_logger

        bound = adapter.bind(portfolio_address="ab" * 32)
        bound.info("goal_created")

        assert bound is not adapter
        bound_logger.info.assert_called_once_with("goal_created")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer_when_requested(self, mock_structlog):
        ConsoleAdapter(use_json=True)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_console_renderer_by_default(self, mock_structlog):
        ConsoleAdapter()

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value

    def test_level_name_is_case_insensitive(self, mock_structlog):
        ConsoleAdapter(level="warning")

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(30)

    def test_default_context_bound_to_logger(self, mock_structlog):
        adapter = ConsoleAdapter(app="portfolio-ledger", environment="testing")

        adapter.info("portfolio_initialized")

        mock_structlog.get_logger.assert_called_once_with(
            app="portfolio-ledger", environment="testing"
        )
        mock_structlog.get_logger.return_value.info.assert_called_once_with(
            "portfolio_initialized"
        )
