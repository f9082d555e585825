import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from payment_queries.infrastructure.config import PaymentQueriesSettings
from payment_queries.infrastructure.logging import (
    add_app_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestAddAppContext:
    def test_adds_app_name_and_version(self) -> None:
        event_dict = add_app_context(None, "info", {"event": "payments_queried"})

        assert event_dict["app"] == "payment-queries"
        assert event_dict["version"]


class TestConfigureLogging:
    def test_sets_root_log_level(self) -> None:
        configure_logging(log_level="warning")

        assert logging.getLogger().level == logging.WARNING

    def test_json_logs_render_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_level="INFO", json_logs=True)

        get_logger("payment_queries.test").info("payments_queried", count=2)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "payments_queried"
        assert record["count"] == 2
        assert record["level"] == "info"
        assert record["app"] == "payment-queries"

    def test_configure_from_settings(self) -> None:
        configure_logging_from_settings(PaymentQueriesSettings(log_level="ERROR"))

        assert logging.getLogger().level == logging.ERROR


class TestGetLogger:
    def test_logger_events_can_be_captured(self) -> None:
        with capture_logs() as logs:
            get_logger("payment_queries.test").warning("invalid_days_rejected", days=-1)

        assert logs == [{"event": "invalid_days_rejected", "days": -1, "log_level": "warning"}]
