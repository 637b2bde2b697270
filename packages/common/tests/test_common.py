"""Tests for shared exceptions, helpers and logging setup."""

import io
import json
import os
import pytest
import structlog
from datetime import datetime, timezone
from unittest.mock import patch
from common import (
    ConfigurationError,
    FetchError,
    HostsFileError,
    PipelineException,
    SourceFileError,
    get_env,
    local_timestamp,
    setup_logging,
)


class TestExceptions:
    """Test cases for the exception hierarchy."""

    def test_message_only(self):
        assert str(PipelineException("boom")) == "boom"

    def test_context_and_cause(self):
        """Test context and original error appear in the message."""
        error = FetchError(
            "Failed to download https://a.example",
            context={"url": "https://a.example", "timeout": 30},
            original_error=ConnectionError("refused"),
        )

        text = str(error)
        assert text.startswith("Failed to download https://a.example (url=https://a.example, timeout=30)")
        assert text.endswith("[caused by: ConnectionError: refused]")

    @pytest.mark.parametrize(
        "error_class", [FetchError, SourceFileError, HostsFileError, ConfigurationError]
    )
    def test_subclasses(self, error_class):
        """Test every updater error is a PipelineException."""
        error = error_class("x")

        assert isinstance(error, PipelineException)
        assert error.context == {}
        assert error.original_error is None


class TestUtils:
    """Test cases for helper functions."""

    def test_get_env_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert get_env("AEIGO_MISSING", "fallback") == "fallback"
            assert get_env("AEIGO_MISSING") == ""

    def test_get_env_required(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError):
                get_env("AEIGO_MISSING", required=True)

    def test_get_env_value(self):
        with patch.dict(os.environ, {"AEIGO_SENTINEL": "127.0.0.1"}):
            assert get_env("AEIGO_SENTINEL", "0.0.0.0") == "127.0.0.1"

    def test_local_timestamp_format(self):
        """Test RFC 3339 output with offset and no fractional seconds."""
        moment = datetime(2023, 11, 21, 10, 15, 30, 123456, tzinfo=timezone.utc)

        stamp = local_timestamp(moment)

        assert stamp == moment.astimezone().isoformat(timespec="seconds")
        assert "." not in stamp
        assert stamp[-6] in "+-"

    def test_local_timestamp_now(self):
        assert datetime.fromisoformat(local_timestamp()).tzinfo is not None


def test_setup_logging_json():
    """Test JSON logs carry service and version context."""
    stream = io.StringIO()

    try:
        logger = setup_logging(
            level="INFO", service_name="updater", json_format=True, stream=stream
        )
        logger.info("Hosts file written", path="/etc/hosts")
        logger.debug("hidden")
    finally:
        structlog.reset_defaults()

    lines = [line for line in stream.getvalue().splitlines() if line.strip()]
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["event"] == "Hosts file written"
    assert record["service"] == "updater"
    assert record["version"] == "0.0.1"
    assert record["level"] == "info"
    assert "timestamp" in record
