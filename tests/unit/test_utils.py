"""Unit tests for utility modules."""

import logging

import pytest
from prompt_refiner.utils.text import (
    generate_request_id,
    truncate,
    normalize_key,
    first_sentence,
    split_sentences,
    to_camel_case,
    OrderedDeduper,
)
from prompt_refiner.utils.logger import (
    ROOT_LOGGER_NAME,
    NO_REQUEST,
    RequestContextFilter,
    current_context,
    setup_logging,
    get_logger,
    LogContext,
    log_json,
)


class TestTextHelpers:
    """Tests for text helpers."""

    def test_generate_request_id(self):
        request_id = generate_request_id()
        assert len(request_id) == 12
        int(request_id, 16)
        assert request_id != generate_request_id()

    def test_truncate(self):
        assert truncate("abcdef", 3) == "abc"
        assert truncate("ab", 3) == "ab"

    def test_normalize_key(self):
        assert normalize_key("  Dark Mode ") == "dark mode"

    def test_first_sentence(self):
        assert first_sentence("Build it! Then ship it.") == "Build it"
        assert first_sentence("no terminator") == "no terminator"
        assert first_sentence(". leading") == ""

    def test_split_sentences(self):
        assert split_sentences("One... Two?! Three") == ["One", " Two", " Three"]

    @pytest.mark.parametrize("snake,camel", [
        ("target_audience", "targetAudience"),
        ("estimated_complexity", "estimatedComplexity"),
        ("platform", "platform"),
    ])
    def test_to_camel_case(self, snake, camel):
        assert to_camel_case(snake) == camel

    def test_to_camel_case_empty(self):
        assert to_camel_case("") == ""


class TestOrderedDeduper:
    """Tests for OrderedDeduper."""

    def test_first_occurrence_wins(self):
        seen = OrderedDeduper()
        assert seen.add("Dark Mode")
        assert not seen.add(" dark mode")
        assert seen.add("offline sync")
        assert seen.keys == ["dark mode", "offline sync"]
        assert len(seen) == 2

    def test_contains(self):
        seen = OrderedDeduper(["Share Photos"])
        assert "share photos" in seen
        assert "upload videos" not in seen


class TestLogger:
    """Tests for logging helpers."""

    def test_logger_names_are_rooted(self):
        assert get_logger("prompt_refiner.refiner.engine").name == f"{ROOT_LOGGER_NAME}.refiner.engine"
        assert get_logger("tests").name == f"{ROOT_LOGGER_NAME}.tests"

    def test_log_context_does_not_swallow_errors(self):
        logger = get_logger("tests.context")
        with pytest.raises(ValueError):
            with LogContext(logger, "Failing operation", request_id="abc"):
                raise ValueError("boom")
        assert current_context() == {}

    def test_log_context_binds_fields(self):
        logger = get_logger("tests.bind")
        with LogContext(logger, "Refining prompt", request_id="abc123", sources="text"):
            assert current_context() == {"request_id": "abc123", "sources": "text"}
            with LogContext(logger, "Gate", stage="gate"):
                assert current_context() == {"request_id": "abc123", "sources": "text", "stage": "gate"}
            assert "stage" not in current_context()
        assert current_context() == {}

    def test_filter_stamps_request_id(self):
        context_filter = RequestContextFilter()
        outside = logging.LogRecord("promptrefiner.tests", logging.INFO, __file__, 1, "outside", None, None)
        assert context_filter.filter(outside)
        assert outside.request_id == NO_REQUEST

        with LogContext(get_logger("tests.filter"), "Refining prompt", request_id="abc123"):
            inside = logging.LogRecord("promptrefiner.tests", logging.INFO, __file__, 1, "inside", None, None)
            context_filter.filter(inside)
        assert inside.request_id == "abc123"

    def test_log_file_lines_carry_request_id(self, tmp_path):
        log_file = tmp_path / "logs" / "refiner.log"
        setup_logging(level="INFO", log_file=log_file, console=False)
        try:
            logger = get_logger("tests.file")
            with LogContext(logger, "Refining prompt", request_id="abc123"):
                logger.info("inside")
            logger.info("outside")
        finally:
            setup_logging(level="WARNING", console=False)

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert any(line.endswith("[abc123]: inside") for line in lines)
        assert any(line.endswith("[-]: outside") for line in lines)
        assert any("Completed: Refining prompt" in line for line in lines)

    def test_log_json(self, caplog):
        logger = get_logger("tests.json")
        with caplog.at_level(logging.DEBUG, logger=logger.name):
            log_json(logger, "Document", {"purpose": "build a shop"})
        assert '"purpose": "build a shop"' in caplog.text

    def test_log_json_skipped_when_disabled(self, caplog):
        logger = get_logger("tests.quiet")
        with caplog.at_level(logging.WARNING, logger=logger.name):
            log_json(logger, "Document", {"purpose": "build a shop"})
        assert caplog.text == ""
