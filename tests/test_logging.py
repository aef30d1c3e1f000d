import json
import logging

from feasible_zone.logging import LogEvent, StructuredLogger, create_logger
from feasible_zone.logging.events import ERROR_EVENTS, LEVEL_EVENTS, ZONE_EVENTS


def test_event_categories_cover_every_event():
    assert ZONE_EVENTS | LEVEL_EVENTS | ERROR_EVENTS | {LogEvent.CLI_COMMAND} == set(LogEvent)
    assert all(e.value.startswith("zone.") for e in ZONE_EVENTS)
    assert all(e.value.startswith("error.") for e in ERROR_EVENTS)


def test_log_record_is_json(capsys):
    logger = create_logger("test_logging_json")
    logger.info(
        event=LogEvent.SYSTEM_MATCHED,
        message="Player system matches target",
        metadata={"level_id": 2},
    )

    entry = json.loads(capsys.readouterr().err.strip())
    assert entry["level"] == "INFO"
    assert entry["component"] == "test_logging_json"
    assert entry["event"] == "zone.system.matched"
    assert entry["metadata"] == {"level_id": 2}
    assert "timestamp" in entry


def test_disabled_level_is_skipped(capsys):
    logger = StructuredLogger("test_logging_quiet", level=logging.WARNING)
    logger.info(event=LogEvent.ZONE_EVALUATED, message="not shown")
    logger.debug(event=LogEvent.ZONE_EVALUATED, message="not shown")
    assert capsys.readouterr().err == ""

    logger.set_level(logging.DEBUG)
    logger.debug(event=LogEvent.ZONE_EVALUATED, message="shown")
    assert "shown" in capsys.readouterr().err


def test_error_includes_exception(capsys):
    logger = create_logger("test_logging_error")
    try:
        raise ValueError("bad campaign")
    except ValueError as e:
        logger.error(event=LogEvent.CONFIG_ERROR, message="Invalid campaign file", exc_info=e)

    first_line = capsys.readouterr().err.splitlines()[0]
    entry = json.loads(first_line)
    assert entry["exception"] == {"type": "ValueError", "message": "bad campaign"}


def test_handler_is_added_once():
    first = create_logger("test_logging_once")
    second = create_logger("test_logging_once")
    assert first.logger is second.logger
    assert len(second.logger.handlers) == 1


def test_records_propagate_to_caplog(caplog):
    logger = create_logger("test_logging_caplog")
    with caplog.at_level(logging.INFO, logger=logger.logger_name):
        logger.warning(event=LogEvent.ZONE_EMPTY, message="empty")
    assert json.loads(caplog.records[0].getMessage())["event"] == "zone.empty"
