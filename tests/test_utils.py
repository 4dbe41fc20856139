import logging
from datetime import datetime, timedelta, timezone

import pytest

from curseforge.utils import (
    NULL_DATETIME,
    camel_case,
    format_datetime,
    logger_setup,
    nullable_datetime,
    nullable_string,
    parse_datetime,
)


@pytest.mark.parametrize(
    "name, expected",
    [("game_id", "gameId"), ("game_version_type_id", "gameVersionTypeId"), ("index", "index")],
)
def test_camel_case(name, expected):
    assert camel_case(name) == expected


def test_parse_datetime_utc():
    assert parse_datetime("2022-09-24T01:18:51.097Z") == datetime(2022, 9, 24, 1, 18, 51, 97000, tzinfo=timezone.utc)


def test_parse_datetime_naive_is_utc():
    assert parse_datetime("2022-09-24T01:18:51").tzinfo == timezone.utc


def test_parse_datetime_converts_offsets():
    dt = parse_datetime("2022-09-24T03:18:51+02:00")
    assert dt == datetime(2022, 9, 24, 1, 18, 51, tzinfo=timezone.utc)
    assert dt.utcoffset() == timedelta(0)


def test_parse_datetime_rejects_non_strings():
    with pytest.raises(TypeError):
        parse_datetime(1663982331)


def test_format_datetime():
    assert format_datetime(datetime(2022, 9, 24, 1, 18, 51, tzinfo=timezone.utc)) == "2022-09-24T01:18:51Z"


def test_nullable_helpers():
    assert nullable_string("") is None
    assert nullable_string("x") == "x"
    assert nullable_string(None) is None
    with pytest.raises(TypeError):
        nullable_string(5)
    assert nullable_datetime(NULL_DATETIME) is None
    assert nullable_datetime(None) is None
    assert nullable_datetime("2022-08-05T11:57:05.791Z").year == 2022


def test_logger_setup_is_idempotent(tmp_path):
    log_file = tmp_path / "cf.log"
    logger = logger_setup("curseforge.test_setup", level=logging.WARNING,
                          log_to_file=str(log_file), file_level=logging.DEBUG)
    again = logger_setup("curseforge.test_setup", level=logging.WARNING,
                         log_to_file=str(log_file), file_level=logging.DEBUG)
    assert logger is again
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    logger.debug("written to file only")
    for handler in logger.handlers:
        handler.flush()
    assert "written to file only" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
