"""Tests for value types, enums and structured logging."""

import json
import logging

import pytest

from framer import Affine2D, ConfigError, Framer, Point2D, Rotation, Size2D
from framer.core.enums import Origin, coerce
from framer.core.logging import JSONFormatter, get_logger


def test_point_arithmetic():
    p = Point2D(1.0, 2.0)
    q = Point2D(3.0, -1.0)

    assert p + q == Point2D(4.0, 1.0)
    assert p - q == Point2D(-2.0, 3.0)
    assert p * 2.0 == Point2D(2.0, 4.0)
    assert tuple(p) == (1.0, 2.0)
    assert p.apply(Affine2D.translate(1.0, 1.0)) == Point2D(2.0, 3.0)


def test_size_helpers():
    s = Size2D(720.0, 1280.0)

    assert s.as_point() == Point2D(720.0, 1280.0)
    assert s.center == Point2D(360.0, 640.0)
    assert s.aspect == pytest.approx(0.5625)
    assert tuple(s) == (720.0, 1280.0)


@pytest.mark.parametrize(
    "degrees,expected",
    [(0, Rotation.NONE), (90, Rotation.CW_90), (180, Rotation.CW_180), (-90, Rotation.CW_270)],
)
def test_rotation_from_degrees(degrees, expected):
    assert Rotation.from_degrees(degrees) is expected
    assert Rotation.from_degrees(expected.degrees) is expected


def test_rotation_from_bad_degrees():
    with pytest.raises(ConfigError):
        Rotation.from_degrees(30)


def test_coerce_passes_members_through():
    assert coerce(Origin, Origin.CENTER) is Origin.CENTER
    assert coerce(Origin, "center") is Origin.CENTER


def test_engine_rotation_matches_module_function():
    f = Framer((10, 10), (20, 20))
    assert f.rotation(Rotation.CW_180) == Affine2D(-1.0, 0.0, 0.0, -1.0, 0.0, 0.0)


def test_json_formatter_merges_structured_data():
    record = logging.LogRecord("framer.test", logging.INFO, __file__, 1, "hello", None, None)
    record.extra_data = {"ratio": 0.5}

    data = json.loads(JSONFormatter().format(record))

    assert data["message"] == "hello"
    assert data["level"] == "INFO"
    assert data["ratio"] == 0.5


def test_structured_logger_attaches_data(caplog):
    log = get_logger("framer.test")

    with caplog.at_level(logging.INFO, logger="framer.test"):
        log.info("mapped", {"x": 1.0})

    assert caplog.records[0].extra_data == {"x": 1.0}
