"""Tests for StatusSpec matching."""

import pytest

from httpsimp import (
    STATUS_1XX,
    STATUS_2XX,
    STATUS_3XX,
    STATUS_4XX,
    STATUS_4XX_5XX,
    STATUS_5XX,
    STATUS_ANY,
    STATUS_NONE,
    STATUS_NOT_FOUND,
    STATUS_OK,
    StatusSpec,
)
from httpsimp._status import parse_status_spec

BANDS = {
    STATUS_1XX: range(100, 200),
    STATUS_2XX: range(200, 300),
    STATUS_3XX: range(300, 400),
    STATUS_4XX: range(400, 500),
    STATUS_5XX: range(500, 600),
    STATUS_4XX_5XX: range(400, 600),
    STATUS_ANY: range(100, 600),
    STATUS_NONE: range(0),
}


class TestMatches:
    @pytest.mark.parametrize("spec", list(BANDS))
    def test_band_membership(self, spec):
        expected = BANDS[spec]
        for actual in range(100, 600):
            assert spec.matches(actual) is (actual in expected), (spec, actual)

    def test_exact_match(self):
        assert STATUS_OK.matches(200)
        assert not STATUS_OK.matches(201)
        assert STATUS_NOT_FOUND.matches(404)
        assert StatusSpec(418).matches(418)

    @pytest.mark.parametrize("actual", [0, 99, 600, 1000, -1])
    @pytest.mark.parametrize("spec", [STATUS_ANY, STATUS_NONE, STATUS_2XX, STATUS_OK])
    def test_invalid_actual_raises(self, spec, actual):
        with pytest.raises(ValueError, match="invalid actual status code"):
            spec.matches(actual)

    @pytest.mark.parametrize("code", [42, 600, -1])
    def test_invalid_exact_spec_raises(self, code):
        with pytest.raises(ValueError, match="invalid desired status code spec"):
            StatusSpec(code).matches(200)

    def test_is_int_like(self):
        assert STATUS_OK == 200
        assert isinstance(STATUS_2XX, int)


class TestRepr:
    def test_sentinel_names(self):
        assert repr(STATUS_4XX_5XX) == "StatusSpec.4xx_5xx"
        assert repr(STATUS_ANY) == "StatusSpec.any"

    def test_exact_code(self):
        assert repr(StatusSpec(418)) == "StatusSpec(418)"


class TestParseStatusSpec:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("2xx", STATUS_2XX),
            ("4XX_5XX", STATUS_4XX_5XX),
            ("4xx-5xx", STATUS_4XX_5XX),
            ("any", STATUS_ANY),
            ("none", STATUS_NONE),
            ("201", StatusSpec(201)),
        ],
    )
    def test_parses(self, text, expected):
        assert parse_status_spec(text) == expected

    @pytest.mark.parametrize("text", ["7xx", "ok", "42", "600"])
    def test_rejects(self, text):
        with pytest.raises(ValueError):
            parse_status_spec(text)
