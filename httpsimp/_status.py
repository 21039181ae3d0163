"""Status code predicates used to decide whether a parser applies to a response."""

from __future__ import annotations


class StatusSpec(int):
    """Integer-like status predicate: an exact HTTP status or one of the class sentinels.

    Usage:
        STATUS_2XX.matches(204)        # True
        StatusSpec(418).matches(418)   # True
        STATUS_4XX_5XX.matches(302)    # False

    A StatusSpec can also be passed directly as a parser option to override
    which statuses the parser accepts.
    """

    def matches(self, actual: int) -> bool:
        """Return whether the actual status code satisfies this spec.

        Raises ValueError if actual (or an exact spec) is not a valid HTTP status.
        """
        if actual < 100 or actual > 599:
            raise ValueError(f"invalid actual status code {actual}")

        band = _BANDS.get(int(self))
        if band is not None:
            return any(lo <= actual <= hi for lo, hi in band)

        if self < 100 or self > 599:
            raise ValueError(f"invalid desired status code spec {int(self)}")
        return actual == int(self)

    def __repr__(self) -> str:
        name = _NAMES.get(int(self))
        if name is not None:
            return f"StatusSpec.{name}"
        return f"StatusSpec({int(self)})"


STATUS_NONE = StatusSpec(0)
STATUS_ANY = StatusSpec(-1500)
STATUS_1XX = StatusSpec(-100)
STATUS_2XX = StatusSpec(-200)
STATUS_3XX = StatusSpec(-300)
STATUS_4XX = StatusSpec(-400)
STATUS_5XX = StatusSpec(-500)
STATUS_4XX_5XX = StatusSpec(-900)

STATUS_OK = StatusSpec(200)
STATUS_CREATED = StatusSpec(201)
STATUS_ACCEPTED = StatusSpec(202)
STATUS_NO_CONTENT = StatusSpec(204)
STATUS_PARTIAL_CONTENT = StatusSpec(206)

STATUS_UNAUTHORIZED = StatusSpec(401)
STATUS_FORBIDDEN = StatusSpec(403)
STATUS_NOT_FOUND = StatusSpec(404)

# Inclusive (lo, hi) ranges per sentinel. NONE has no ranges.
_BANDS: dict[int, tuple[tuple[int, int], ...]] = {
    STATUS_NONE: (),
    STATUS_ANY: ((100, 599),),
    STATUS_1XX: ((100, 199),),
    STATUS_2XX: ((200, 299),),
    STATUS_3XX: ((300, 399),),
    STATUS_4XX: ((400, 499),),
    STATUS_5XX: ((500, 599),),
    STATUS_4XX_5XX: ((400, 499), (500, 599)),
}

_NAMES: dict[int, str] = {
    STATUS_NONE: "none",
    STATUS_ANY: "any",
    STATUS_1XX: "1xx",
    STATUS_2XX: "2xx",
    STATUS_3XX: "3xx",
    STATUS_4XX: "4xx",
    STATUS_5XX: "5xx",
    STATUS_4XX_5XX: "4xx_5xx",
}


def parse_status_spec(text: str) -> StatusSpec:
    """Parse a CLI-style spec such as "2xx", "4xx_5xx", "any" or "404"."""
    key = text.strip().lower().replace("-", "_")
    for value, name in _NAMES.items():
        if name == key:
            return StatusSpec(value)
    try:
        code = int(key)
    except ValueError:
        raise ValueError(f"unknown status spec {text!r}") from None
    if code < 100 or code > 599:
        raise ValueError(f"status code out of range: {code}")
    return StatusSpec(code)
