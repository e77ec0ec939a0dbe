"""Time helpers shared by the request logger and the health endpoint."""

from datetime import datetime, timezone

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000


def utc_timestamp() -> str:
    """Current UTC time in RFC 3339 form, e.g. ``2024-05-01T12:00:00Z``."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def _decimal(value: int, unit: int) -> str:
    """``value / unit`` written with trailing fractional zeros removed."""
    whole, frac = divmod(value, unit)
    digits = f"{frac:0{len(str(unit)) - 1}d}".rstrip("0")
    return f"{whole}.{digits}" if digits else str(whole)


def format_duration(seconds: float) -> str:
    """Render a duration the way Go's ``Duration.String`` does.

    ``0s``, ``850ns``, ``2.5µs``, ``250ms``, ``3.5s``, ``1m0s``,
    ``1h2m3.5s``.  The input is rounded to whole nanoseconds first, so
    a value just under a minute never prints as ``60s``.
    """
    ns = round(seconds * _NS_PER_S)
    if ns == 0:
        return "0s"
    if ns < _NS_PER_US:
        return f"{ns}ns"
    if ns < _NS_PER_MS:
        return _decimal(ns, _NS_PER_US) + "µs"
    if ns < _NS_PER_S:
        return _decimal(ns, _NS_PER_MS) + "ms"
    whole_seconds, frac_ns = divmod(ns, _NS_PER_S)
    hours, rest = divmod(whole_seconds, 3600)
    minutes, secs = divmod(rest, 60)
    text = _decimal(secs * _NS_PER_S + frac_ns, _NS_PER_S) + "s"
    if hours:
        return f"{hours}h{minutes}m{text}"
    if minutes:
        return f"{minutes}m{text}"
    return text
