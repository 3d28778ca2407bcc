"""
rudder.release - Release view objects.

A release is produced by the release service and handed back as the
result of an install call. rudder never mutates one; it only renders it.

Wire format (JSON):

    {
      "name": "my-app",
      "info": {
        "lastDeployed": "2016-04-20T18:32:05Z",
        "status": {"code": "DEPLOYED"}
      },
      "chart": {"metadata": {"name": "nginx", "version": "1.2.3"}},
      "manifest": "kind: Pod\\n..."
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Status(str, Enum):
    """Release status code."""
    UNKNOWN = "UNKNOWN"
    DEPLOYED = "DEPLOYED"
    DELETED = "DELETED"
    SUPERSEDED = "SUPERSEDED"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Any) -> Status:
        if isinstance(value, dict):
            value = value.get("code")
        try:
            return cls(str(value).upper())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class ChartMetadata:
    name: str = ""
    version: str = ""


@dataclass(frozen=True)
class Info:
    last_deployed: datetime = EPOCH
    status: Status = Status.UNKNOWN


@dataclass(frozen=True)
class Release:
    """A named instantiation of a chart."""
    name: str
    info: Info = field(default_factory=Info)
    chart: ChartMetadata = field(default_factory=ChartMetadata)
    manifest: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Release:
        """Build a release from its JSON form.

        Raises TypeError when a nested block is not a mapping and
        ValueError when the timestamp cannot be parsed.
        """
        data = _mapping(data, "release")
        info = _mapping(data.get("info"), "info")
        chart = _mapping(data.get("chart"), "chart")
        metadata = _mapping(chart.get("metadata"), "chart.metadata")
        return cls(
            name=str(data.get("name") or ""),
            info=Info(
                last_deployed=parse_timestamp(info.get("lastDeployed")),
                status=Status.parse(info.get("status")),
            ),
            chart=ChartMetadata(
                name=str(metadata.get("name") or ""),
                version=str(metadata.get("version") or ""),
            ),
            manifest=str(data.get("manifest") or ""),
        )


@dataclass(frozen=True)
class InstallRequest:
    """A single install call. ``values`` is passed through untouched."""
    chart: str
    values: bytes = b""
    dry_run: bool = False


@dataclass(frozen=True)
class InstallResponse:
    release: Release | None = None


def parse_timestamp(value: Any) -> datetime:
    """Parse an RFC 3339 string or epoch seconds into an aware datetime.

    >>> parse_timestamp("2016-04-20T18:32:05Z").isoformat()
    '2016-04-20T18:32:05+00:00'
    >>> parse_timestamp(0) == EPOCH
    True
    """
    if value is None or value == "":
        return EPOCH
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, dict):
        # protobuf Timestamp as {seconds, nanos}
        seconds = int(value.get("seconds", 0))
        nanos = int(value.get("nanos", 0))
        return datetime.fromtimestamp(seconds + nanos / 1e9, tz=timezone.utc)
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    ts = datetime.fromisoformat(text)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def format_timestamp(ts: datetime) -> str:
    """Format a timestamp in ANSI C layout, in UTC.

    >>> format_timestamp(datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc))
    'Mon Jan  2 15:04:05 2006'
    """
    ts = ts.astimezone(timezone.utc)
    return f"{ts:%a %b} {ts.day:>2} {ts:%H:%M:%S %Y}"


def _mapping(value: Any, what: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"{what} must be a mapping, got {type(value).__name__}")
    return value
