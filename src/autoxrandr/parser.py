"""Parsers for the plain ``xrandr`` report and ``xrandr --listactivemonitors``."""

from __future__ import annotations

import logging
import re

from .errors import MalformedReport
from .models import Capability, ConnectionState, DisplayDevice, RefreshRate

log = logging.getLogger(__name__)

# Connector names are any run of non-whitespace, e.g. "eDP-1", "DP-1-2"
_CONNECTOR = r"(?P<connector>\S+)"

# eDP-1 connected primary 1920x1080+0+0 (normal left inverted right x axis y axis) 344mm x 193mm
_DEVICE_RE = re.compile(
    rf"^{_CONNECTOR}\s+"
    r"(?P<state>connected|disconnected)(?=\s|$)\s*"
    r"(?P<primary>primary(?=\s|$))?\s*"
    r"(?:(?P<width>\d+)x(?P<height>\d+)\+(?P<x>\d+)\+(?P<y>\d+)(?=\s|$))?"
    r".*$"
)

#    1920x1080     60.00*+  59.97    59.96
_MODE_RE = re.compile(r"^\s+(?P<width>\d+)x(?P<height>\d+)\S*")

# One refresh token: clock, then the current and preferred flag columns.
# The flags are a fixed two-character field padded with spaces; trailing
# padding at the end of the line may be stripped.
_RATE_RE = re.compile(r"\s*(?P<clock>\d+\.\d+)(?P<current>[* ]?)(?P<preferred>[+ ]?)")

#  0: +*eDP-1 1920/344x1080/193+0+0  eDP-1
# The connector may not start with a flag character, so a line carrying
# flags but no name cannot match.
_ACTIVE_RE = re.compile(r"^\s*(?P<index>\d+):\s*\+?\*?(?P<connector>[^\s+*]\S*).*$")


def _decode(text: str | bytes) -> str:
    if isinstance(text, bytes):
        return text.decode(errors="replace")
    return text


def _split_report(text: str | bytes) -> list[str]:
    """Split a report into lines with terminators removed.

    Splitting up front means a line ending can never end up inside a
    connector token of the following line.
    """
    lines = _decode(text).splitlines()
    if not lines:
        raise MalformedReport("empty report")
    return lines


def _parse_rates(rest: str, line_no: int, line: str) -> list[RefreshRate]:
    rates: list[RefreshRate] = []
    pos = 0
    while True:
        m = _RATE_RE.match(rest, pos)
        if m is None or m.end() == pos:
            break
        rates.append(RefreshRate(
            clock=float(m.group("clock")),
            current=m.group("current") == "*",
            preferred=m.group("preferred") == "+",
        ))
        pos = m.end()
    if rest[pos:].strip():
        raise MalformedReport("unexpected refresh rate token", line_no or None, line)
    return rates


def parse_capability(line: str, line_no: int = 0) -> Capability:
    """Parse one indented mode line into a Capability."""
    m = _MODE_RE.match(line)
    if m is None:
        raise MalformedReport("expected a mode line", line_no or None, line)
    return Capability(
        resolution=(int(m.group("width")), int(m.group("height"))),
        refresh_rates=_parse_rates(line[m.end():], line_no, line),
    )


def parse_device_line(line: str, line_no: int = 0) -> DisplayDevice:
    """Parse an output line (the non-indented line naming a connector)."""
    m = _DEVICE_RE.match(line)
    if m is None:
        raise MalformedReport("expected an output line", line_no or None, line)

    resolution = offset = None
    if m.group("width") is not None:
        resolution = (int(m.group("width")), int(m.group("height")))
        offset = (int(m.group("x")), int(m.group("y")))

    return DisplayDevice(
        connector=m.group("connector"),
        state=ConnectionState(m.group("state")),
        primary=m.group("primary") is not None,
        resolution=resolution,
        offset=offset,
    )


def parse_status(text: str | bytes) -> list[DisplayDevice]:
    """Parse the output of plain ``xrandr`` into DisplayDevices, in report order.

    The first line (``Screen 0: minimum ...``) is skipped. Every following
    non-blank line is either an output line or an indented mode line that
    belongs to the output above it. Anything else raises MalformedReport;
    no partial result is returned.
    """
    lines = _split_report(text)
    devices: list[DisplayDevice] = []
    seen: set[str] = set()

    for line_no, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        if line[0].isspace():
            if not devices:
                raise MalformedReport("mode line before any output", line_no, line)
            devices[-1].capabilities.append(parse_capability(line, line_no))
            continue

        device = parse_device_line(line, line_no)
        if device.connector in seen:
            raise MalformedReport(f"duplicate output {device.connector}", line_no, line)
        seen.add(device.connector)
        devices.append(device)

    log.debug("Parsed %d output(s) from xrandr report", len(devices))
    return devices


def parse_active(text: str | bytes) -> set[str]:
    """Parse ``xrandr --listactivemonitors`` into a set of connector names.

    The ``Monitors: N`` header is skipped; index and the ``+``/``*`` flags of
    each monitor line are discarded.
    """
    lines = _split_report(text)
    active: set[str] = set()

    for line_no, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        m = _ACTIVE_RE.match(line)
        if m is None:
            raise MalformedReport("expected an active monitor line", line_no, line)
        active.add(m.group("connector"))

    log.debug("Active outputs: %s", sorted(active))
    return active
