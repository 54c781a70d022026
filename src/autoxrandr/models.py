"""Data models: DisplayDevice, DeviceProfile, Profile."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import MissingCurrentRefreshRate

Resolution = tuple[int, int]
Offset = tuple[int, int]

# Sentinel for "unspecified" geometry in a persisted profile
UNSET: tuple[int, int] = (0, 0)


# ── Enums ────────────────────────────────────────────────────────────────

class ConnectionState(Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


# ── Parsed xrandr report ─────────────────────────────────────────────────

@dataclass
class RefreshRate:
    clock: float
    current: bool = False
    preferred: bool = False


@dataclass
class Capability:
    resolution: Resolution
    refresh_rates: list[RefreshRate] = field(default_factory=list)


@dataclass
class DisplayDevice:
    # Identity
    connector: str              # e.g. "eDP-1", "HDMI-1"
    state: ConnectionState = ConnectionState.DISCONNECTED
    primary: bool = False

    # Geometry: both set or both None (no geometry token on the output line)
    resolution: Resolution | None = None
    offset: Offset | None = None

    # Advertised modes, in report order
    capabilities: list[Capability] = field(default_factory=list)

    @property
    def connected(self) -> bool:
        return self.state == ConnectionState.CONNECTED

    @property
    def current_refresh_rate(self) -> float | None:
        """Clock of the first mode flagged current (``*``), or None."""
        for cap in self.capabilities:
            for rate in cap.refresh_rates:
                if rate.current:
                    return rate.clock
        return None


# ── DeviceProfile ────────────────────────────────────────────────────────

@dataclass
class DeviceProfile:
    resolution: Resolution = UNSET
    offset: Offset = UNSET
    primary: bool = False
    refresh_rate: float = 0.0

    def to_xrandr_args(self, connector: str) -> list[str]:
        """Generate the ``--output`` group for this device.

        Zero geometry and a zero rate mean "unspecified" and are left out,
        letting xrandr pick.
        """
        args = ["--output", connector]
        if self.primary:
            args.append("--primary")
        if self.resolution != UNSET:
            args += ["--mode", f"{self.resolution[0]}x{self.resolution[1]}"]
        if self.offset != UNSET:
            args += ["--pos", f"{self.offset[0]}x{self.offset[1]}"]
        if self.refresh_rate != 0.0:
            args += ["--rate", f"{self.refresh_rate:g}"]
        return args

    def describe(self) -> str:
        return (
            f"resolution: {self.resolution[0]}x{self.resolution[1]}, "
            f"offset: {self.offset[0]}x{self.offset[1]}, "
            f"primary: {str(self.primary).lower()}, "
            f"refresh_rate: {self.refresh_rate:g}"
        )

    def to_dict(self) -> dict:
        return {
            "resolution": list(self.resolution),
            "offset": list(self.offset),
            "primary": self.primary,
            "refresh_rate": self.refresh_rate,
        }

    @classmethod
    def from_dict(cls, d: dict) -> DeviceProfile:
        w, h = d.get("resolution", UNSET)
        x, y = d.get("offset", UNSET)
        return cls(
            resolution=(int(w), int(h)),
            offset=(int(x), int(y)),
            primary=bool(d.get("primary", False)),
            refresh_rate=float(d.get("refresh_rate", 0.0)),
        )


# ── Profile ──────────────────────────────────────────────────────────────

@dataclass
class Profile:
    connected: dict[str, DeviceProfile] = field(default_factory=dict)
    disabled: set[str] = field(default_factory=set)

    @classmethod
    def from_displays(cls, devices: list[DisplayDevice], active: set[str]) -> Profile:
        """Build a profile from a parsed status report and the active set.

        Devices in *active* keep their geometry and current refresh rate;
        every other device is recorded as disabled by name only.
        """
        connected: dict[str, DeviceProfile] = {}
        disabled: set[str] = set()

        for d in devices:
            if d.connector not in active:
                disabled.add(d.connector)
                continue
            rate = d.current_refresh_rate
            if rate is None:
                raise MissingCurrentRefreshRate(d.connector)
            connected[d.connector] = DeviceProfile(
                resolution=d.resolution or UNSET,
                offset=d.offset or UNSET,
                primary=d.primary,
                refresh_rate=rate,
            )

        return cls(connected=connected, disabled=disabled)

    def to_xrandr_args(self) -> list[str]:
        """Generate the full xrandr argument list that re-applies this layout.

        Connectors are emitted in sorted order so the result is stable;
        every ``--output`` group is self-contained, so order is otherwise
        irrelevant to xrandr.
        """
        args: list[str] = []
        for name in sorted(self.connected):
            args += self.connected[name].to_xrandr_args(name)
        for name in sorted(self.disabled):
            args += ["--output", name, "--off"]
        return args

    def to_dict(self) -> dict:
        return {
            "connected_devices": {k: v.to_dict() for k, v in sorted(self.connected.items())},
            "off_devices": sorted(self.disabled),
        }

    @classmethod
    def from_dict(cls, d: dict) -> Profile:
        raw_connected = d.get("connected_devices", {})
        raw_disabled = d.get("off_devices", [])
        if not isinstance(raw_connected, dict):
            raise TypeError("connected_devices must be an object")
        if not isinstance(raw_disabled, list):
            raise TypeError("off_devices must be a list")
        if not all(isinstance(v, dict) for v in raw_connected.values()):
            raise TypeError("connected_devices entries must be objects")
        if not all(isinstance(k, str) for k in raw_disabled):
            raise TypeError("off_devices entries must be strings")

        connected = {str(k): DeviceProfile.from_dict(v) for k, v in raw_connected.items()}
        # A connector never appears in both collections; enabled wins
        disabled = set(raw_disabled) - connected.keys()
        return cls(connected=connected, disabled=disabled)
