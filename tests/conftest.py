import pytest

from autoxrandr.profile_manager import ProfileManager


LAPTOP_DOCKED = """\
Screen 0: minimum 320 x 200, current 3840 x 1080, maximum 16384 x 16384
eDP-1 connected primary 1920x1080+0+0 (normal left inverted right x axis y axis) 344mm x 193mm
   1920x1080     60.00*+  59.97    59.96    59.93
   1680x1050     59.95    59.88
   1280x720      60.00    59.99    59.86    59.74
HDMI-1 connected 1920x1080+1920+0 (normal left inverted right x axis y axis) 527mm x 296mm
   1920x1080     60.00 +  74.97*   50.00    59.94
   1280x1024     75.02    60.02
DP-1 disconnected (normal left inverted right x axis y axis)
DP-2 connected (normal left inverted right x axis y axis)
   2560x1440     59.95 +
   1920x1080     60.00
"""

LAPTOP_DOCKED_ACTIVE = """\
Monitors: 2
 0: +*eDP-1 1920/344x1080/193+0+0  eDP-1
 1: +HDMI-1 1920/527x1080/296+1920+0  HDMI-1
"""

SIMPLE = "Screen 0: ...\neDP-1 connected primary 1920x1080+0+0 ...\n   1920x1080  60.00*+\nHDMI-1 disconnected ...\n"

SIMPLE_ACTIVE = "Monitors: 1\n 0: +*eDP-1 1920/344x1080/193+0+0  eDP-1\n"


@pytest.fixture
def docked_report():
    return LAPTOP_DOCKED


@pytest.fixture
def docked_active():
    return LAPTOP_DOCKED_ACTIVE


@pytest.fixture
def simple_report():
    return SIMPLE


@pytest.fixture
def simple_active():
    return SIMPLE_ACTIVE


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "autoxrandr" / "xprofile.json"


@pytest.fixture
def manager(store_path):
    return ProfileManager(store_path)


class FakeXRandR:
    """Stands in for XRandR: serves canned reports and records applied args."""

    def __init__(self, status="", active=""):
        self.status = status
        self.active = active
        self.applied = []

    def query_status(self):
        return self.status.encode()

    def query_active(self):
        return self.active.encode()

    def apply(self, args):
        self.applied.append(list(args))
        return 0


@pytest.fixture
def fake_xrandr(docked_report, docked_active):
    return FakeXRandR(docked_report, docked_active)
