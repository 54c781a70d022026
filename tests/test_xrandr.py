import subprocess

import pytest

from autoxrandr import xrandr as xrandr_mod
from autoxrandr.errors import ToolInvocationFailure
from autoxrandr.xrandr import XRandR


class _Recorder:
    def __init__(self, returncode=0, stdout=b"", stderr=b"", raises=None):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.raises = raises
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        if self.raises:
            raise self.raises
        return subprocess.CompletedProcess(cmd, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def run(monkeypatch):
    recorder = _Recorder(stdout=b"Screen 0: ...\n")
    monkeypatch.setattr(xrandr_mod.subprocess, "run", recorder)
    return recorder


def test_query_status(run):
    assert XRandR().query_status() == b"Screen 0: ...\n"
    assert run.calls[0][0] == ["xrandr"]


def test_query_active(run):
    XRandR().query_active()
    assert run.calls[0][0] == ["xrandr", "--listactivemonitors"]


def test_apply_passes_args(run):
    assert XRandR().apply(["--output", "eDP-1", "--off"]) == 0
    assert run.calls[0][0] == ["xrandr", "--output", "eDP-1", "--off"]


def test_display_override(run):
    XRandR(display=":1").query_status()
    assert run.calls[0][1]["env"]["DISPLAY"] == ":1"


def test_non_zero_exit(run):
    run.returncode = 1
    run.stderr = b"xrandr: cannot find mode 1920x1080\n"
    with pytest.raises(ToolInvocationFailure) as exc:
        XRandR().apply(["--output", "HDMI-1", "--mode", "1920x1080"])
    assert exc.value.returncode == 1
    assert "cannot find mode" in str(exc.value)
    assert exc.value.command[0] == "xrandr"


def test_spawn_failure(run):
    run.raises = FileNotFoundError(2, "No such file or directory")
    with pytest.raises(ToolInvocationFailure) as exc:
        XRandR(binary="xrandr-missing").query_status()
    assert exc.value.returncode is None
    assert "xrandr-missing" in str(exc.value)
