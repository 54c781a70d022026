"""Running the xrandr command line tool."""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Sequence

from .errors import ToolInvocationFailure

log = logging.getLogger(__name__)


class XRandR:
    """Thin wrapper around the ``xrandr`` executable.

    Every call is one-shot: a non-zero exit is raised as
    ToolInvocationFailure and never retried.
    """

    def __init__(self, binary: str = "xrandr", display: str | None = None) -> None:
        self._binary = binary
        self._environ = dict(os.environ)
        if display:
            self._environ["DISPLAY"] = display

    def _run(self, *args: str) -> bytes:
        """Run xrandr with *args* and return its raw stdout."""
        cmd = [self._binary, *args]
        log.info("%s", " ".join(cmd))
        try:
            proc = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                env=self._environ,
                check=False,
            )
        except OSError as e:
            raise ToolInvocationFailure(cmd, stderr=str(e)) from e

        stderr = proc.stderr.decode(errors="replace")
        if proc.returncode != 0:
            log.error("%s exit %d stderr: %s", self._binary, proc.returncode, stderr.strip())
            raise ToolInvocationFailure(cmd, proc.returncode, stderr)
        if stderr.strip():
            log.warning("%s stderr (no error): %s", self._binary, stderr.strip())
        return proc.stdout

    def query_status(self) -> bytes:
        """Return the plain ``xrandr`` report listing every output and its modes."""
        return self._run()

    def query_active(self) -> bytes:
        """Return the ``xrandr --listactivemonitors`` report."""
        return self._run("--listactivemonitors")

    def apply(self, args: Sequence[str]) -> int:
        """Run ``xrandr`` with a generated argument list. Returns the exit status."""
        self._run(*args)
        return 0
