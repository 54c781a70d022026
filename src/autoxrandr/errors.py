"""Exception hierarchy for autoxrandr.

Library code raises these; only the command line front end catches them and
turns them into a user-visible message. Nothing is retried.
"""

from __future__ import annotations


class AutoxrandrError(Exception):
    """Base class for every error autoxrandr reports to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MalformedReport(AutoxrandrError):
    """An xrandr report did not match the expected grammar."""

    def __init__(self, message: str, line_no: int | None = None, line: str | None = None) -> None:
        if line_no is not None:
            message = f"line {line_no}: {message}"
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)
        self.line_no = line_no
        self.line = line


class MissingCurrentRefreshRate(AutoxrandrError):
    """An active connector advertises no mode flagged as current."""

    def __init__(self, connector: str) -> None:
        super().__init__(f"active output {connector} has no current refresh rate")
        self.connector = connector


class ProfileNotFound(AutoxrandrError):
    def __init__(self, name: str) -> None:
        super().__init__(f"no profile with name {name}")
        self.name = name


class ToolInvocationFailure(AutoxrandrError):
    """xrandr could not be spawned or exited with a non-zero status."""

    def __init__(self, command: list[str], returncode: int | None = None, stderr: str = "") -> None:
        cmd = " ".join(command)
        if returncode is None:
            message = f"could not run {cmd}"
        else:
            message = f"{cmd} exited with status {returncode}"
        if stderr.strip():
            message += f": {stderr.strip()}"
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
