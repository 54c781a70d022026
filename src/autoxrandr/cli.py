"""Command line front end: save, apply, remove and list layouts."""

from __future__ import annotations

import argparse
import logging
import shlex
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .errors import AutoxrandrError
from .models import Profile
from .parser import parse_active, parse_status
from .profile_manager import ProfileManager
from .xrandr import XRandR

log = logging.getLogger(__name__)

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autoxrandr", description="Save and restore xrandr layouts",
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="Profile store file (default: ~/.config/autoxrandr/xprofile.json)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    save = sub.add_parser("save", help="Save a layout")
    save.add_argument("name", help="Name of the layout")

    apply = sub.add_parser("apply", help="Apply a layout")
    apply.add_argument("name", help="Name of the layout")
    apply.add_argument(
        "--dry-run", action="store_true",
        help="Print the xrandr command instead of running it",
    )

    remove = sub.add_parser("remove", help="Remove a layout")
    remove.add_argument("name", help="Name of the layout")

    sub.add_parser("list", help="List all saved layouts")
    return parser


def cmd_save(manager: ProfileManager, xrandr: XRandR, name: str) -> int:
    devices = parse_status(xrandr.query_status())
    active = parse_active(xrandr.query_active())
    profile = Profile.from_displays(devices, active)
    manager.save(name, profile)
    console.print(f"Saved layout [green]{escape(name)}[/green]")
    return 0


def cmd_apply(manager: ProfileManager, xrandr: XRandR, name: str, *, dry_run: bool = False) -> int:
    profile = manager.load(name)
    console.print(f"Applying layout [green]{escape(name)}[/green]")
    for connector, device in sorted(profile.connected.items()):
        console.print(
            f"Applying device [green]{escape(connector)}[/green] with {device.describe()}"
        )
    for connector in sorted(profile.disabled):
        console.print(f"Disabling device {escape(connector)}")

    args = profile.to_xrandr_args()
    if dry_run:
        console.print(escape(shlex.join(["xrandr", *args])))
        return 0
    return xrandr.apply(args)


def cmd_remove(manager: ProfileManager, name: str) -> int:
    manager.delete(name)
    console.print(f"Removed layout [yellow]{escape(name)}[/yellow]")
    return 0


def cmd_list(manager: ProfileManager) -> int:
    for name in manager.list_profiles():
        console.print(escape(name))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [autoxrandr] %(levelname)s %(message)s",
    )

    manager = ProfileManager(args.config)
    xrandr = XRandR()

    try:
        if args.command == "save":
            return cmd_save(manager, xrandr, args.name)
        if args.command == "apply":
            return cmd_apply(manager, xrandr, args.name, dry_run=args.dry_run)
        if args.command == "remove":
            return cmd_remove(manager, args.name)
        return cmd_list(manager)
    except AutoxrandrError as e:
        log.debug("%s failed", args.command, exc_info=True)
        err_console.print(f"[red]error:[/red] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
