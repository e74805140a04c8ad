#!/usr/bin/env python3
"""metalauncher command-line entry point.

Exposes the command surface to the launcher UI (or a shell) as
sub-commands that print one JSON document on stdout.

Usage:
    metalauncher list
    metalauncher add /Applications/Companion.app [--name "Companion"]
    metalauncher remove /Applications/Companion.app
    metalauncher scan
    metalauncher launch /Applications/Companion.app
    metalauncher launch-app companion
    metalauncher running /Applications/Companion.app /Applications/Dugout.app
    metalauncher running-apps
    metalauncher signals
    metalauncher preferences
    metalauncher set-preferences --user-name Sam --ai-mode cloud --theme light

Output:
    {"status": "success", "result": ...}
    {"status": "error", "error": "...", "exception_type": "..."}   (exit 1)

Logs go to stderr so stdout stays machine-readable.
"""

import argparse
import json
import logging
import sys
from typing import Any, Optional

from . import __version__, commands
from .storage.preferences import AI_MODES, THEMES
from .utils.errors import LauncherError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metalauncher",
        description="Application registry, launcher and liveness backend.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Show registered apps")

    add = sub.add_parser("add", help="Register an .app bundle")
    add.add_argument("path")
    add.add_argument("--name", default=None, help="Display name (default: bundle name)")

    remove = sub.add_parser("remove", help="Unregister an app by path")
    remove.add_argument("path")

    sub.add_parser("scan", help="List .app bundles in /Applications and ~/Applications")

    launch = sub.add_parser("launch", help="Open a bundle by path")
    launch.add_argument("path")

    launch_app = sub.add_parser("launch-app", help="Open a known app by short name")
    launch_app.add_argument("name")

    running = sub.add_parser("running", help="Report run state for bundle paths")
    running.add_argument("paths", nargs="*")

    sub.add_parser("running-apps", help="Report run state for the known apps")
    sub.add_parser("signals", help="Latest signal for each known app")
    sub.add_parser("preferences", help="Show global preferences")

    prefs = sub.add_parser("set-preferences", help="Save global preferences")
    prefs.add_argument("--user-name", required=True)
    prefs.add_argument("--ai-mode", choices=AI_MODES, default="local")
    prefs.add_argument("--theme", choices=THEMES, default="dark")

    return parser


def run_command(args: argparse.Namespace) -> Any:
    """Dispatch parsed arguments to the command surface.

    Raises:
        LauncherError: From mutating and launching commands
    """
    command = args.command

    if command == "list":
        return commands.get_registered_apps()
    if command == "add":
        return commands.add_registered_app(args.path, args.name)
    if command == "remove":
        return commands.remove_registered_app(args.path)
    if command == "scan":
        return commands.scan_installed_apps()
    if command == "launch":
        return commands.launch_registered_app(args.path)
    if command == "launch-app":
        return commands.launch_app(args.name)
    if command == "running":
        return commands.get_running_registered_apps(args.paths)
    if command == "running-apps":
        return commands.get_running_apps()
    if command == "signals":
        return commands.read_signals()
    if command == "preferences":
        return commands.get_preferences()
    if command == "set-preferences":
        return commands.save_preferences(args.user_name, args.ai_mode, args.theme)

    raise ValueError(f"Unknown command: {command}")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for metalauncher.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        result = run_command(args)
    except LauncherError as e:
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "exception_type": type(e).__name__,
        }))
        return 1
    except Exception as e:
        logger.exception("Command %s failed", args.command)
        print(json.dumps({
            "status": "error",
            "error": f"Command failed: {e}",
            "exception_type": type(e).__name__,
        }))
        return 1

    print(json.dumps({"status": "success", "result": result}, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
