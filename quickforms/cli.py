"""
Command-line entry point: show one dialog and report the result.

    python -m quickforms confirm --title Delete --message "Delete file?"

Prompt prints the captured text. Confirm exits 0 when accepted and 1 when
declined. Configuration and toolkit errors exit 2.
"""

import argparse
import sys
from typing import List, Optional

from .api import ask_confirmation, prompt_for_input, show_notification
from .errors import QuickFormsError
from .logging import logger, set_debug_enabled
from .models import DialogOutcome, StartPosition, WindowOptions, WindowState
from .presets import PresetParser, show_preset

EXIT_OK = 0
EXIT_DECLINED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quickforms",
        description="Show a message, input or confirmation dialog",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    window = argparse.ArgumentParser(add_help=False)
    window.add_argument("--title", default="", help="Window title")
    window.add_argument("--message", default="", help="Message text")
    window.add_argument(
        "--window-state",
        choices=[state.value for state in WindowState],
        default=WindowState.NORMAL.value,
    )
    window.add_argument(
        "--start-position",
        choices=[position.value for position in StartPosition],
        default=StartPosition.CENTER_SCREEN.value,
    )
    window.add_argument("--hide-in-taskbar", action="store_true")

    commands = parser.add_subparsers(dest="command", required=True)

    notify = commands.add_parser("notify", parents=[window], help="Show a message")
    notify.add_argument("--button", default="OK", help="Dismiss button text")

    prompt = commands.add_parser("prompt", parents=[window], help="Ask for a line of text")
    prompt.add_argument("--button", default="OK", help="Confirm button text")

    confirm = commands.add_parser("confirm", parents=[window], help="Ask to accept or decline")
    confirm.add_argument("--confirm", default="Yes", help="Confirm button text")
    confirm.add_argument("--deny", default="No", help="Deny button text")

    preset = commands.add_parser("preset", help="Show a dialog from a YAML preset file")
    preset.add_argument("file", help="YAML preset file")
    preset.add_argument("name", help="Preset name")

    return parser


def _window_options(args: argparse.Namespace) -> WindowOptions:
    return WindowOptions.create(
        window_state=args.window_state,
        start_position=args.start_position,
        hide_in_taskbar=args.hide_in_taskbar,
    )


def _report(result) -> int:
    """Print a dialog result and map it to an exit code."""
    if isinstance(result, DialogOutcome):
        print(result.value)
        return EXIT_OK if result is DialogOutcome.ACCEPTED else EXIT_DECLINED
    if isinstance(result, str):
        print(result)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_debug_enabled(True)

    try:
        if args.command == "preset":
            catalog = PresetParser.load(args.file)
            return _report(show_preset(catalog, args.name))

        options = _window_options(args)
        if args.command == "notify":
            show_notification(args.title, args.message, args.button, options)
            return EXIT_OK
        elif args.command == "prompt":
            return _report(prompt_for_input(args.title, args.message, args.button, options))
        return _report(
            ask_confirmation(args.title, args.message, args.confirm, args.deny, options)
        )
    except QuickFormsError as e:
        logger.error(str(e))
        print(f"quickforms: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
