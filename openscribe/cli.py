"""Command-line interface for OpenScribe.

Commands:
  version   Show version information
  config    Configuration helpers (system sounds and audio feedback test)
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Optional, Sequence

from .devices import Device
from .feedback import FeedbackUnsupportedError, list_system_sounds, new_feedback

__all__ = [
    "VERSION",
    "GIT_COMMIT",
    "BUILD_DATE",
    "version_text",
    "render_progress_bar",
    "format_microphone_list",
    "format_sound_list",
    "build_parser",
    "main",
]

VERSION = "dev"
GIT_COMMIT = "unknown"
BUILD_DATE = "unknown"

_PROGRESS_BAR_WIDTH = 40

_ROOT_DESCRIPTION = (
    "OpenScribe is a CLI application for macOS that enables real-time speech transcription.\n"
    "It records audio via a double-press of a configurable button, transcribes the speech "
    "using Whisper,\nand automatically pastes the transcribed text at the current cursor "
    "position."
)


def version_text() -> str:
    """The text printed by the `version` command."""
    return (
        f"OpenScribe v{VERSION}\n"
        f"Commit:     {GIT_COMMIT}\n"
        f"Build Date: {BUILD_DATE}\n"
        "Platform:   darwin/amd64\n"
    )


def render_progress_bar(percent: float, width: int = _PROGRESS_BAR_WIDTH) -> str:
    """Draw a download progress bar such as `=====>    ` for `percent` out of 100."""
    filled = int(percent / 100.0 * width)

    def cell(position: int) -> str:
        if position < filled:
            return "="
        if position == filled:
            return ">"
        return " "

    return "".join(cell(position) for position in range(width))


def format_microphone_list(devices: Sequence[Device]) -> str:
    """Describe the available microphones with hints for choosing one."""
    if not devices:
        return "No microphones found.\n"
    lines = ["Available microphones:"]
    lines += [
        f"  {position}. {device.name}{' (default)' if device.is_default else ''}"
        for position, device in enumerate(devices, start=1)
    ]
    lines += [
        "",
        "To set preferences:",
        '  openscribe config --add-preference "<microphone name>"',
        "  openscribe config --show-preferences",
        "",
        "To set a single microphone (legacy):",
        '  openscribe config --set-microphone "<microphone name>"',
        "",
    ]
    return "\n".join(lines)


def format_sound_list(sounds: Sequence[str]) -> str:
    """Describe the system sounds and which ones are used for feedback."""
    lines = ["Available macOS system sounds:"]
    lines += [f"  {position}. {sound}" for position, sound in enumerate(sounds, start=1)]
    lines += [
        "",
        "OpenScribe uses the following sounds by default:",
        "  - Start recording: Tink (short ascending beep)",
        "  - Stop recording: Pop (short neutral beep)",
        "  - Transcription complete: Glass (pleasant ding)",
        "",
        "To test the sounds, run:",
        "  openscribe config --test-sounds",
        "",
    ]
    return "\n".join(lines)


def _play(label: str, action: Callable[[], None]) -> None:
    try:
        action()
    except Exception as exc:
        print(f"Error playing {label} sound: {exc}", file=sys.stderr)


def _pause() -> None:
    print("Waiting 1 second...")
    sys.stdout.flush()
    time.sleep(1)


def _run_test_sounds() -> int:
    print("Testing audio feedback sounds...")
    try:
        feedback = new_feedback()
    except FeedbackUnsupportedError as exc:
        print(f"Error initializing audio feedback: {exc}", file=sys.stderr)
        return 1

    with feedback:
        print("Playing start sound (Tink)...")
        _play("start", feedback.play_start_sound)
        _pause()
        print("Playing stop sound (Pop)...")
        _play("stop", feedback.play_stop_sound)
        _pause()
        print("Playing complete sound (Glass)...")
        _play("complete", feedback.play_complete_sound)

    print("\nAudio feedback test complete!")
    return 0


def _run_config(args: argparse.Namespace) -> int:
    if args.list_sounds:
        print(format_sound_list(list_system_sounds()), end="")
        return 0
    if args.test_sounds:
        return _run_test_sounds()
    print(args.help_text, end="")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with every subcommand."""
    parser = argparse.ArgumentParser(
        prog="openscribe",
        description=_ROOT_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    commands = parser.add_subparsers(dest="command", metavar="<command>")

    commands.add_parser(
        "version",
        help="Show version information",
        description="Display the version, git commit, and build date of OpenScribe.",
    )

    config = commands.add_parser(
        "config",
        help="Configuration management",
        description="View and modify OpenScribe configuration settings.",
    )
    config.add_argument(
        "--list-sounds", action="store_true", help="List available system sounds"
    )
    config.add_argument(
        "--test-sounds", action="store_true", help="Test audio feedback sounds"
    )
    config.set_defaults(handler=_run_config, help_text=config.format_help())

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "version":
        sys.stdout.write(version_text())
        return 0
    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    return handler(args)


if __name__ == "__main__":
    raise SystemExit(main())