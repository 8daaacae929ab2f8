"""Interactive command loop and command-line entry point.

Usage:
    $ wap7sim                      # interactive session
    $ wap7sim --verbose --summary  # debug logging, trip summary on exit
    $ wap7sim --plot trip.png < commands.txt
"""

import argparse
import logging
from collections.abc import Callable, Sequence

from rich.console import Console
from rich.text import Text

from wap7sim.analysis import TripLog, plot_trip
from wap7sim.config import PROMPT
from wap7sim.locomotive import Locomotive

from .dispatcher import CommandDispatcher
from .log import configure_logging
from .render import banner, render_result, summary_panel

logger = logging.getLogger(__name__)

CONSOLE = Console()


def run_session(
    dispatcher: CommandDispatcher,
    read_line: Callable[[str], str] | None = None,
    console: Console = CONSOLE,
    trip_log: TripLog | None = None,
) -> None:
    """Read and execute commands until ``exit``, end of input or Ctrl-C.

    Blank lines are skipped. Every other line is dispatched, rendered and,
    when ``trip_log`` is given, journalled with the status that follows it.
    The status is taken with ``status()``, so running time is current.
    An unexpected exception is logged and reported, and the loop goes on.

    Args:
        dispatcher: Dispatcher owning the locomotive.
        read_line: Prompt-and-read function. Defaults to ``console.input``.
        console: Output console.
        trip_log: Optional journal to append to.
    """
    read = read_line or console.input
    while True:
        try:
            line = read(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print("\nExiting...")
            return

        if not line.strip():
            continue

        try:
            result = dispatcher.dispatch(line)
        except Exception as e:
            logger.exception("Unexpected error")
            console.print(Text(f"❌ Unexpected error: {e}", style="bold red"))
            continue

        render_result(console, result)
        if trip_log is not None:
            trip_log.record(line, dispatcher.locomotive.status())
        if result.terminate:
            return


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wap7sim", description="WAP-7 locomotive simulator")
    parser.add_argument("--verbose", action="store_true", help="start with debug logging enabled")
    parser.add_argument("--no-banner", action="store_true", help="do not print the welcome banner")
    parser.add_argument("--summary", action="store_true", help="print a trip summary on exit")
    parser.add_argument("--plot", metavar="PATH", help="save a speed/distance chart of the trip on exit")
    return parser


def main(argv: Sequence[str] | None = None, console: Console = CONSOLE) -> int:
    """Run one simulation session. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    dispatcher = CommandDispatcher(Locomotive())
    trip_log = TripLog()

    if not args.no_banner:
        console.print(banner())
        console.print("Type 'help' for available commands.")

    run_session(dispatcher, console=console, trip_log=trip_log)

    if args.summary:
        console.print(summary_panel(trip_log.summary()))
    if args.plot:
        if len(trip_log):
            plot_trip(trip_log, args.plot)
            console.print(Text(f"Trip chart saved to {args.plot}"))
        else:
            logger.warning("No commands recorded; trip chart not written")
    return 0
