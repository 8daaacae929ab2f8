"""Rich rendering of the banner, help menu and command outcomes."""

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .dispatcher import CommandResult, ResultKind

BANNER_ART = r"""
      _____
     |  _  \__________________________
  ===|_|_|_|   |_|_] |_|_] |_|_] |_|_]|===
  |  |_|_|_|___________________________|  |
  |_______________________________________|
"""

HELP_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "BASIC OPERATIONS",
        (
            ("pantograph up", "Raise pantograph"),
            ("pantograph down", "Lower pantograph"),
            ("start", "Start the engine"),
            ("stop", "Stop the engine"),
        ),
    ),
    (
        "MOVEMENT CONTROLS",
        (
            ("throttle", "Increase throttle by 1"),
            ("throttle <n>", "Set throttle to level n"),
            ("brake", "Apply brakes"),
            ("emergency", "Emergency stop"),
        ),
    ),
    (
        "SIMULATION",
        (
            ("simulate <n>", "Simulate n seconds of travel"),
            ("status", "Display engine status"),
        ),
    ),
    (
        "SYSTEM",
        (
            ("verbose", "Toggle verbose logging"),
            ("help", "Show this help menu"),
            ("exit", "Quit simulation"),
        ),
    ),
)

_STYLES = {
    ResultKind.SUCCESS: "",
    ResultKind.FAILURE: "bold yellow",
    ResultKind.INVALID: "dim",
}


def banner() -> Panel:
    body = Group(
        Text("WAP-7 LOCOMOTIVE SIMULATOR", style="bold", justify="center"),
        Text(BANNER_ART),
        Text("Enhanced Edition v2.0", justify="center"),
    )
    return Panel(body, padding=(1, 2))


def help_panel() -> Panel:
    """Build the command reference as a panel of grouped rows."""
    t = Table.grid(padding=(0, 2))
    for title, rows in HELP_SECTIONS:
        t.add_row(f"[b]{title}:[/b]", "")
        for usage, description in rows:
            t.add_row(f"  {usage}", description)
        t.add_section()
    return Panel(t, title="AVAILABLE COMMANDS", padding=(1, 2))


def summary_panel(summary: dict) -> Panel:
    """Build the end-of-session trip summary produced by ``TripLog.summary``."""
    t = Table.grid(padding=(0, 2))
    t.add_row("[b]Commands[/b]: ", str(summary["commands"]))
    t.add_row("[b]Max Speed[/b]: ", f"{summary['max_speed_kmh']} km/h")
    t.add_row("[b]Mean Speed[/b]: ", f"{summary['mean_speed_kmh']:.2f} km/h")
    t.add_row("[b]Distance[/b]: ", f"{summary['distance_m']} m")
    t.add_row("[b]Running Time[/b]: ", f"{summary['running_time_s']} s")
    if summary["state_counts"]:
        t.add_section()
        for state, count in summary["state_counts"].items():
            t.add_row(f"[b]Steps - {state}[/b]: ", str(count))
    return Panel(t, title="Trip Summary", padding=(1, 2))


def render_result(console: Console, result: CommandResult) -> None:
    """Print one command outcome.

    Failures get a warning marker; the help command prints the help panel.
    Messages are printed as plain text, never parsed as markup.
    """
    if result.ok and result.command == "help":
        console.print(help_panel())
        return

    message = result.message
    if result.kind is ResultKind.FAILURE:
        message = f"⚠️  {message}"
    console.print(Text(message, style=_STYLES[result.kind]))
