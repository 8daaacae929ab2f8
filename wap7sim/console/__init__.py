"""Text console for driving the locomotive.

Exports:
    CommandDispatcher: Maps one input line onto one locomotive operation
    CommandResult: Outcome value rendered by the console
    ResultKind: SUCCESS, FAILURE or INVALID
    run_session: Interactive read-dispatch-render loop
    main: Command-line entry point
"""

from .cli import main, run_session
from .dispatcher import CommandDispatcher, CommandResult, ResultKind

__all__ = ["CommandDispatcher", "CommandResult", "ResultKind", "run_session", "main"]
