"""Validated finite state machine used for the locomotive power state.

The machine holds a current state and a transition graph. Each node of the
graph lists the ``Action`` objects reachable from it; an action names a
target state and may carry an effect that runs right after the state has
changed. Requests for edges that are not in the graph raise ``ValueError``.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

State = TypeVar("State", bound=Enum)
"""Type variable for state enumerations."""

ActionFn = Callable[..., Any]
"""Effect run when a transition is taken."""

StateGraph = Mapping[Enum, Iterable["Action"]]
"""Mapping from a source state to the actions allowed out of it."""


@dataclass(frozen=True)
class Action:
    """A permitted transition to ``state`` with an optional side effect.

    Attributes:
        state: Target state of the transition.
        effect: Callable invoked after the state has been updated.
    """

    state: Enum
    effect: ActionFn | None = None

    def __call__(self, *args, **kwargs) -> Any:
        """Run the effect, if any, and return its result."""
        if self.effect:
            return self.effect(*args, **kwargs)
        return None


class StateMachine:
    """Finite state machine enforcing a fixed transition graph.

    Self-loops are legal only when the graph lists them explicitly.

    Attributes:
        _state: Current state.
        _allowed: Transition graph.
    """

    _allowed: StateGraph
    _state: Enum

    def __init__(self, initial_state: Enum, nodes_graph: StateGraph):
        """Create the machine in ``initial_state``.

        Args:
            initial_state: Starting state.
            nodes_graph: Mapping of each state to the actions allowed from it.
        """
        self._state = initial_state
        self._allowed = nodes_graph

    @property
    def current(self) -> Enum:
        """The current state."""
        return self._state

    def request_transition(self, next_state: Enum, *args, **kwargs) -> Any:
        """Move to ``next_state`` and run the matching action's effect.

        Args:
            next_state: Target state.
            *args: Forwarded to the effect.
            **kwargs: Forwarded to the effect.

        Returns:
            The effect's return value, or None when the action has no effect.

        Raises:
            ValueError: If the graph has no edge from the current state to
                ``next_state``.
        """
        next_action = self._validate_transition(self._state, next_state)
        self._state = next_action.state
        return next_action(*args, **kwargs)

    def _validate_transition(self, frm: Enum, to: Enum) -> Action:
        for action in self._allowed.get(frm, ()):
            if action.state == to:
                return action

        msg = f"Illegal transition {frm.name} -> {to.name}"
        raise ValueError(msg)
