"""Print controller states and the pure transition function."""

import enum


class PrintState(str, enum.Enum):
    """Lifecycle of one mounted print view."""

    IDLE = "idle"
    WAITING_FOR_FONTS = "waiting-for-fonts"
    SCHEDULED = "scheduled"
    PRINTED = "printed"
    CANCELLED = "cancelled"


class PrintEvent(str, enum.Enum):
    """Inputs that move the controller forward."""

    DOCUMENT_READY = "document-ready"
    FONTS_SETTLED = "fonts-settled"
    DELAY_ELAPSED = "delay-elapsed"
    MANUAL_PRINT = "manual-print"
    TEARDOWN = "teardown"


TERMINAL_STATES = frozenset({PrintState.PRINTED, PrintState.CANCELLED})

_ACTIVE_STATES = (PrintState.IDLE, PrintState.WAITING_FOR_FONTS, PrintState.SCHEDULED)

_TRANSITIONS: dict[tuple[PrintState, PrintEvent], PrintState] = {
    (PrintState.IDLE, PrintEvent.DOCUMENT_READY): PrintState.WAITING_FOR_FONTS,
    (PrintState.WAITING_FOR_FONTS, PrintEvent.FONTS_SETTLED): PrintState.SCHEDULED,
    (PrintState.SCHEDULED, PrintEvent.DELAY_ELAPSED): PrintState.PRINTED,
}
for _state in _ACTIVE_STATES:
    _TRANSITIONS[(_state, PrintEvent.MANUAL_PRINT)] = PrintState.PRINTED
    _TRANSITIONS[(_state, PrintEvent.TEARDOWN)] = PrintState.CANCELLED


def transition(state: PrintState, event: PrintEvent) -> PrintState:
    """Return the state after ``event``.

    Events that do not apply to ``state`` leave it unchanged, so repeated or
    late events (a second render, a timer firing after teardown) are no-ops.

    Args:
        state: Current state.
        event: Incoming event.

    Returns:
        PrintState: Next state.
    """
    return _TRANSITIONS.get((state, event), state)
