"""Print a label sheet through a separate window."""

import asyncio
import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import urlencode

from app.labels.selection import Selection, to_query
from app.printing.timing import PrintTiming

logger = logging.getLogger(__name__)

BLOCKED_MESSAGE = "Allow popups for this site and try again."
EMPTY_SELECTION_MESSAGE = "Select at least one employee."


class PopupBlockedError(Exception):
    """The environment refused to open the print window."""

    def __init__(self, url: str):
        super().__init__(BLOCKED_MESSAGE)
        self.url = url


class PopupOutcome(str, enum.Enum):
    """How a popup print ended."""

    PRINTED = "printed"
    CLOSED = "closed"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"


class PrintWindow(Protocol):
    """A window opened for printing."""

    @property
    def closed(self) -> bool: ...

    def is_ready(self) -> bool:
        """True once the print view has set its ready flag.

        The flag is the window attribute named by
        :data:`app.printing.timing.READY_FLAG`, set by the sheet page after
        its own load and font waits. A window still showing the blank page
        it was created with is never ready, whatever its document state.
        """
        ...

    def add_load_listener(self, callback: Callable[[], None]) -> None: ...

    def remove_load_listener(self, callback: Callable[[], None]) -> None: ...

    def focus(self) -> None: ...

    def print(self) -> None: ...


class WindowHost(Protocol):
    """Something that can open windows, such as a browser tab."""

    def open(self, url: str) -> PrintWindow | None: ...


_READY = "ready"


class PopupPrinter:
    """Opens a print view in a new window and prints it once it is ready.

    Readiness is the print view's ready flag, checked on the window's load
    event and by a poll that starts immediately. The poll is bounded by
    ``timing.max_polls`` and stops as soon as the window is ready or closed.

    Args:
        host: Window opener.
        timing: Poll interval and bound.
    """

    def __init__(self, host: WindowHost, timing: PrintTiming | None = None):
        self.host = host
        self.timing = timing or PrintTiming()
        self.window: PrintWindow | None = None
        self.polls = 0
        self._poll_task: asyncio.Task | None = None
        self._settled: asyncio.Future | None = None

    @property
    def polling(self) -> bool:
        """True while the ready-state poll is still scheduled."""
        return self._poll_task is not None and not self._poll_task.done()

    async def launch(self, url: str) -> PopupOutcome:
        """Open ``url`` and print it when ready.

        Returns:
            PopupOutcome: PRINTED, or why printing did not happen.

        Raises:
            PopupBlockedError: If the window could not be opened. Nothing is
                printed in that case.
        """
        window = self.host.open(url)
        if not window:
            logger.warning("Print window blocked for %s", url)
            raise PopupBlockedError(url)
        self.window = window

        loop = asyncio.get_running_loop()
        settled = self._settled = loop.create_future()

        def on_load() -> None:
            if window.is_ready():
                self._settle(_READY)

        window.add_load_listener(on_load)
        self._poll_task = loop.create_task(self._poll(window))
        try:
            result = await settled
        finally:
            window.remove_load_listener(on_load)
            self._stop_polling()

        if result == _READY:
            if window.closed:
                return PopupOutcome.CLOSED
            window.focus()
            window.print()
            return PopupOutcome.PRINTED
        logger.info("Popup print ended without printing: %s", result.value)
        return result

    def cancel(self) -> None:
        """Abandon a launch in progress without printing."""
        self._settle(PopupOutcome.CANCELLED)
        self._stop_polling()

    async def _poll(self, window: PrintWindow) -> None:
        for _ in range(self.timing.max_polls):
            self.polls += 1
            if window.closed:
                self._settle(PopupOutcome.CLOSED)
                return
            if window.is_ready():
                self._settle(_READY)
                return
            await asyncio.sleep(self.timing.poll_interval)
        self._settle(PopupOutcome.TIMED_OUT)

    def _settle(self, result) -> None:
        if self._settled is not None and not self._settled.done():
            self._settled.set_result(result)

    def _stop_polling(self) -> None:
        if self.polling:
            self._poll_task.cancel()
        self._poll_task = None


@dataclass(frozen=True)
class PrintAttempt:
    """Result of a print request, as shown to the user.

    The selection is carried through unchanged so a retry does not need the
    employees to be picked again.
    """

    selection: Selection
    outcome: PopupOutcome | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.outcome is PopupOutcome.PRINTED


def sheet_url(selection: Selection) -> str:
    """Print view URL for a selection; the opener does the printing."""
    return f"/print?{urlencode({'ids': to_query(selection), 'autoprint': '0'})}"


async def print_selection(printer: PopupPrinter, selection: Selection) -> PrintAttempt:
    """Print the selected employees through a popup.

    A blocked popup is reported on the returned attempt rather than raised.
    """
    if not selection:
        return PrintAttempt(selection=selection, error=EMPTY_SELECTION_MESSAGE)
    try:
        outcome = await printer.launch(sheet_url(selection))
    except PopupBlockedError as e:
        return PrintAttempt(selection=selection, error=str(e))
    return PrintAttempt(selection=selection, outcome=outcome)
