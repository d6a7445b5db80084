"""Automatic print trigger for a mounted print view."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Protocol

from app.printing.states import PrintEvent, PrintState, TERMINAL_STATES, transition
from app.printing.timing import PrintTiming

logger = logging.getLogger(__name__)

READY_STATE_COMPLETE = "complete"


class PrintDocument(Protocol):
    """The view being printed, as seen by the controller."""

    @property
    def ready_state(self) -> str: ...

    def add_load_listener(self, callback: Callable[[], None]) -> None: ...

    def remove_load_listener(self, callback: Callable[[], None]) -> None: ...

    def fonts_ready(self) -> Awaitable[object] | None: ...

    def print(self) -> None: ...


class PrintController:
    """Prints a document once, after it has loaded and its fonts settled.

    ``mount`` starts the sequence and may be called any number of times;
    only the first call counts. ``teardown`` cancels whatever is pending and
    removes every listener registered by the controller. ``print_now`` is
    the manual fallback and always prints.

    Args:
        document: View to print.
        timing: Delay between readiness and printing.
    """

    def __init__(self, document: PrintDocument, timing: PrintTiming | None = None):
        self.document = document
        self.timing = timing or PrintTiming()
        self.state = PrintState.IDLE
        self._mounted = False
        self._task: asyncio.Task | None = None
        self._cleanups: list[Callable[[], None]] = []

    @property
    def pending(self) -> bool:
        """True while a scheduled print has not fired or been cancelled."""
        return self._task is not None and not self._task.done()

    @property
    def listener_count(self) -> int:
        return len(self._cleanups)

    def mount(self) -> asyncio.Task | None:
        """Start the print sequence on the running loop.

        Returns:
            asyncio.Task | None: The sequence task, or None if the controller
            was torn down before it was mounted.
        """
        if self._mounted or self.state in TERMINAL_STATES:
            return self._task
        self._mounted = True
        self._task = asyncio.get_running_loop().create_task(self._run())
        return self._task

    def teardown(self) -> None:
        """Cancel pending work. No print fires after this returns."""
        self._dispatch(PrintEvent.TEARDOWN)
        if self.pending:
            self._task.cancel()
        self._release()

    def print_now(self) -> None:
        """Print immediately on user request and drop the automatic print."""
        self._dispatch(PrintEvent.MANUAL_PRINT)
        if self.pending:
            self._task.cancel()
        self._release()
        self.document.print()

    async def _run(self) -> None:
        try:
            await self._wait_for_load()
            if not self._dispatch(PrintEvent.DOCUMENT_READY):
                return
            await self._wait_for_fonts()
            if not self._dispatch(PrintEvent.FONTS_SETTLED):
                return
            await asyncio.sleep(self.timing.delay)
            if self._dispatch(PrintEvent.DELAY_ELAPSED):
                self.document.print()
        finally:
            self._release()

    async def _wait_for_load(self) -> None:
        if self.document.ready_state == READY_STATE_COMPLETE:
            return
        loaded = asyncio.get_running_loop().create_future()

        def on_load() -> None:
            if not loaded.done():
                loaded.set_result(None)

        self.document.add_load_listener(on_load)
        self._cleanups.append(lambda: self.document.remove_load_listener(on_load))
        await loaded
        self._release()

    async def _wait_for_fonts(self) -> None:
        try:
            waiter = self.document.fonts_ready()
            if waiter is not None:
                await waiter
        except Exception as e:
            logger.debug("Font readiness failed, printing anyway: %s", e)

    def _dispatch(self, event: PrintEvent) -> bool:
        previous = self.state
        self.state = transition(previous, event)
        if self.state is previous:
            return False
        logger.debug("Print controller %s -> %s on %s", previous.value, self.state.value, event.value)
        return True

    def _release(self) -> None:
        while self._cleanups:
            self._cleanups.pop()()
