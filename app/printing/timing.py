"""Timing knobs shared by the Python controllers and the browser script."""

from dataclasses import dataclass

from app.config import Settings

# Window attribute a sheet page sets once its own load and font waits finish
READY_FLAG = "labelSheetReady"


@dataclass(frozen=True)
class PrintTiming:
    """Delays in seconds.

    Attributes:
        delay: Settle time between readiness and the print call.
        poll_interval: Gap between ready-state checks on a popup window.
        max_polls: Upper bound on ready-state checks before giving up.
    """

    delay: float = 0.3
    poll_interval: float = 0.1
    max_polls: int = 50

    @classmethod
    def from_settings(cls, settings: Settings) -> "PrintTiming":
        return cls(
            delay=settings.print_delay_ms / 1000,
            poll_interval=settings.popup_poll_interval_ms / 1000,
            max_polls=settings.popup_poll_max_attempts,
        )

    def script_config(self) -> dict[str, int | str]:
        """Values handed to ``print.js`` through the page template."""
        return {
            "readyFlag": READY_FLAG,
            "printDelayMs": round(self.delay * 1000),
            "pollIntervalMs": round(self.poll_interval * 1000),
            "maxPolls": self.max_polls,
        }
