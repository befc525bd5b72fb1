"""Signal subscription bookkeeping for accessibility components."""

import logging
from typing import Any, Callable, List, Tuple

logger = logging.getLogger(__name__)


class EventSubscriptions:
    """
    Tracks signal connections so they can be dropped together.

    Example:
        subs = EventSubscriptions()
        subs.add(chart.redrawn, self.update_proxy_overlays)
        ...
        subs.remove_all()
    """

    def __init__(self):
        self._connections: List[Tuple[Any, Callable]] = []

    def add(self, signal: Any, slot: Callable) -> None:
        """Connect slot to signal and remember the pair."""
        if signal is None:
            logger.debug("Skipping subscription to missing signal")
            return
        signal.connect(slot)
        self._connections.append((signal, slot))

    def remove_all(self) -> None:
        for signal, slot in self._connections:
            try:
                signal.disconnect(slot)
            except (TypeError, RuntimeError) as exc:
                # Already disconnected, or the chart object is gone
                logger.debug(f"Disconnect skipped: {exc}")
        self._connections.clear()

    def __len__(self) -> int:
        return len(self._connections)
