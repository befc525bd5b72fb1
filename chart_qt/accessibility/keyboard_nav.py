"""
Keyboard Navigation - per-control key dispatch for chart controls.

A KeyboardNavigationHandler owns the keyboard behaviour of one chart
control (or a small group of them). An external sequencer activates
handlers in order and routes key presses to the active one; the response
code tells the sequencer whether the press was consumed or whether focus
should move to the neighbouring control.

Usage:
    from chart_qt.accessibility.keyboard_nav import (
        KeyboardNavigationHandler,
        KeyCodes,
        ResponseCode,
    )

    handler = KeyboardNavigationHandler(
        [
            ([KeyCodes.SPACE, KeyCodes.ENTER], lambda key, event: on_click()),
        ],
        validate=lambda: chart.reset_zoom_button is not None,
        init=lambda direction: focus_proxy(),
    )

    if handler.validate():
        handler.init(1)
        response = handler.run(key_event)
"""

import logging
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from PyQt6.QtCore import Qt

logger = logging.getLogger(__name__)


class ResponseCode(Enum):
    """Outcome of a key press or activation, read by the sequencer."""
    SUCCESS = "success"  # Consumed, remain on this control
    PREV = "prev"  # Control exhausted, move focus to the previous one
    NEXT = "next"  # Control exhausted, move focus to the next one
    NO_HANDLER = "no_handler"  # Key not handled here


class KeyCodes:
    """Integer Qt key codes used by chart navigation."""
    TAB = Qt.Key.Key_Tab.value
    BACKTAB = Qt.Key.Key_Backtab.value
    UP = Qt.Key.Key_Up.value
    DOWN = Qt.Key.Key_Down.value
    LEFT = Qt.Key.Key_Left.value
    RIGHT = Qt.Key.Key_Right.value
    SPACE = Qt.Key.Key_Space.value
    ENTER = Qt.Key.Key_Enter.value
    RETURN = Qt.Key.Key_Return.value
    ESCAPE = Qt.Key.Key_Escape.value

    ARROWS = (UP, DOWN, LEFT, RIGHT)
    TABS = (TAB, BACKTAB)
    ACTIVATE = (SPACE, ENTER, RETURN)


def key_code(event: Any) -> int:
    """Integer key code of a key event."""
    key = event.key()
    return getattr(key, "value", key)


def has_shift(event: Any) -> bool:
    modifiers = getattr(event, "modifiers", None)
    if modifiers is None:
        return False
    return bool(modifiers() & Qt.KeyboardModifier.ShiftModifier)


def is_backwards_tab(key: int, event: Any) -> bool:
    """
    True for Shift+Tab.

    Qt reports Shift+Tab as Key_Backtab on most platforms, but a bare
    Key_Tab with the shift modifier is accepted too.
    """
    if key == KeyCodes.BACKTAB:
        return True
    return key == KeyCodes.TAB and has_shift(event)


KeyAction = Callable[[int, Any], ResponseCode]


class KeyboardNavigationHandler:
    """
    Key dispatch state machine for one chart control.

    States are inactive and active. init() arms the handler, terminate()
    disarms it, and run() dispatches key events only while armed. The first
    entry of key_code_map whose key set contains the pressed key wins.
    """

    def __init__(
        self,
        key_code_map: Sequence[Tuple[Iterable[int], KeyAction]],
        *,
        validate: Optional[Callable[[], bool]] = None,
        init: Optional[Callable[[int], Optional[ResponseCode]]] = None,
        terminate: Optional[Callable[[], None]] = None,
        name: str = "",
    ):
        """
        Initialize the handler.

        Args:
            key_code_map: Ordered (key codes, action) pairs. Actions receive
                (key_code, event) and return a ResponseCode.
            validate: Returns False when the control can't be used right now
            init: Called with the direction navigation came from (+1 forward,
                -1 backward)
            terminate: Called when navigation leaves the control
            name: Label used in log messages
        """
        self._key_code_map: List[Tuple[frozenset, KeyAction]] = [
            (frozenset(codes), action) for codes, action in key_code_map
        ]
        self._validate = validate
        self._init = init
        self._terminate = terminate
        self.name = name or "handler"
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def has_terminate(self) -> bool:
        return self._terminate is not None

    def validate(self) -> bool:
        """Check whether the control can receive navigation right now."""
        if self._validate is None:
            return True
        return bool(self._validate())

    def init(self, direction: int) -> ResponseCode:
        """
        Activate the handler.

        Re-entering an active handler starts over, overriding any prior
        focus state.
        """
        self._active = True
        logger.debug(f"{self.name}: init (direction={direction})")
        if self._init is None:
            return ResponseCode.SUCCESS
        response = self._init(direction)
        return response if response is not None else ResponseCode.SUCCESS

    def terminate(self) -> None:
        """Deactivate the handler, releasing any focus marker."""
        if self._terminate is not None:
            self._terminate()
        if self._active:
            logger.debug(f"{self.name}: terminate")
        self._active = False

    def run(self, event: Any) -> ResponseCode:
        """
        Dispatch a key event.

        Args:
            event: Key event exposing key() and modifiers()

        Returns:
            The action's response. Unhandled Tab presses move focus on so the
            user never gets stuck; other unhandled keys give NO_HANDLER.
        """
        if not self._active:
            return ResponseCode.NO_HANDLER

        key = key_code(event)
        for codes, action in self._key_code_map:
            if key in codes:
                response = action(key, event)
                logger.debug(f"{self.name}: key {key} -> {response.value}")
                return response

        if key in KeyCodes.TABS:
            return ResponseCode.PREV if is_backwards_tab(key, event) else ResponseCode.NEXT

        return ResponseCode.NO_HANDLER
