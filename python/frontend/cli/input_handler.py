"""Single-keypress reader that turns keys into game events.

Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from backend.engine.gamestate import StateKind
from backend.models.board import Direction


# -- events --------------------------------------------------------------------


@dataclass(frozen=True)
class Move:
    direction: Direction
    token: str


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class DebugToggle:
    pass


@dataclass(frozen=True)
class ForceState:
    kind: StateKind


@dataclass(frozen=True)
class Quit:
    pass


Event = Move | Reset | DebugToggle | ForceState | Quit


# -- low-level character readers -----------------------------------------------


def _getch_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        if timeout is not None:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                return None
        ch = os.read(fd, 1).decode("utf-8", errors="ignore")
        # Arrow keys arrive as ESC [ A/B/C/D; a bare ESC has no follow-up.
        if ch == "\x1b":
            ready, _, _ = select.select([fd], [], [], 0.05)
            if ready:
                ch += os.read(fd, 2).decode("utf-8", errors="ignore")
        return ch
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _getch_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]
    import time

    end = None if timeout is None else time.monotonic() + timeout
    while not msvcrt.kbhit():
        if end is not None and time.monotonic() >= end:
            return None
        time.sleep(0.02)
    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        return "\x1b[" + {"H": "A", "P": "B", "M": "C", "K": "D"}.get(msvcrt.getwch(), "")
    return ch


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_MOVE_KEYS: dict[str, Direction] = {
    "\x1b[A": Direction.UP,
    "\x1b[B": Direction.DOWN,
    "\x1b[C": Direction.RIGHT,
    "\x1b[D": Direction.LEFT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

_ARROW_GLYPHS: dict[Direction, str] = {
    Direction.UP: "\u2191",
    Direction.DOWN: "\u2193",
    Direction.LEFT: "\u2190",
    Direction.RIGHT: "\u2192",
}

_COMMAND_KEYS: dict[str, Event] = {
    " ": Reset(),
    "D": DebugToggle(),
    "1": ForceState(StateKind.NOT_SOLVING),
    "2": ForceState(StateKind.SOLVING),
    "3": ForceState(StateKind.SOLVED),
    "q": Quit(),
    "Q": Quit(),
    "\x1b": Quit(),
    "\x03": Quit(),  # Ctrl-C
}


def resolve(key: str) -> Event | None:
    """Map a raw key sequence to its event, or ``None`` if unbound."""
    if key in _COMMAND_KEYS:
        return _COMMAND_KEYS[key]
    direction = _MOVE_KEYS.get(key) or _MOVE_KEYS.get(key.lower())
    if direction is not None:
        token = key if key.isprintable() else _ARROW_GLYPHS[direction]
        return Move(direction=direction, token=token)
    return None


# -- public API ----------------------------------------------------------------


def read_event(timeout: float | None = None) -> Event | None:
    """Block for a keypress and return its event.

    Returns ``None`` for unbound keys or when *timeout* seconds pass
    without input.
    """
    key = _getch(timeout)
    if key is None:
        return None
    return resolve(key)
