"""
Player move notifier.

Polls connected players every ``interval`` seconds of host time and, for each
player whose position changed, calls every subscriber with
``(player, history)``. ``history`` lists the player's last positions, newest
first, at most ``history_length`` long.

The host drives the notifier: call ``step(dtime)`` from its per-tick hook, or
pass its hook registration function to ``attach``. Players are read from an
injected provider; each must expose ``get_player_name()`` and ``get_pos()``.
"""

import logging
import threading
from collections.abc import Callable, Iterable
from typing import Any

from pmutils.core.config import settings
from pmutils.core.positions import different_pos

_log = logging.getLogger(__name__)

MoveCallback = Callable[[Any, list[Any]], Any]


def _check_interval(interval: float) -> float:
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval!r}")
    return interval


def _check_history_length(history_length: int) -> int:
    if history_length < 1:
        raise ValueError(f"history_length must be at least 1, got {history_length!r}")
    return history_length


class PlayerMoveNotifier:
    """Publish position changes of connected players to registered callbacks."""

    def __init__(
        self,
        players: Callable[[], Iterable[Any]],
        *,
        interval: float | None = None,
        history_length: int | None = None,
    ) -> None:
        self._players = players
        self._lock = threading.Lock()
        self._callbacks: list[MoveCallback] = []
        self._history: dict[str, list[Any]] = {}
        self._timer = 0.0
        self.interval: float = _check_interval(
            interval if interval is not None else settings.PLAYER_MOVE_INTERVAL
        )
        self.history_length: int = _check_history_length(
            history_length
            if history_length is not None
            else settings.PLAYER_MOVE_HISTORY_LENGTH
        )

    def register(
        self,
        callback: MoveCallback,
        interval: float | None = None,
        history_length: int | None = None,
    ) -> None:
        """
        Subscribe *callback*.

        A shorter *interval* speeds up polling for everyone; a longer
        *history_length* keeps more positions for everyone. Neither is relaxed
        by later registrations.
        """
        if interval is not None:
            _check_interval(interval)
        if history_length is not None:
            _check_history_length(history_length)
        with self._lock:
            self._callbacks.append(callback)
            if interval is not None and interval < self.interval:
                self.interval = interval
            if history_length is not None and history_length > self.history_length:
                self.history_length = history_length
        _log.debug(
            "Registered player move callback %r (interval=%s, history_length=%s)",
            callback,
            self.interval,
            self.history_length,
        )

    def unregister(self, callback: MoveCallback) -> None:
        with self._lock:
            self._callbacks.remove(callback)

    def attach(self, register_globalstep: Callable[[Callable[[float], Any]], Any]) -> None:
        """Hand ``step`` to the host's per-tick hook registration."""
        register_globalstep(self.step)

    def history(self, name: str) -> list[Any]:
        with self._lock:
            return list(self._history.get(name, []))

    def forget(self, name: str) -> None:
        """Drop the history of *name* (e.g. when the player leaves)."""
        with self._lock:
            self._history.pop(name, None)

    def step(self, dtime: float) -> None:
        """Advance host time by *dtime* seconds; poll players once the interval elapsed."""
        with self._lock:
            self._timer += dtime
            if self._timer < self.interval:
                return
            self._timer = 0.0

        for player in self._players():
            self._poll(player)

    def _poll(self, player: Any) -> None:
        name = player.get_player_name()
        pos = player.get_pos()
        with self._lock:
            history = self._history.get(name)
            if history is None:
                # First sighting: seed, nothing to compare against yet.
                self._history[name] = [pos]
                return
            if history and not different_pos(history[0], pos):
                return
            history.insert(0, pos)
            del history[self.history_length :]
            snapshot = list(history)
            callbacks = list(self._callbacks)

        for callback in callbacks:
            callback(player, snapshot)
