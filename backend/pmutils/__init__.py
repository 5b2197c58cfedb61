"""
pmutils: helper routines for a game-server mod.

Exports: bind, compose (SQL parameter binder), PlayerMoveNotifier.
"""

from pmutils.core.player_move import PlayerMoveNotifier
from pmutils.engines.sql import bind, compose

__all__ = [
    "bind",
    "compose",
    "PlayerMoveNotifier",
]
