"""
Simulation module - real-time driving of timed games.

Provides the timer loop that turns wall-clock time into game ticks and
serializes ticks with player commands.
"""

from classic_games.simulation.runner import TickRunner

__all__ = [
    "TickRunner",
]
