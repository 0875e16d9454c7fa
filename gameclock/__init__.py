"""gameclock: countdown clocks with byoyomi overtime for turn-based board games."""

__version__ = "1.0.0"
