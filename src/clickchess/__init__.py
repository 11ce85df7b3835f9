"""clickchess — click-driven chess board core (rules + selection state machine)."""

__version__ = "0.1.0"
