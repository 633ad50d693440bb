"""Game settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameSettings:
    """User-configurable options for a game session."""

    white_name: str = "White"
    black_name: str = "Black"

    # Seed for the random starting layout; None draws from OS entropy.
    seed: int | None = None

    # False restores the older behaviour where clicking an illegal,
    # non-allied target drops the current selection.
    keep_selection_on_illegal_target: bool = True
