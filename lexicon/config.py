"""Runtime configuration shared by the session, pager and CLI."""

from dataclasses import dataclass

__all__ = ["LexiconConfig"]


@dataclass
class LexiconConfig:
    """
    Tunables for a LexiconSession.

    pager_lines          — lines rendered per pager page; 23 fills the default
                           RGSS console window
    surrounding_lines    — lines shown above and below the target of `line`;
                           0 shows only the requested line
    max_invalid_commands — consecutive unknown commands accepted before the
                           pager gives up and ends the session
    prompt               — text printed while waiting for a pager command
    """
    pager_lines:          int = 23
    surrounding_lines:    int = 5
    max_invalid_commands: int = 10
    prompt:               str = "-- MORE -- >> "

    def __post_init__(self) -> None:
        if self.pager_lines < 1:
            raise ValueError(f"pager_lines must be >= 1, got {self.pager_lines}")
        if self.surrounding_lines < 0:
            raise ValueError(
                f"surrounding_lines must be >= 0, got {self.surrounding_lines}"
            )
        if self.max_invalid_commands < 1:
            raise ValueError(
                f"max_invalid_commands must be >= 1, got {self.max_invalid_commands}"
            )
