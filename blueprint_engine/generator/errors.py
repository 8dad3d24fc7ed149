"""Exceptions raised by the blueprint generator."""

from __future__ import annotations


class GenerationError(Exception):
    """Raised when composition fails for a request that passed validation.

    This always indicates an inconsistency in the catalog (for example a
    snippet template without a closing marker), never bad user input.
    """

    def __init__(self, component: str, message: str) -> None:
        self.component = component
        super().__init__(f"{component}: {message}")
