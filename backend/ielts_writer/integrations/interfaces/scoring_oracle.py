"""Narrow capability interface for the external essay-scoring model."""
from __future__ import annotations
from abc import ABC, abstractmethod


class OracleError(Exception):
    """The oracle could not be reached or did not return a usable reply."""


class ScoringOracle(ABC):

    @abstractmethod
    def complete(self, instructions: str, essay_text: str) -> str:
        """
        Send the instructions (system turn) and the essay (user turn), asking
        for a JSON object. Returns the raw reply text; raises OracleError.
        """
        ...

    @property
    def is_configured(self) -> bool:
        return True

    def close(self) -> None:
        """Release network resources. Safe to call more than once."""
