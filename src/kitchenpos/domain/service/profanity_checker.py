"""Capability interface for the profanity check on product names."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ProfanityChecker(ABC):

    @abstractmethod
    def contains_profanity(self, text: str) -> bool:
        """Return True if *text* contains disallowed words.

        Implementations raise ProfanityCheckError when they cannot decide;
        callers treat that as a hard failure.
        """
