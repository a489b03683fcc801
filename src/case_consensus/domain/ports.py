"""
Abstract ports for collaborators that live outside the aggregation core.
"""

from abc import ABC, abstractmethod


class SimilarityOracle(ABC):
    """Abstract base class for text-similarity relevance sources."""

    @abstractmethod
    def similarity(self, query: str, text: str) -> float:
        """
        Score how relevant ``text`` is to ``query``.

        Args:
            query: The user's query string
            text: Text blob describing one record

        Returns:
            A similarity score, roughly in [-1, 1]
        """
        pass
