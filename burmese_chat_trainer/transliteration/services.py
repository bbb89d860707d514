"""
Base service interface for transliteration.
"""

from abc import ABC, abstractmethod
from typing import List


class TransliterationService(ABC):
    """Base interface for Burmese to Devanagari transliteration services."""

    @abstractmethod
    def transliterate(self, burmese_text: str) -> str:
        """
        Convert Burmese text to its Devanagari reading.

        Args:
            burmese_text: Burmese script

        Returns:
            Devanagari rendering, empty for placeholder input
        """
        pass

    @abstractmethod
    def transliterate_batch(self, texts: List[str]) -> List[str]:
        """
        Transliterate multiple texts.

        Args:
            texts: List of Burmese texts

        Returns:
            List of Devanagari renderings in input order
        """
        pass
