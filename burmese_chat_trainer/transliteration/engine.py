"""
Rule-based Burmese to Devanagari transliteration.

The engine performs greedy longest-match substitution over a LookupIndex.
Whole phrases listed as special cases bypass the scan entirely.
"""

import logging
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from ..config import Config
from ..models import SpecialCase
from .lookup import LookupIndex
from .services import TransliterationService


# Unmatched characters that still get a Devanagari equivalent
PUNCTUATION_FALLBACK = {
    ' ': ' ',
    '၊': '।',  # little section -> danda
    '။': '॥',  # section -> double danda
}


class TransliterationEngine(TransliterationService):
    """
    Greedy longest-match transliteration over a LookupIndex.

    The engine holds no mutable state, so one instance can be shared by
    every consumer until the rule tables change and a new one is built.
    """

    def __init__(self, lookup_index: LookupIndex,
                 special_cases: Optional[Iterable[SpecialCase]] = None):
        """
        Initialize the engine.

        Args:
            lookup_index: pattern index built from the rule tiers
            special_cases: whole-phrase overrides (later entries win)
        """
        self.logger = logging.getLogger(__name__)
        self.lookup_index = lookup_index
        self.special_cases: Mapping[str, str] = MappingProxyType({
            case.phrase: case.replacement
            for case in (special_cases or ())
            if case.phrase and case.replacement
        })

    def special_case_for(self, text: str) -> Optional[str]:
        """Return the override for the trimmed text, if one exists."""
        if not text:
            return None
        return self.special_cases.get(text.strip())

    def is_special_case(self, text: str) -> bool:
        """Check whether the trimmed text is a whole-phrase override."""
        return self.special_case_for(text) is not None

    def transliterate(self, burmese_text: str) -> str:
        """
        Convert Burmese text to its Devanagari reading.

        Args:
            burmese_text: Burmese script, possibly with spaces and punctuation

        Returns:
            Devanagari rendering; empty for empty, placeholder or separator input
        """
        if not burmese_text or burmese_text in (Config.EMPTY_PLACEHOLDER, Config.TOPIC_SEPARATOR):
            return ""

        trimmed = burmese_text.strip()

        special = self.special_cases.get(trimmed)
        if special is not None:
            return special

        return self._scan(trimmed)

    def _scan(self, text: str) -> str:
        """Greedy left-to-right substitution; unmatched code points pass through."""
        pieces = []
        position = 0
        unmatched = 0

        while position < len(text):
            pattern = self.lookup_index.longest_match(text, position)
            if pattern is not None:
                pieces.append(self.lookup_index.replacements[pattern])
                position += len(pattern)
                continue

            char = text[position]
            pieces.append(PUNCTUATION_FALLBACK.get(char, char))
            if char not in PUNCTUATION_FALLBACK:
                unmatched += 1
            position += 1

        if unmatched:
            self.logger.debug(f"{unmatched} unmatched code point(s) passed through in '{text}'")

        return ''.join(pieces)

    def transliterate_batch(self, texts: List[str]) -> List[str]:
        """
        Transliterate multiple texts.

        Args:
            texts: List of Burmese texts

        Returns:
            List of Devanagari renderings in input order
        """
        if not texts:
            return []

        return [self.transliterate(text) for text in texts]
