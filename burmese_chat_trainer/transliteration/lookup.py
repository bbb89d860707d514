"""
Pattern index used by the transliteration engine.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from ..models import GlyphRule


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupIndex:
    """
    Read-only pattern table built once from the rule tiers.

    Attributes:
        replacements: pattern -> Devanagari replacement
        patterns: every pattern, longest first; equal lengths keep the
            order in which the tiers inserted them
    """
    replacements: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    patterns: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.patterns)

    def __contains__(self, pattern: str) -> bool:
        return pattern in self.replacements

    def longest_match(self, text: str, position: int = 0) -> Optional[str]:
        """Return the longest pattern that starts at text[position], if any."""
        for pattern in self.patterns:
            if text.startswith(pattern, position):
                return pattern
        return None


def build_lookup_index(
    medials: Iterable[GlyphRule] = (),
    vowels: Iterable[GlyphRule] = (),
    consonants: Iterable[GlyphRule] = ()
) -> LookupIndex:
    """
    Merge the three rule tiers into a single LookupIndex.

    Tiers are applied in priority order (medials, vowels, consonants) and a
    pattern already taken by a higher tier is never overwritten. Rules with
    an empty pattern or an empty replacement are skipped.

    Args:
        medials: consonant + medial combinations
        vowels: vowel, final and diacritic sequences
        consonants: base consonants

    Returns:
        LookupIndex with patterns sorted by descending code-point length
    """
    replacements = {}

    for tier_name, tier in (('medials', medials), ('vowels', vowels), ('consonants', consonants)):
        added = 0
        for rule in tier:
            if not rule.pattern or not rule.replacement:
                continue
            if rule.pattern in replacements:
                continue
            replacements[rule.pattern] = rule.replacement
            added += 1
        logger.debug(f"Lookup index: {added} patterns from {tier_name}")

    # sorted() is stable, so equal lengths keep tier/insertion order
    patterns = tuple(sorted(replacements, key=len, reverse=True))

    return LookupIndex(replacements=MappingProxyType(replacements), patterns=patterns)
