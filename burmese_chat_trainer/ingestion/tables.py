"""
Conversion of raw table rows into rule tables and conversation rows.

Each table has its own column fallbacks. Consonant and conversation tables
replace the built-in data when they yield anything; vowel, medial and
special-case tables are merged over the built-in data with loaded rows
winning on the same key.
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..config import Config
from ..conversation.defaults import DEFAULT_CONVERSATION_ROWS
from ..models import ConversationRow, GlyphRule, RowTag, SpecialCase
from ..transliteration.rules import (
    DEFAULT_CONSONANTS,
    DEFAULT_MEDIALS,
    DEFAULT_SPECIAL_CASES,
    DEFAULT_VOWELS
)
from .base import TableRow


logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = '\ufeff'
_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def normalize_row(row: Mapping[Optional[str], object]) -> TableRow:
    """
    Clean one raw row.

    Header keys are stripped and lose a leading byte-order mark; values
    become stripped strings. Cells without a header are dropped.
    """
    normalized: TableRow = {}
    for key, value in row.items():
        if key is None:
            continue
        clean_key = str(key).lstrip(BYTE_ORDER_MARK).strip()
        if value is None:
            clean_value = ''
        elif isinstance(value, list):
            clean_value = ','.join(str(v) for v in value).strip()
        else:
            clean_value = str(value).strip()
        normalized[clean_key] = clean_value
    return normalized


def first_value(row: Mapping[str, str], *columns: str) -> str:
    """Value of the first listed column that is present and non-empty."""
    for column in columns:
        value = row.get(column, '')
        if value:
            return value
    return ''


def parse_sequence_no(value: str) -> Optional[int]:
    """Leading integer of a cell, or None when there is none (or it is zero)."""
    match = _LEADING_INT.match(value or '')
    if not match:
        return None
    number = int(match.group(1))
    return number or None


def consonant_rules(rows: Iterable[TableRow]) -> List[GlyphRule]:
    rules = []
    for row in rows:
        pattern = row.get('Burmese', '')
        if not pattern:
            continue
        rules.append(GlyphRule(
            pattern=pattern,
            replacement=first_value(row, 'Marathi1', 'Marathi'),
            alternate=row.get('Marathi2', ''),
            gloss=row.get('English', '')
        ))
    return rules


def vowel_rules(rows: Iterable[TableRow]) -> List[GlyphRule]:
    rules = []
    for row in rows:
        pattern = first_value(row, 'Burmese_extra', 'Burmese_extra2', 'Vowels')
        if not pattern or pattern == Config.VOWEL_PLACEHOLDER:
            continue
        rules.append(GlyphRule(
            pattern=pattern,
            replacement=first_value(row, 'Marathi_extra', 'Marathi')
        ))
    return rules


def medial_rules(rows: Iterable[TableRow]) -> List[GlyphRule]:
    rules = []
    for row in rows:
        pattern = row.get('Burmese_extra', '')
        replacement = row.get('Marathi', '')
        if not pattern or not replacement or replacement in Config.MISSING_VALUES:
            continue
        rules.append(GlyphRule(pattern=pattern, replacement=replacement))
    return rules


def special_cases(rows: Iterable[TableRow]) -> List[SpecialCase]:
    cases = []
    for row in rows:
        phrase = row.get('Burmese', '')
        replacement = row.get('Devanagari', '')
        if phrase and replacement:
            cases.append(SpecialCase(phrase=phrase, replacement=replacement))
    return cases


def conversation_rows(rows: Iterable[TableRow]) -> List[ConversationRow]:
    """
    Convert conversation table rows.

    The sequence number falls back to the 1-based row position; rows whose
    tag is empty or not one of the known tags are dropped.
    """
    converted = []
    for position, row in enumerate(rows, start=1):
        tag = RowTag.from_label(row.get('Tag', ''))
        if tag is None:
            if row.get('Tag'):
                logger.debug(f"Skipping row {position} with unknown tag {row.get('Tag')!r}")
            continue
        converted.append(ConversationRow(
            sequence_no=parse_sequence_no(row.get('Sr. No.', '')) or position,
            tag=tag,
            burmese_text=row.get('Burmese', ''),
            english_text=row.get('English', '')
        ))
    return converted


def merge_rules(defaults: Sequence[GlyphRule], loaded: Sequence[GlyphRule]) -> Tuple[GlyphRule, ...]:
    """Overlay loaded rules on defaults by pattern; new patterns go last."""
    merged: Dict[str, GlyphRule] = {rule.pattern: rule for rule in defaults}
    for rule in loaded:
        merged[rule.pattern] = rule
    return tuple(merged.values())


def merge_special_cases(defaults: Sequence[SpecialCase],
                        loaded: Sequence[SpecialCase]) -> Tuple[SpecialCase, ...]:
    merged: Dict[str, SpecialCase] = {case.phrase: case for case in defaults}
    for case in loaded:
        merged[case.phrase] = case
    return tuple(merged.values())


@dataclass(frozen=True)
class TrainerTables:
    """The five data tables the engine and parser are built from."""
    consonants: Tuple[GlyphRule, ...] = DEFAULT_CONSONANTS
    vowels: Tuple[GlyphRule, ...] = DEFAULT_VOWELS
    medials: Tuple[GlyphRule, ...] = DEFAULT_MEDIALS
    special_cases: Tuple[SpecialCase, ...] = DEFAULT_SPECIAL_CASES
    conversations: Tuple[ConversationRow, ...] = DEFAULT_CONVERSATION_ROWS

    def with_table(self, name: str, rows: Iterable[Mapping]) -> 'TrainerTables':
        """
        Return a copy with one table applied from raw rows.

        Args:
            name: table name (see ingestion.base.TABLE_NAMES)
            rows: raw rows keyed by header

        Returns:
            New TrainerTables; unchanged when the rows yield nothing usable

        Raises:
            ValueError: If name is not a known table
        """
        normalized = [normalize_row(row) for row in rows]

        if name == "consonants":
            loaded = consonant_rules(normalized)
            return replace(self, consonants=tuple(loaded)) if loaded else self
        if name == "vowels":
            loaded = vowel_rules(normalized)
            return replace(self, vowels=merge_rules(self.vowels, loaded)) if loaded else self
        if name == "medials":
            loaded = medial_rules(normalized)
            return replace(self, medials=merge_rules(self.medials, loaded)) if loaded else self
        if name == "special_cases":
            loaded = special_cases(normalized)
            if not loaded:
                return self
            return replace(self, special_cases=merge_special_cases(self.special_cases, loaded))
        if name == "conversations":
            loaded = conversation_rows(normalized)
            return replace(self, conversations=tuple(loaded)) if loaded else self

        raise ValueError(f"Unknown table: {name}")
