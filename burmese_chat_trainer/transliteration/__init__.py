"""
Transliteration module: rule tables, pattern index and engine.
"""

from burmese_chat_trainer.transliteration.services import TransliterationService
from burmese_chat_trainer.transliteration.lookup import (
    LookupIndex,
    build_lookup_index
)
from burmese_chat_trainer.transliteration.engine import TransliterationEngine
from burmese_chat_trainer.transliteration.rules import (
    DEFAULT_CONSONANTS,
    DEFAULT_VOWELS,
    DEFAULT_MEDIALS,
    DEFAULT_SPECIAL_CASES
)

__all__ = [
    'TransliterationService',
    'LookupIndex',
    'build_lookup_index',
    'TransliterationEngine',
    'DEFAULT_CONSONANTS',
    'DEFAULT_VOWELS',
    'DEFAULT_MEDIALS',
    'DEFAULT_SPECIAL_CASES'
]
