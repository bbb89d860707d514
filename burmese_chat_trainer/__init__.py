"""
Burmese Chat Trainer.

Burmese conversation practice with a Devanagari reading aid: a rule-based
transliteration engine, tagged conversation data parsed into topics, and
quiz, chat and review sessions with self-assessment ratings.
"""

__version__ = "0.1.0"
