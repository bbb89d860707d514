"""
Configuration settings for the Burmese Chat Trainer.
"""

import os
from pathlib import Path


class Config:
    """Configuration class for application settings."""

    # Project paths
    PROJECT_ROOT = Path(__file__).parent.parent
    DATA_DIR = Path(os.environ.get("BURMESE_TRAINER_DATA_DIR", PROJECT_ROOT / "data"))
    STORAGE_DIR = Path(os.environ.get("BURMESE_TRAINER_STORAGE_DIR", PROJECT_ROOT / "progress"))

    # Tabular data files (one per table, inside DATA_DIR)
    CSV_FILES = {
        "consonants": "Consonants.csv",
        "vowels": "Vowels.csv",
        "medials": "Special_characters.csv",
        "conversations": "Burmese_Conversation.csv",
        "special_cases": "Special_cases.csv",
    }
    CSV_ENCODING = "utf-8-sig"

    # Worksheet names when the tables live in one Google spreadsheet
    SHEET_NAMES = {
        "consonants": "Consonants",
        "vowels": "Vowels",
        "medials": "Special_characters",
        "conversations": "Burmese_Conversation",
        "special_cases": "Special_cases",
    }

    # Google Sheets API settings
    GOOGLE_SHEETS_SCOPES = [
        "https://www.googleapis.com/auth/spreadsheets.readonly"
    ]
    CREDENTIALS_FILE = "credentials.json"
    TOKEN_FILE = "token.json"

    # Progress storage (mirrors the two local-storage collections)
    RATINGS_FILE = "burmese_ratings.json"
    MISTAKES_FILE = "burmese_wrong_answers.json"

    # Source data sentinels
    EMPTY_PLACEHOLDER = "-"
    TOPIC_SEPARATOR = "---------"
    VOWEL_PLACEHOLDER = "◌"  # dotted circle
    MISSING_VALUES = ("-", "#N/A")

    # Parsing settings
    DROP_EMPTY_TOPICS = True
    UNTITLED_TOPIC = "Untitled"

    # Practice settings
    RECOGNITION_DISTRACTORS = 3
    PRODUCTION_DISTRACTORS = 3
    CHAT_DISTRACTORS = 2
