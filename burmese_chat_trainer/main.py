"""
Main entry point for the Burmese Chat Trainer.

Command line access to the converter, the topic list, review filters and
interactive quiz and chat practice.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from .app import TrainerApp
from .config import Config
from .ingestion.csv_source import CsvTableSource
from .ingestion.google_sheets_source import GoogleSheetsTableSource
from .models import Message
from .practice.chat import ChatSession
from .practice.quiz import QuizMode, QuizSession, QuizState
from .practice.ratings import Rating
from .storage.json_store import JsonFileProgressStore


QUIT_WORDS = ('q', 'quit', 'exit')

InputFn = Callable[[str], str]


def setup_logging(verbose: bool = False):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def build_app(args: argparse.Namespace) -> TrainerApp:
    """Create the app from command line options and load data and progress."""
    if args.sheet_url:
        source = GoogleSheetsTableSource(args.sheet_url)
    elif args.data_dir or Path(Config.DATA_DIR).exists():
        source = CsvTableSource(args.data_dir)
    else:
        source = None

    app = TrainerApp(
        source=source,
        store=JsonFileProgressStore(args.storage_dir),
        drop_empty_topics=not args.keep_empty_topics
    )
    app.load_data()
    app.load_progress()

    for warning in app.load_warnings:
        print(f"⚠️  {warning.message}")

    return app


def format_message(message: Message) -> str:
    return f"{message.burmese_text}  [{message.devanagari_text}]  {message.english_text}"


def ask_choice(prompt: str, count: int, input_fn: InputFn) -> Optional[int]:
    """
    Ask for a 1-based choice.

    Returns:
        0-based index of the choice, or None if the learner quits
    """
    while True:
        response = input_fn(prompt).strip().lower()
        if response in QUIT_WORDS:
            return None
        if response.isdigit() and 1 <= int(response) <= count:
            return int(response) - 1
        print(f"Please enter a number from 1 to {count}, or 'q' to quit.")


def ask_rating(input_fn: InputFn) -> Optional[Rating]:
    print("How well do you know this?")
    for rating in Rating:
        print(f"  {rating.id}. {rating.label} - {rating.description}")
    choice = ask_choice("Rating: ", len(Rating), input_fn)
    if choice is None:
        return None
    return Rating.from_id(choice + 1)


def run_quiz(session: QuizSession, input_fn: InputFn = input) -> int:
    """
    Drive a quiz session on the terminal.

    Returns:
        Number of questions rated
    """
    if session.state == QuizState.EMPTY:
        print("No questions available for this quiz.")
        return 0

    print(f"Quiz: {session.scope.title} ({session.mode.value}, {session.total} questions)")
    print("=" * 50)

    while session.state == QuizState.AWAITING_ANSWER:
        question = session.current_question
        print(f"\nQuestion {session.position}/{session.total}")

        if session.mode == QuizMode.RECALL:
            devanagari, english = session.hints()
            print(f"  {devanagari}")
            print(f"  {english}")
            attempt = input_fn("Type the Burmese (empty to reveal, 'q' to quit): ").strip()
            if attempt.lower() in QUIT_WORDS:
                break
            if attempt:
                correct = session.submit_attempt(attempt)
                print("✅ Correct" if correct else "❌ Not quite")
            else:
                session.reveal()
            print(f"Answer: {format_message(question.message)}")
        else:
            if session.mode == QuizMode.PRODUCTION:
                print(f"  {format_message(question.message)}")
                print("Which reply fits?")
            else:
                print(f"  {question.message.burmese_text}")
                print("What does this mean?")

            answered = False
            while session.state == QuizState.AWAITING_ANSWER:
                options = session.options
                for number, option in enumerate(options, start=1):
                    marker = "✗ " if option.id in session.wrong_option_ids else ""
                    label = option.burmese_text if session.mode == QuizMode.PRODUCTION else option.english_text
                    print(f"  {number}. {marker}{label}")
                choice = ask_choice("Answer: ", len(options), input_fn)
                if choice is None:
                    break
                if session.select_option(options[choice].id):
                    answered = True
                    print(f"✅ Correct: {format_message(question.answer)}")
                elif options[choice].id in session.wrong_option_ids:
                    print("❌ Try again")
            if not answered:
                break

        rating = ask_rating(input_fn)
        if rating is None:
            break
        session.submit_rating(rating)

    if session.is_complete:
        print(f"\n🎉 Quiz complete: {session.answered_count} questions rated")
    return session.answered_count


def run_chat(session: ChatSession, input_fn: InputFn = input) -> bool:
    """
    Drive a chat session on the terminal.

    Returns:
        True if the conversation was played to the end
    """
    print(f"Chat: {session.topic.title}")
    if session.topic.description:
        print(session.topic.description)
    print("=" * 50)

    shown = 0
    while True:
        for message in session.transcript[shown:]:
            speaker = "Bot" if message.is_bot else "You"
            print(f"{speaker}: {format_message(message)}")
        shown = len(session.transcript)

        if session.is_complete:
            print("\n🎉 Conversation complete")
            return True

        options = session.options
        for number, option in enumerate(options, start=1):
            marker = "✗ " if option.id in session.wrong_option_ids else ""
            print(f"  {number}. {marker}{option.burmese_text}")
        choice = ask_choice("Your reply: ", len(options), input_fn)
        if choice is None:
            return False
        if not session.select_option(options[choice].id):
            print("❌ Try again")


def confirm(prompt: str, input_fn: InputFn = input) -> bool:
    """Ask a yes/no question; the default is no."""
    while True:
        response = input_fn(f"{prompt} [y/N]: ").strip().lower()
        if response in ['y', 'yes']:
            return True
        elif response in ['', 'n', 'no']:
            return False
        else:
            print("Please enter 'y' for yes or 'n' for no.")


def cmd_convert(app: TrainerApp, args: argparse.Namespace) -> int:
    text = " ".join(args.text)
    result = app.transliterate(text)
    if app.engine.is_special_case(text):
        result += "  (special case)"
    print(result)
    return 0


def cmd_topics(app: TrainerApp, args: argparse.Namespace) -> int:
    if not app.topics:
        print("No topics loaded.")
        return 0
    for topic in app.topics:
        print(f"{topic.id:3d}. {topic.title} ({len(topic.messages)} messages)")
        if topic.description:
            print(f"     {topic.description}")
    return 0


def cmd_stats(app: TrainerApp, args: argparse.Namespace) -> int:
    print("📊 DATA STATISTICS")
    print("=" * 50)
    for name, count in app.stats().items():
        print(f"{name.replace('_', ' ').title():<16} {count}")
    return 0


def cmd_review(app: TrainerApp, args: argparse.Namespace) -> int:
    rating = None
    if args.rating is not None:
        rating = Rating.from_id(args.rating)
        if rating is None:
            print(f"❌ Unknown rating {args.rating}; use 1 to {len(Rating)}")
            return 1

    messages = app.review(rating=rating, unrated=args.unrated, due=args.due)
    counts = app.tracker.mistake_counts()

    if not messages:
        print("Nothing to review.")
        return 0

    for message in messages:
        level = app.tracker.rating_for(message.id)
        line = f"[{message.id}] {format_message(message.message)}"
        line += f"  ({level.label if level else 'unrated'}"
        if counts.get(message.id):
            line += f", {counts[message.id]} mistakes"
        print(line + ")")
    return 0


def cmd_quiz(app: TrainerApp, args: argparse.Namespace) -> int:
    try:
        session = app.start_quiz(args.topic, QuizMode(args.mode), args.seed)
    except ValueError as e:
        print(f"❌ {e}")
        return 1
    run_quiz(session)
    return 0


def cmd_chat(app: TrainerApp, args: argparse.Namespace) -> int:
    try:
        session = app.start_chat(args.topic, args.seed)
    except ValueError as e:
        print(f"❌ {e}")
        return 1
    run_chat(session)
    return 0


def cmd_clear(app: TrainerApp, args: argparse.Namespace) -> int:
    if not args.yes and not confirm("Delete all ratings and mistakes?"):
        print("Nothing deleted.")
        return 0
    if not app.clear_progress():
        print("❌ Progress could not be cleared from storage")
        return 1
    print("✅ All progress cleared")
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="burmese-chat-trainer",
        description="Practice Burmese conversations with Devanagari reading aids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s convert "မင်္ဂလာပါ"
  %(prog)s topics
  %(prog)s quiz --topic 1 --mode production
  %(prog)s chat --topic 2
  %(prog)s --sheet-url "https://docs.google.com/spreadsheets/d/..." stats
        """
    )

    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help=f"Directory with the CSV data tables (default: {Config.DATA_DIR})"
    )
    parser.add_argument(
        "--sheet-url",
        default=None,
        help="Read the data tables from a Google spreadsheet instead of CSV files"
    )
    parser.add_argument(
        "--storage-dir",
        type=Path,
        default=None,
        help=f"Directory for saved progress (default: {Config.STORAGE_DIR})"
    )
    parser.add_argument(
        "--keep-empty-topics",
        action="store_true",
        help="Keep topics that have no messages"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Transliterate Burmese text to Devanagari")
    convert.add_argument("text", nargs="+", help="Burmese text")
    convert.set_defaults(handler=cmd_convert)

    topics = subparsers.add_parser("topics", help="List conversation topics")
    topics.set_defaults(handler=cmd_topics)

    stats = subparsers.add_parser("stats", help="Show data and progress counts")
    stats.set_defaults(handler=cmd_stats)

    review = subparsers.add_parser("review", help="List messages by rating")
    review_filter = review.add_mutually_exclusive_group()
    review_filter.add_argument("--rating", type=int, help="Only messages with this rating (1-5)")
    review_filter.add_argument("--unrated", action="store_true", help="Only messages never rated")
    review_filter.add_argument("--due", action="store_true", help="Only messages due for review")
    review.set_defaults(handler=cmd_review)

    quiz = subparsers.add_parser("quiz", help="Interactive quiz")
    quiz.add_argument("--topic", type=int, default=None, help="Topic id (all topics if omitted)")
    quiz.add_argument(
        "--mode",
        choices=[mode.value for mode in QuizMode],
        default=QuizMode.RECOGNITION.value,
        help="Quiz mode"
    )
    quiz.add_argument("--seed", type=int, default=None, help="Seed for a reproducible order")
    quiz.set_defaults(handler=cmd_quiz)

    chat = subparsers.add_parser("chat", help="Interactive conversation practice")
    chat.add_argument("--topic", type=int, required=True, help="Topic id")
    chat.add_argument("--seed", type=int, default=None, help="Seed for a reproducible order")
    chat.set_defaults(handler=cmd_chat)

    clear = subparsers.add_parser("clear", help="Delete all saved progress")
    clear.add_argument("--yes", "-y", action="store_true", help="Do not ask for confirmation")
    clear.set_defaults(handler=cmd_clear)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        app = build_app(args)
    except ValueError as e:
        print(f"❌ {e}")
        return 1

    try:
        return args.handler(app, args)
    except (KeyboardInterrupt, EOFError):
        print("\nBye!")
        return 0


if __name__ == "__main__":
    sys.exit(main())
