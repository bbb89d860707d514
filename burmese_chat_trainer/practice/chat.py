"""
Chat playback of one topic.

Bot lines are appended to the transcript as soon as they come up. Every
user line has to be picked by the learner from a short list of the
topic's user lines before the conversation continues.
"""

import logging
from typing import TYPE_CHECKING, FrozenSet, List, Optional, Tuple

from ..config import Config
from ..models import Message, Topic
from .shuffle import Shuffler

if TYPE_CHECKING:
    from ..storage.tracker import ProgressTracker


class ChatSession:
    """
    Plays a topic's messages in order, pausing for each user reply.
    """

    def __init__(self, topic: Topic, tracker: Optional['ProgressTracker'] = None,
                 shuffler: Optional[Shuffler] = None):
        self.logger = logging.getLogger(__name__)
        self.topic = topic
        self.tracker = tracker
        self.shuffler = shuffler or Shuffler()

        self.transcript: List[Message] = []
        self._index = 0
        self._options: Tuple[Message, ...] = ()
        self._wrong_option_ids: FrozenSet[int] = frozenset()

        self._play()

    @property
    def expected_reply(self) -> Optional[Message]:
        """The user message the learner has to pick next, if any."""
        if self._index < len(self.topic.messages):
            return self.topic.messages[self._index]
        return None

    @property
    def is_waiting(self) -> bool:
        return self.expected_reply is not None

    @property
    def is_complete(self) -> bool:
        return self._index >= len(self.topic.messages)

    @property
    def options(self) -> Tuple[Message, ...]:
        return self._options

    @property
    def wrong_option_ids(self) -> FrozenSet[int]:
        return self._wrong_option_ids

    def select_option(self, option_id: int) -> bool:
        """
        Pick a reply.

        A correct pick appends the reply and plays on to the next user line.
        A wrong pick is marked, logged as a mistake against the expected
        reply and leaves the session waiting.

        Returns:
            True if the pick was the expected reply
        """
        expected = self.expected_reply
        if expected is None or option_id in self._wrong_option_ids:
            return False
        if option_id not in {option.id for option in self._options}:
            return False

        if option_id == expected.id:
            self.transcript.append(expected)
            self._index += 1
            self._play()
            return True

        self._wrong_option_ids = self._wrong_option_ids | {option_id}
        if self.tracker is not None:
            self.tracker.record_mistake(expected.id, option_id)
        return False

    def _play(self) -> None:
        """Append bot lines until a user line or the end of the topic."""
        messages = self.topic.messages
        while self._index < len(messages) and messages[self._index].is_bot:
            self.transcript.append(messages[self._index])
            self._index += 1

        self._wrong_option_ids = frozenset()
        if self._index < len(messages):
            self._options = tuple(self._build_options(self._index))
        else:
            self._options = ()
            self.logger.debug(f"Chat for topic {self.topic.id} complete")

    def _build_options(self, position: int) -> List[Message]:
        correct = self.topic.messages[position]
        others = [
            message for i, message in enumerate(self.topic.messages)
            if message.is_user and i != position
        ][:Config.CHAT_DISTRACTORS]
        return self.shuffler.shuffle([correct] + others)
