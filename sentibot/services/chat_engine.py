"""
Keyword chatbot: per-turn processing and the console interaction loop.
"""

import asyncio
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence

from loguru import logger

from sentibot.config import settings
from sentibot.integrations.analytics import AnalyticsDispatcher
from sentibot.models.schemas import AnalyticsRecord, KnowledgeEntry, UserTurn
from sentibot.services import knowledge_service, sentiment_service
from sentibot.services.text_service import normalize, tokenize

WELCOME_MESSAGE = "Welcome to our chatbot! How can I assist you today?"
GOODBYE_MESSAGE = "Goodbye!"
PROMPT = ">> "


def process_turn(raw_input: str, entries: Sequence[KnowledgeEntry]) -> UserTurn:
    normalized = normalize(raw_input)
    sentiment = sentiment_service.classify(raw_input)
    tokens = tokenize(normalized)
    response = knowledge_service.match(tokens, entries)
    return UserTurn(
        raw_input=raw_input,
        normalized_input=normalized,
        tokens=tokens,
        sentiment=sentiment,
        response=response,
    )


class LoopState(str, Enum):
    WAITING_FOR_INPUT = "waiting_for_input"
    PROCESSING = "processing"
    TERMINATED = "terminated"


class InteractionLoop:
    """
    Console conversation loop.

    WAITING_FOR_INPUT -> PROCESSING -> WAITING_FOR_INPUT until a quit command
    or end of input moves it to TERMINATED. Analytics for each turn are
    dispatched in the background and never awaited by the loop itself.
    """

    def __init__(
        self,
        entries: Sequence[KnowledgeEntry],
        dispatcher: AnalyticsDispatcher,
        read_input: Callable[[str], str] = input,
        write_output: Callable[[str], None] = print,
        quit_commands: Optional[Iterable[str]] = None,
        drain_timeout: Optional[float] = None,
    ):
        self.entries = tuple(entries)
        self.dispatcher = dispatcher
        self._read = read_input
        self._write = write_output
        if quit_commands is None:
            quit_commands = settings.quit_commands
        self.quit_commands = {normalize(c) for c in quit_commands}
        self.drain_timeout = drain_timeout
        self.state = LoopState.WAITING_FOR_INPUT
        self.turns = 0

    async def run(self) -> int:
        self._write(WELCOME_MESSAGE)

        while self.state is not LoopState.TERMINATED:
            try:
                # blocking read off the event loop so dispatches keep running
                raw = await asyncio.to_thread(self._read, PROMPT)
            except (EOFError, KeyboardInterrupt):
                self._terminate()
                break
            self.step(raw)

        await self.dispatcher.drain(self.drain_timeout)
        logger.info(f"Conversation ended after {self.turns} turn(s)")
        return self.turns

    def step(self, raw_input: str) -> Optional[UserTurn]:
        """Handle one line of input. Returns None when the line ended the loop."""
        if self.state is LoopState.TERMINATED:
            raise RuntimeError("Interaction loop already terminated")

        if normalize(raw_input) in self.quit_commands:
            self._terminate()
            return None

        self.state = LoopState.PROCESSING
        try:
            turn = process_turn(raw_input, self.entries)

            self._write(sentiment_service.reaction(turn.sentiment.label))
            self._write(turn.response)

            self.dispatcher.dispatch(
                AnalyticsRecord(input=turn.raw_input, response=turn.response)
            )
            self.turns += 1
            logger.debug(f"Turn {self.turns}: '{raw_input[:50]}' -> '{turn.response[:50]}'")
        finally:
            self.state = LoopState.WAITING_FOR_INPUT

        return turn

    def _terminate(self) -> None:
        self.state = LoopState.TERMINATED
        self._write(GOODBYE_MESSAGE)
