# wanderplan/services/session.py

"""
Trip session manager.

Owns the single conversational context with the generation service. The
manager is Idle until a trip is created and Active afterwards; a new trip
replaces the session outright. Only one call may be in flight at a time,
and a response that arrives after the session was replaced or reset is
dropped instead of being applied.
"""

from dataclasses import dataclass
from logging import getLogger

from google.genai.chats import AsyncChat
from google.genai.types import Content

from wanderplan.clients.ai_client import ITINERARY_SCHEMA, AiClient
from wanderplan.configs import file_logger
from wanderplan.configs.settings import MAX_FEEDBACK_LENGTH
from wanderplan.errors import (
    AiError,
    FeedbackValidationError,
    NoActiveSessionError,
    SessionBusyError,
    SessionSupersededError,
)
from wanderplan.schemas.itinerary import Itinerary
from wanderplan.schemas.state import TripState, TripStatus
from wanderplan.schemas.trip import TripPreferences
from wanderplan.services.prompts import SYSTEM_INSTRUCTION, refine_prompt, trip_prompt
from wanderplan.services.validation import parse_itinerary

logger = file_logger(getLogger(__name__))


@dataclass
class TripSession:
    """The active conversation and the itinerary it last produced."""

    chat: AsyncChat
    preferences: TripPreferences
    generation: int
    itinerary: Itinerary


class TripSessionManager:
    """
    Mediates every call to the generation service.

    Args:
        ai_client: Gateway used to open chats and send messages.
    """

    def __init__(self, ai_client: AiClient) -> None:
        self._ai_client = ai_client
        self._session: TripSession | None = None
        self._generation = 0
        self._pending: object | None = None

    @property
    def status(self) -> TripStatus:
        return TripStatus.IDLE if self._session is None else TripStatus.ACTIVE

    @property
    def is_busy(self) -> bool:
        return self._pending is not None

    @property
    def current(self) -> Itinerary | None:
        """The last validated itinerary, if any."""
        return self._session.itinerary if self._session else None

    @property
    def preferences(self) -> TripPreferences | None:
        return self._session.preferences if self._session else None

    def snapshot(self) -> TripState:
        """Current state for the display layer."""
        return TripState(
            status=self.status,
            busy=self.is_busy,
            preferences=self.preferences,
            itinerary=self.current,
        )

    async def start_session(self, prefs: TripPreferences) -> Itinerary:
        """
        Open a new conversation for ``prefs`` and generate the itinerary.

        The previous session, if any, stays active until the new itinerary
        has been validated; then it is replaced.

        Args:
            prefs: Validated traveler preferences.

        Returns:
            The generated itinerary with exactly ``prefs.duration`` days.

        Raises:
            SessionBusyError: If another call is in flight.
            SessionSupersededError: If the manager was reset during the call.
            TransportError: If the service call could not complete.
            EmptyResponseError: If the service returned no text.
            SchemaViolationError: If the payload fails validation.
        """
        token = self._claim()
        generation = self._generation
        try:
            logger.info(
                f"Starting trip session: {prefs.duration} day(s) to {prefs.destination}",
            )
            chat = self._ai_client.open_chat(SYSTEM_INSTRUCTION, ITINERARY_SCHEMA)
            text = await self._ai_client.send_message(chat, trip_prompt(prefs))
            self._ensure_current(generation)

            itinerary = parse_itinerary(text, prefs.duration, prefs.start_date)
            self._generation += 1
            self._session = TripSession(
                chat=chat,
                preferences=prefs,
                generation=self._generation,
                itinerary=itinerary,
            )
            logger.info(f"Trip session {self._generation} active: {itinerary.title}")
            return itinerary
        finally:
            self._release(token)

    async def refine(self, feedback: str) -> Itinerary:
        """
        Revise the current itinerary on the same conversation.

        The reply must keep the trip's day count. On any failure the
        previous itinerary stays current and the rejected turn is removed
        from the conversation.

        Args:
            feedback: Free-text change request.

        Returns:
            The revised itinerary, which replaces the previous one.

        Raises:
            NoActiveSessionError: If no trip has been created.
            FeedbackValidationError: If feedback is blank or too long.
            SessionBusyError: If another call is in flight.
            SessionSupersededError: If the session was replaced during the call.
            TransportError: If the service call could not complete.
            EmptyResponseError: If the service returned no text.
            SchemaViolationError: If the payload fails validation.
        """
        session = self._session
        if session is None:
            raise NoActiveSessionError

        feedback = (feedback or "").strip()
        if not feedback:
            raise FeedbackValidationError
        if len(feedback) > MAX_FEEDBACK_LENGTH:
            msg = f"Feedback must be at most {MAX_FEEDBACK_LENGTH} characters"
            raise FeedbackValidationError(msg)

        token = self._claim()
        generation = self._generation
        history = session.chat.get_history(curated=False)
        try:
            logger.info(f"Refining trip session {session.generation}")
            text = await self._ai_client.send_message(session.chat, refine_prompt(feedback))
            self._ensure_current(generation)

            prefs = session.preferences
            itinerary = parse_itinerary(text, prefs.duration, prefs.start_date)
        except SessionSupersededError:
            raise
        except Exception:
            if self._generation == generation:
                self._restore_chat(session, history)
            raise
        finally:
            self._release(token)

        session.itinerary = itinerary
        logger.info(f"Trip session {session.generation} refined: {itinerary.title}")
        return itinerary

    def reset(self) -> None:
        """Drop the active session. Any call still in flight is abandoned."""
        if self._session or self._pending:
            logger.info("Resetting trip session")
        self._generation += 1
        self._session = None
        self._pending = None

    def _restore_chat(self, session: TripSession, history: list[Content]) -> None:
        """Reopen the chat without the failed turn; keep the old handle if that fails."""
        try:
            session.chat = self._ai_client.open_chat(
                SYSTEM_INSTRUCTION,
                ITINERARY_SCHEMA,
                history=history,
            )
        except AiError:
            logger.exception(
                f"Could not restore chat history for trip session {session.generation}",
            )

    def _claim(self) -> object:
        if self._pending is not None:
            raise SessionBusyError
        token = object()
        self._pending = token
        return token

    def _release(self, token: object) -> None:
        if self._pending is token:
            self._pending = None

    def _ensure_current(self, generation: int) -> None:
        if self._generation != generation:
            logger.info("Discarding late response for a replaced trip session")
            raise SessionSupersededError
