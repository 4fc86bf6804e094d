# wanderplan/clients/ai_client.py

from logging import getLogger
from typing import NoReturn

from google.genai import Client
from google.genai.chats import AsyncChat
from google.genai.client import AsyncClient
from google.genai.errors import APIError
from google.genai.types import Content, GenerateContentConfig, HttpOptions, Schema, Type
from httpx import ConnectError, RemoteProtocolError, TimeoutException

from wanderplan.configs import file_logger, settings
from wanderplan.errors import (
    AiAuthenticationError,
    AiNetworkError,
    AiQuotaExceededError,
    EmptyResponseError,
    TransportError,
)

logger = file_logger(getLogger(__name__))

# Network-related exceptions that should be caught and converted
NETWORK_EXCEPTIONS = (
    ConnectError,
    RemoteProtocolError,
    TimeoutException,
    ConnectionError,
    OSError,
)

# --- Structured output schema ---
ACTIVITY_SCHEMA = Schema(
    type=Type.OBJECT,
    properties={
        "title": Schema(type=Type.STRING),
        "description": Schema(type=Type.STRING),
        "location": Schema(type=Type.STRING),
        "estimatedCost": Schema(type=Type.STRING),
        "duration": Schema(type=Type.STRING),
        "tags": Schema(type=Type.ARRAY, items=Schema(type=Type.STRING)),
    },
    required=["title", "description", "location"],
)

DAY_PLAN_SCHEMA = Schema(
    type=Type.OBJECT,
    properties={
        "dayNumber": Schema(type=Type.INTEGER),
        "theme": Schema(type=Type.STRING),
        "morning": Schema(type=Type.ARRAY, items=ACTIVITY_SCHEMA),
        "afternoon": Schema(type=Type.ARRAY, items=ACTIVITY_SCHEMA),
        "evening": Schema(type=Type.ARRAY, items=ACTIVITY_SCHEMA),
    },
    required=["dayNumber", "theme", "morning", "afternoon", "evening"],
)

ITINERARY_SCHEMA = Schema(
    type=Type.OBJECT,
    properties={
        "title": Schema(type=Type.STRING),
        "summary": Schema(type=Type.STRING),
        "days": Schema(type=Type.ARRAY, items=DAY_PLAN_SCHEMA),
    },
    required=["title", "summary", "days"],
)


class AiClient:
    """
    Async gateway to Google's Gemini chat API.

    One instance lives for the whole application. It opens chat sessions
    and sends messages on them; every failure leaves as an ``AiError``
    subclass so callers handle transport and payload problems the same way.
    No call is retried.

    Attributes:
        client: The Google GenAI AsyncClient instance.
    """

    def __init__(self) -> None:
        """Initialize the AI client with API credentials."""
        self._model = settings.GEMINI_MODEL
        self._timeout = settings.AI_REQUEST_TIMEOUT

        try:
            self._client = Client(
                api_key=settings.GEMINI_API_KEY,
                http_options=HttpOptions(timeout=self._timeout * 1000),
            ).aio
        except Exception as e:
            logger.exception(
                "Failed to initialize Gemini client, missing or invalid API key?",
            )
            self._handle_exception(e)

        logger.info(f"AiClient initialized with model: {self._model}")

    @property
    def client(self) -> AsyncClient:
        """Get the AI client instance."""
        return self._client

    @property
    def model(self) -> str:
        return self._model

    def open_chat(
        self,
        system_instruction: str,
        response_schema: Schema = ITINERARY_SCHEMA,
        temperature: float | None = None,
        history: list[Content] | None = None,
    ) -> AsyncChat:
        """
        Open a new conversational context.

        Args:
            system_instruction: Instruction profile applied to every turn.
            response_schema: Structured output schema for every reply.
            temperature: Sampling temperature, defaults to ``AI_TEMPERATURE``.
            history: Prior turns to seed the conversation with.

        Returns:
            A chat handle that keeps the turn history.
        """
        config = GenerateContentConfig(
            system_instruction=system_instruction,
            response_mime_type="application/json",
            response_schema=response_schema,
            temperature=settings.AI_TEMPERATURE if temperature is None else temperature,
        )
        try:
            return self._client.chats.create(model=self._model, config=config, history=history)
        except Exception as e:
            logger.exception("Failed to open chat session")
            self._handle_exception(e)

    async def send_message(self, chat: AsyncChat, message: str) -> str:
        """
        Send one message on a chat and return the reply text.

        Args:
            chat: Handle returned by ``open_chat``.
            message: The user turn.

        Returns:
            The raw text payload.

        Raises:
            EmptyResponseError: If the call completed without text.
            AiNetworkError: On network failures and timeouts.
            AiAuthenticationError: If the API key is rejected.
            AiQuotaExceededError: If the quota or rate limit is hit.
            TransportError: For any other failed call.
        """
        try:
            response = await chat.send_message(message)
        except NETWORK_EXCEPTIONS as e:
            error_msg = str(e)
            logger.exception(f"AI network error: {error_msg}")
            detail = f"AI service temporarily unavailable: {error_msg}"
            raise AiNetworkError(detail=detail) from e
        except Exception as e:
            logger.exception("AI chat message failed")
            self._handle_exception(e)

        text = response.text if response else None
        if not text or not text.strip():
            logger.warning("Empty response from Gemini API")
            raise EmptyResponseError
        return text

    def _handle_exception(self, e: Exception) -> NoReturn:
        """Map generic exceptions to specific AiError."""
        error_msg = str(e)
        code = e.code if isinstance(e, APIError) else None

        if code in (401, 403) or "401" in error_msg or "unauthenticated" in error_msg.lower():
            detail = f"Authentication failed: {error_msg}"
            raise AiAuthenticationError(detail=detail) from e
        if code == 429 or "429" in error_msg or "quota" in error_msg.lower():
            detail = f"Quota exceeded: {error_msg}"
            raise AiQuotaExceededError(detail=detail) from e
        if "connection" in error_msg.lower():
            detail = f"Network error: {error_msg}"
            raise AiNetworkError(detail=detail) from e
        detail = f"An unexpected error occurred: {error_msg}"
        raise TransportError(detail=detail) from e

    async def close(self) -> None:
        try:
            logger.info("Closing AI client")
            await self.client.aclose()
        except Exception:
            logger.exception("Failed to close AI client")
        else:
            logger.info("AI client closed successfully")
