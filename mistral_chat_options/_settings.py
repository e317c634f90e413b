# Copyright (c) Microsoft. All rights reserved.

from typing import Any, TypeVar

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._chat_options import MistralAiChatOptions
from ._logging import get_logger
from ._types import DEFAULT_CHAT_MODEL
from .exceptions import ChatOptionsSettingsError

logger = get_logger(__name__)

__all__ = ["MistralAiChatSettings"]

TSettings = TypeVar("TSettings", bound="MistralAiChatSettings")


class MistralAiChatSettings(BaseSettings):
    """Default chat options for Mistral AI, read from the environment.

    The settings are read from environment variables prefixed with ``MISTRAL_AI_CHAT_``
    or, when ``env_file_path`` is given, from a dotenv file. Values passed to
    :meth:`create` take precedence over both.

    Attributes:
        model: The model used when a call does not name one (MISTRAL_AI_CHAT_MODEL).
        temperature: The default sampling temperature (MISTRAL_AI_CHAT_TEMPERATURE).
        top_p: The default nucleus sampling factor (MISTRAL_AI_CHAT_TOP_P).
        max_tokens: The default completion token limit (MISTRAL_AI_CHAT_MAX_TOKENS).
        safe_prompt: Whether to inject the safety prompt (MISTRAL_AI_CHAT_SAFE_PROMPT).
        random_seed: The default sampling seed (MISTRAL_AI_CHAT_RANDOM_SEED).
        stop: The default stop sequences, as a JSON list (MISTRAL_AI_CHAT_STOP).
    """

    model_config = SettingsConfigDict(
        env_prefix="MISTRAL_AI_CHAT_",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        validate_assignment=True,
    )

    model: str = DEFAULT_CHAT_MODEL.model_name
    temperature: float | None = 0.7
    top_p: float | None = 1.0
    max_tokens: int | None = None
    safe_prompt: bool | None = False
    random_seed: int | None = None
    stop: list[str] | None = None

    @classmethod
    def create(
        cls: type[TSettings],
        env_file_path: str | None = None,
        env_file_encoding: str | None = None,
        **kwargs: Any,
    ) -> TSettings:
        """Load the settings.

        Args:
            env_file_path: Use the environment settings file as a fallback to environment variables.
            env_file_encoding: The encoding of the environment settings file, defaults to 'utf-8'.
            kwargs: Explicit values, ``None`` values are ignored.

        Raises:
            ChatOptionsSettingsError: If a value cannot be parsed.
        """
        overrides = {key: value for key, value in kwargs.items() if value is not None}
        try:
            settings = cls(
                _env_file=env_file_path,
                _env_file_encoding=env_file_encoding or "utf-8",
                **overrides,
            )
        except ValidationError as ex:
            raise ChatOptionsSettingsError(f"Failed to load Mistral AI chat settings: {ex}") from ex
        logger.debug("Loaded Mistral AI chat settings for model %s", settings.model)
        return settings

    def to_chat_options(self) -> MistralAiChatOptions:
        """Build the default chat options, copy them per call before changing them."""
        return (
            MistralAiChatOptions.builder()
            .model(self.model)
            .temperature(self.temperature)
            .top_p(self.top_p)
            .max_tokens(self.max_tokens)
            .safe_prompt(self.safe_prompt)
            .random_seed(self.random_seed)
            .stop(self.stop)
            .build()
        )
