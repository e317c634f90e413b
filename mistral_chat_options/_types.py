# Copyright (c) Microsoft. All rights reserved.

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import Field

from ._pydantic import MistralBaseModel


class MistralAiChatModel(str, Enum):
    """Named Mistral AI chat models, each resolving to its model identifier."""

    OPEN_MISTRAL_7B = "open-mistral-7b"
    OPEN_MIXTRAL_8X7B = "open-mixtral-8x7b"
    OPEN_MIXTRAL_8X22B = "open-mixtral-8x22b"
    OPEN_MISTRAL_NEMO = "open-mistral-nemo"
    SMALL = "mistral-small-latest"
    MEDIUM = "mistral-medium-latest"
    LARGE = "mistral-large-latest"
    CODESTRAL = "codestral-latest"
    PIXTRAL_LARGE = "pixtral-large-latest"
    MINISTRAL_8B = "ministral-8b-latest"

    @property
    def model_name(self) -> str:
        """The identifier sent to the service for this model."""
        return self.value


DEFAULT_CHAT_MODEL = MistralAiChatModel.OPEN_MISTRAL_7B


class ResponseFormat(MistralBaseModel):
    """An object specifying the format that the model must output.

    Setting ``type`` to ``json_object`` enables JSON mode, which guarantees the message
    the model generates is valid JSON. ``json_schema`` additionally constrains the
    output to a given schema.
    """

    type: Literal["text", "json_object", "json_schema"] = "text"
    json_schema: dict[str, Any] | None = None
    """The JSON schema the output must follow, only used with ``type="json_schema"``."""

    @classmethod
    def text(cls) -> ResponseFormat:
        return cls(type="text")

    @classmethod
    def json_object(cls) -> ResponseFormat:
        return cls(type="json_object")


class ToolChoice(str, Enum):
    """Controls which (if any) function is called by the model.

    ``none`` means the model will not call a function and instead generates a message.
    ``auto`` means the model can pick between generating a message or calling a function.
    ``any`` forces the model to call one of the offered functions.
    """

    AUTO = "auto"
    ANY = "any"
    NONE = "none"


class ToolChoiceFunction(MistralBaseModel):
    """The function nominated by a specific tool choice."""

    name: str


class SpecificToolChoice(MistralBaseModel):
    """Forces the model to call one named function."""

    type: Literal["function"] = "function"
    function: ToolChoiceFunction

    @classmethod
    def for_function(cls, name: str) -> SpecificToolChoice:
        return cls(function=ToolChoiceFunction(name=name))


class FunctionDefinition(MistralBaseModel):
    """The schema of a function the model may generate JSON inputs for."""

    name: str
    description: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)
    """The parameters the function accepts, described as a JSON Schema object."""


class FunctionTool(MistralBaseModel):
    """A tool the model may call. Currently, only functions are supported as a tool."""

    type: Literal["function"] = "function"
    function: FunctionDefinition

    @classmethod
    def from_function(
        cls, name: str, description: str | None = None, parameters: dict[str, Any] | None = None
    ) -> FunctionTool:
        return cls(function=FunctionDefinition(name=name, description=description, parameters=parameters or {}))
