# Copyright (c) Microsoft. All rights reserved.

"""Chat options for the Mistral AI chat completion API."""

from ._chat_options import MistralAiChatOptions, MistralAiChatOptionsBuilder
from ._function_calling import (
    ChatOptionsCapability,
    FunctionCallback,
    FunctionCallbackRegistry,
    FunctionCallingOptions,
    resolve_function_callbacks,
)
from ._logging import get_logger, setup_logging
from ._settings import MistralAiChatSettings
from ._types import (
    DEFAULT_CHAT_MODEL,
    FunctionDefinition,
    FunctionTool,
    MistralAiChatModel,
    ResponseFormat,
    SpecificToolChoice,
    ToolChoice,
    ToolChoiceFunction,
)
from ._version import VERSION

__version__ = VERSION

__all__ = [
    "DEFAULT_CHAT_MODEL",
    "ChatOptionsCapability",
    "FunctionCallback",
    "FunctionCallbackRegistry",
    "FunctionCallingOptions",
    "FunctionDefinition",
    "FunctionTool",
    "MistralAiChatModel",
    "MistralAiChatOptions",
    "MistralAiChatOptionsBuilder",
    "MistralAiChatSettings",
    "ResponseFormat",
    "SpecificToolChoice",
    "ToolChoice",
    "ToolChoiceFunction",
    "__version__",
    "get_logger",
    "resolve_function_callbacks",
    "setup_logging",
]
