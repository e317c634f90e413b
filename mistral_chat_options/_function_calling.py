# Copyright (c) Microsoft. All rights reserved.

"""Provider independent function-calling contract.

Every provider's options type implements :class:`FunctionCallingOptions` so the chat
client can read the same accessors whatever the provider. Callbacks are opaque handles
owned by the caller; names in ``functions`` are looked up in an external
:class:`FunctionCallbackRegistry` and never owned by the options object.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from ._logging import get_logger
from .exceptions import ChatOptionsInvalidArgumentError

logger = get_logger(__name__)

__all__ = [
    "ChatOptionsCapability",
    "FunctionCallback",
    "FunctionCallbackRegistry",
    "FunctionCallingOptions",
    "resolve_function_callbacks",
]


class ChatOptionsCapability(str, Enum):
    """Features an options type may support.

    The orchestration layer checks ``supports(capability)`` before reading a field,
    rather than treating a ``None`` value as "unsupported".
    """

    MODEL = "model"
    TEMPERATURE = "temperature"
    TOP_P = "top_p"
    TOP_K = "top_k"
    MAX_TOKENS = "max_tokens"
    STOP_SEQUENCES = "stop_sequences"
    FREQUENCY_PENALTY = "frequency_penalty"
    PRESENCE_PENALTY = "presence_penalty"
    SEED = "seed"
    RESPONSE_FORMAT = "response_format"
    FUNCTION_CALLING = "function_calling"
    TOOL_CHOICE = "tool_choice"
    PROXY_TOOL_CALLS = "proxy_tool_calls"
    TOOL_CONTEXT = "tool_context"


@runtime_checkable
class FunctionCallback(Protocol):
    """A local function the chat client may invoke on behalf of the model."""

    @property
    def name(self) -> str:
        """The name of the function, as offered to the model."""
        ...

    @property
    def description(self) -> str:
        """A description of the function, suitable for use in describing the purpose to a model."""
        ...

    @property
    def input_type_schema(self) -> str:
        """The JSON schema of the function input."""
        ...

    def call(self, function_input: str, tool_context: Mapping[str, Any] | None = None) -> str:
        """Invoke the function with the model generated JSON arguments."""
        ...


@runtime_checkable
class FunctionCallbackRegistry(Protocol):
    """Resolves function names to callbacks registered elsewhere."""

    def resolve(self, name: str) -> FunctionCallback | None:
        """Return the callback registered under ``name``, or ``None`` if there is none."""
        ...


@runtime_checkable
class FunctionCallingOptions(Protocol):
    """Chat options that can drive function calling.

    Providers that do not support a sampling control still expose its accessor and
    return ``None``.
    """

    @property
    def model(self) -> str | None: ...

    @property
    def temperature(self) -> float | None: ...

    @property
    def top_p(self) -> float | None: ...

    @property
    def max_tokens(self) -> int | None: ...

    @property
    def stop_sequences(self) -> list[str] | None: ...

    @property
    def frequency_penalty(self) -> float | None: ...

    @property
    def presence_penalty(self) -> float | None: ...

    @property
    def top_k(self) -> int | None: ...

    @property
    def function_callbacks(self) -> list[FunctionCallback]: ...

    @property
    def functions(self) -> set[str]: ...

    @property
    def proxy_tool_calls(self) -> bool | None: ...

    @property
    def tool_context(self) -> dict[str, Any] | None: ...

    def supports(self, capability: ChatOptionsCapability) -> bool: ...

    def copy(self) -> "FunctionCallingOptions": ...


def resolve_function_callbacks(
    options: FunctionCallingOptions, registry: FunctionCallbackRegistry | None = None
) -> list[FunctionCallback]:
    """Collect the callbacks that are active for a single call.

    The callbacks set directly on the options come first, followed by the registry
    callbacks for each enabled function name, in name order. Names already provided by
    a direct callback are not looked up.

    Args:
        options: The options for the call.
        registry: The registry used to resolve ``options.functions``.

    Returns:
        The active callbacks.

    Raises:
        ChatOptionsInvalidArgumentError: If an enabled name cannot be resolved.
    """
    active = list(options.function_callbacks)
    provided = {callback.name for callback in active}
    for name in sorted(options.functions):
        if name in provided:
            continue
        callback = registry.resolve(name) if registry is not None else None
        if callback is None:
            raise ChatOptionsInvalidArgumentError(f"No function callback found for name: {name}")
        active.append(callback)
        provided.add(name)
    logger.debug("Resolved %d active function callbacks", len(active))
    return active
