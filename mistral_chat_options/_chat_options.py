# Copyright (c) Microsoft. All rights reserved.

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Annotated, Any, ClassVar

from pydantic import Field, ValidationInfo, field_validator

from ._function_calling import ChatOptionsCapability, FunctionCallback
from ._logging import get_logger
from ._pydantic import MistralBaseModel
from ._types import FunctionTool, MistralAiChatModel, ResponseFormat, SpecificToolChoice, ToolChoice
from .exceptions import ChatOptionsInvalidArgumentError
from .hashing import make_hashable

logger = get_logger(__name__)

__all__ = ["MistralAiChatOptions", "MistralAiChatOptionsBuilder"]

_LOCAL_ONLY_FIELDS = {"function_callbacks", "functions", "proxy_tool_calls", "tool_context"}


class MistralAiChatOptions(MistralBaseModel):
    """Options for the Mistral AI Chat API.

    Every field is optional, ``None`` means the service default is used. The fields
    ``function_callbacks``, ``functions``, ``proxy_tool_calls`` and ``tool_context`` are
    consumed locally by the chat client and never sent to the service.

    Instances are mutable and not synchronized. Take one instance per call, through
    :meth:`copy` or a fresh :meth:`builder`, instead of sharing one across calls.

    Examples:
        .. code-block:: python

            options = (
                MistralAiChatOptions.builder()
                .model(MistralAiChatModel.SMALL)
                .temperature(0.2)
                .function("current_weather")
                .build()
            )
    """

    supported_capabilities: ClassVar[frozenset[ChatOptionsCapability]] = frozenset({
        ChatOptionsCapability.MODEL,
        ChatOptionsCapability.TEMPERATURE,
        ChatOptionsCapability.TOP_P,
        ChatOptionsCapability.MAX_TOKENS,
        ChatOptionsCapability.STOP_SEQUENCES,
        ChatOptionsCapability.SEED,
        ChatOptionsCapability.RESPONSE_FORMAT,
        ChatOptionsCapability.FUNCTION_CALLING,
        ChatOptionsCapability.TOOL_CHOICE,
        ChatOptionsCapability.PROXY_TOOL_CALLS,
        ChatOptionsCapability.TOOL_CONTEXT,
    })

    model: str | None = None
    """ID of the model to use."""
    temperature: float | None = None
    """What sampling temperature to use. Higher values make the output more random, lower
    values make it more focused and deterministic. Alter this or ``top_p`` but not both."""
    top_p: float | None = None
    """Nucleus sampling, the model considers the tokens comprising the ``top_p`` probability mass."""
    max_tokens: int | None = None
    """The maximum number of tokens to generate in the completion."""
    safe_prompt: bool | None = None
    """Whether to inject a safety prompt before all conversations."""
    random_seed: int | None = None
    """The seed to use for random sampling. If set, different calls will generate deterministic results."""
    response_format: ResponseFormat | None = None
    """An object specifying the format that the model must output."""
    stop: list[str] | None = None
    """Stop generation if one of these tokens is detected."""
    tools: list[FunctionTool] | None = None
    """A list of tools the model may call."""
    tool_choice: ToolChoice | SpecificToolChoice | None = None
    """Controls which (if any) function is called by the model."""
    function_callbacks: Annotated[list[FunctionCallback], Field(exclude=True)] = Field(default_factory=list)
    """Callbacks to register with the chat client. Callbacks set on per-call options are
    enabled for the duration of that call. The callbacks are owned by the caller."""
    functions: Annotated[set[str], Field(exclude=True)] = Field(default_factory=set)
    """Names of functions from the callback registry to enable for the call."""
    proxy_tool_calls: Annotated[bool | None, Field(exclude=True)] = None
    """If true, tool calls are returned to the caller instead of being executed by the chat client."""
    tool_context: Annotated[dict[str, Any] | None, Field(exclude=True)] = None
    """Auxiliary data passed to the function callbacks, never visible to the model."""

    @field_validator("function_callbacks", "functions", mode="before")
    @classmethod
    def _reject_none(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise ChatOptionsInvalidArgumentError(f"{info.field_name} must not be None")
        return value

    @classmethod
    def builder(cls) -> MistralAiChatOptionsBuilder:
        return MistralAiChatOptionsBuilder()

    @classmethod
    def from_options(cls, from_options: MistralAiChatOptions) -> MistralAiChatOptions:
        """Create new options with the same values as ``from_options``.

        Collections are copied into new containers by the builder, their elements
        (tool definitions, callback handles, context values) are shared.
        """
        return (
            cls.builder()
            .model(from_options.model)
            .max_tokens(from_options.max_tokens)
            .safe_prompt(from_options.safe_prompt)
            .random_seed(from_options.random_seed)
            .temperature(from_options.temperature)
            .top_p(from_options.top_p)
            .response_format(from_options.response_format)
            .stop(from_options.stop)
            .tools(from_options.tools)
            .tool_choice(from_options.tool_choice)
            .function_callbacks(from_options.function_callbacks)
            .functions(from_options.functions)
            .proxy_tool_calls(from_options.proxy_tool_calls)
            .tool_context(from_options.tool_context)
            .build()
        )

    def copy(self) -> MistralAiChatOptions:  # type: ignore[override]
        """Return an independent copy of these options."""
        return self.from_options(self)

    @property
    def stop_sequences(self) -> list[str] | None:
        """Alias of ``stop`` used by the provider independent contract."""
        return self.stop

    @stop_sequences.setter
    def stop_sequences(self, stop_sequences: list[str] | None) -> None:
        self.stop = stop_sequences

    @property
    def frequency_penalty(self) -> float | None:
        """Not supported by Mistral AI, always ``None``."""
        return None

    @property
    def presence_penalty(self) -> float | None:
        """Not supported by Mistral AI, always ``None``."""
        return None

    @property
    def top_k(self) -> int | None:
        """Not supported by Mistral AI, always ``None``."""
        return None

    @classmethod
    def supports(cls, capability: ChatOptionsCapability) -> bool:
        return capability in cls.supported_capabilities

    def prepare_settings_dict(self) -> dict[str, Any]:
        """Prepare the options as a dictionary for the chat completion request.

        Fields that are ``None`` are omitted, as are the local only function calling fields.
        """
        settings = self.model_dump(mode="json", exclude=_LOCAL_ONLY_FIELDS, exclude_none=True)
        logger.debug("Prepared chat options with keys: %s", sorted(settings))
        return settings

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return False
        return all(getattr(self, name) == getattr(other, name) for name in type(self).model_fields)

    def __hash__(self) -> int:
        """Return the hash of the current option values."""
        return hash(tuple(make_hashable(getattr(self, name)) for name in type(self).model_fields))


class MistralAiChatOptionsBuilder:
    """Fluent builder for :class:`MistralAiChatOptions`.

    Every collection handed to the builder is copied, so later changes to the caller's
    list, set or dict do not leak into the options. ``build`` returns a snapshot, the
    builder can keep being used afterwards.
    """

    def __init__(self) -> None:
        self._options = MistralAiChatOptions()

    def model(self, model: str | MistralAiChatModel | None) -> MistralAiChatOptionsBuilder:
        if isinstance(model, MistralAiChatModel):
            model = model.model_name
        self._options.model = model
        return self

    def max_tokens(self, max_tokens: int | None) -> MistralAiChatOptionsBuilder:
        self._options.max_tokens = max_tokens
        return self

    def safe_prompt(self, safe_prompt: bool | None) -> MistralAiChatOptionsBuilder:
        self._options.safe_prompt = safe_prompt
        return self

    def random_seed(self, random_seed: int | None) -> MistralAiChatOptionsBuilder:
        self._options.random_seed = random_seed
        return self

    def stop(self, stop: Iterable[str] | None) -> MistralAiChatOptionsBuilder:
        self._options.stop = list(stop) if stop is not None else None
        return self

    def temperature(self, temperature: float | None) -> MistralAiChatOptionsBuilder:
        self._options.temperature = temperature
        return self

    def top_p(self, top_p: float | None) -> MistralAiChatOptionsBuilder:
        self._options.top_p = top_p
        return self

    def response_format(self, response_format: ResponseFormat | None) -> MistralAiChatOptionsBuilder:
        self._options.response_format = response_format
        return self

    def tools(self, tools: Iterable[FunctionTool] | None) -> MistralAiChatOptionsBuilder:
        self._options.tools = list(tools) if tools is not None else None
        return self

    def tool_choice(self, tool_choice: ToolChoice | SpecificToolChoice | None) -> MistralAiChatOptionsBuilder:
        self._options.tool_choice = tool_choice
        return self

    def function_callbacks(self, function_callbacks: Iterable[FunctionCallback]) -> MistralAiChatOptionsBuilder:
        if function_callbacks is None:
            raise ChatOptionsInvalidArgumentError("function_callbacks must not be None")
        self._options.function_callbacks = list(function_callbacks)
        return self

    def functions(self, function_names: Iterable[str]) -> MistralAiChatOptionsBuilder:
        if function_names is None:
            raise ChatOptionsInvalidArgumentError("Function names must not be None")
        self._options.functions = set(function_names)
        return self

    def function(self, function_name: str) -> MistralAiChatOptionsBuilder:
        if not function_name or not function_name.strip():
            raise ChatOptionsInvalidArgumentError("Function name must not be empty")
        self._options.functions.add(function_name)
        return self

    def proxy_tool_calls(self, proxy_tool_calls: bool | None) -> MistralAiChatOptionsBuilder:
        self._options.proxy_tool_calls = proxy_tool_calls
        return self

    def tool_context(self, tool_context: Mapping[str, Any] | None) -> MistralAiChatOptionsBuilder:
        """Merge ``tool_context`` into the context set so far, new keys win."""
        if tool_context is None:
            return self
        if self._options.tool_context is None:
            self._options.tool_context = dict(tool_context)
        else:
            logger.debug("Merging %d entries into the existing tool context", len(tool_context))
            self._options.tool_context.update(tool_context)
        return self

    def build(self) -> MistralAiChatOptions:
        options = self._options
        return MistralAiChatOptions(
            model=options.model,
            temperature=options.temperature,
            top_p=options.top_p,
            max_tokens=options.max_tokens,
            safe_prompt=options.safe_prompt,
            random_seed=options.random_seed,
            response_format=options.response_format,
            stop=list(options.stop) if options.stop is not None else None,
            tools=list(options.tools) if options.tools is not None else None,
            tool_choice=options.tool_choice,
            function_callbacks=list(options.function_callbacks),
            functions=set(options.functions),
            proxy_tool_calls=options.proxy_tool_calls,
            tool_context=dict(options.tool_context) if options.tool_context is not None else None,
        )
