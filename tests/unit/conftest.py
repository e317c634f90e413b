# Copyright (c) Microsoft. All rights reserved.
from collections.abc import Callable, Mapping
from typing import Any

from pytest import fixture

from mistral_chat_options import FunctionCallback, MistralAiChatOptions, MistralAiChatOptionsBuilder


class EchoFunctionCallback:
    """Function callback returning its input unchanged."""

    def __init__(self, name: str, description: str = "Echo the input.") -> None:
        self.name = name
        self.description = description
        self.input_type_schema = '{"type": "object", "properties": {"text": {"type": "string"}}}'

    def call(self, function_input: str, tool_context: Mapping[str, Any] | None = None) -> str:
        return function_input


class DictFunctionCallbackRegistry:
    """Registry resolving callbacks from a plain dict."""

    def __init__(self, callbacks: dict[str, FunctionCallback]) -> None:
        self.callbacks = callbacks

    def resolve(self, name: str) -> FunctionCallback | None:
        return self.callbacks.get(name)


@fixture
def make_callback() -> Callable[..., EchoFunctionCallback]:
    """Fixture returning a factory of echo callbacks."""
    return EchoFunctionCallback


@fixture
def weather_callback() -> EchoFunctionCallback:
    return EchoFunctionCallback("current_weather", "Get the current weather in a location.")


@fixture
def registry(weather_callback: EchoFunctionCallback) -> DictFunctionCallbackRegistry:
    return DictFunctionCallbackRegistry({
        "current_weather": weather_callback,
        "payment_status": EchoFunctionCallback("payment_status", "Get the status of a payment."),
    })


@fixture
def builder() -> MistralAiChatOptionsBuilder:
    return MistralAiChatOptions.builder()
