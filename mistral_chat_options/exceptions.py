# Copyright (c) Microsoft. All rights reserved.


class ChatOptionsException(Exception):
    """Base class for exceptions in the chat options library."""

    pass


class ChatOptionsInvalidArgumentError(ChatOptionsException):
    """An invalid argument was passed to a chat options setter or builder method."""

    pass


class ChatOptionsSettingsError(ChatOptionsException):
    """The chat options settings could not be loaded."""

    pass
