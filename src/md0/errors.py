"""Exception classes for md0.

Malformed Markdown is never an error: the tokenizer accepts every string.
These exceptions cover misuse of the library surface only.
"""

from __future__ import annotations


class Md0Error(Exception):
    """Base exception for all md0 errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(Md0Error):
    """Error during HTML rendering.

    Raised when the renderer is handed an object that is not one of the
    block token variants.
    """

    def __init__(self, value: object, index: int | None = None) -> None:
        """Initialize render error.

        Args:
            value: The offending object
            index: Position of the object in the token sequence (optional)
        """
        self.value = value
        self.index = index

        location = f" at index {index}" if index is not None else ""
        super().__init__(f"Cannot render {type(value).__name__}{location}: not a token")


class ConfigError(Md0Error):
    """Error in parse configuration.

    Raised when a configuration field receives a value of the wrong type.
    """

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending ParseConfig field
            message: Description of the problem
        """
        self.field_name = field_name
        super().__init__(f"Config field '{field_name}': {message}")
