"""
Exceptions raised while translating a class component into an options object.

Every error here is a precondition violation: the transformation of the current
source unit is aborted and the unit is left untouched.
"""

import os
from typing import Any, Optional


class TranslationError(Exception):
    """Exception raised when a component declaration cannot be translated.

    The error carries the model node it was raised for. When that node knows
    which file and line it came from, the location is appended to the message.

    Examples:
        >>> raise TranslationError("Found an illegal computed setter without a getter.")
        TranslationError: Found an illegal computed setter without a getter.
    """

    def __init__(self, message: str, node: Optional[Any] = None):
        """Initialize the exception with a message and optional model node.

        Args:
            message: The error message
            node: Optional model node where the error occurred
        """
        self.message = message
        self.node = node
        self.file_path = getattr(node, "source_file", None) if node else None
        self.lineno = getattr(node, "lineno", None) if node else None

        location_info = ""
        if self.file_path:
            location_info = f" in {os.path.basename(self.file_path)}"
            if self.lineno:
                location_info += f" at line {self.lineno}"
        elif self.lineno:
            location_info = f" at line {self.lineno}"

        super().__init__(f"{message}{location_info}")

    def with_node(self, node: Any) -> "TranslationError":
        """Create a new TranslationError with the same message but a different node.

        Args:
            node: Model node to associate with the error

        Returns:
            A new TranslationError instance with the updated node
        """
        return TranslationError(self.message, node)
