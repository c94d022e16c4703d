"""
Failure kinds raised by the practice logger.
Callers branch on the class, never on the message.
"""

from pathlib import Path
from typing import Optional


class GrindsetError(Exception):
    """Base for every failure that aborts a practice session."""


class InvalidInput(GrindsetError):
    pass


class EmptyLanguageCode(InvalidInput):
    def __init__(self):
        super().__init__("Language code is empty after trimming")


class UnsupportedLanguage(InvalidInput):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unsupported file extension: {token}")


class RemoteTransportFailure(GrindsetError):
    pass


class RemoteDecodeFailure(GrindsetError):
    pass


class ConversionFailure(GrindsetError):
    def __init__(self, message: str, stderr: str = ""):
        self.stderr = stderr
        super().__init__(message)


class FilesystemFailure(GrindsetError):
    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)


class ConverterUnavailable(GrindsetError):
    """The external converter is missing; raised once at startup."""
