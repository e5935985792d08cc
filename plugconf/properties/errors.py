from __future__ import annotations


class PropertiesFormatError(ValueError):
    """Raised by the parser for malformed escapes."""

    def __init__(self, message: str, line: int = 0):
        self.line = line
        prefix = f"line {line}: " if line else ""
        super().__init__(prefix + message)


class SourceReadError(Exception):
    """A single property source could not be opened or parsed."""

    def __init__(self, location: str, cause: BaseException):
        self.location = location
        self.cause = cause
        super().__init__(f"Failed to read {location}: {cause}")
