"""Error types raised while parsing and scoping stylesheets."""


class ParseError(Exception):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class SelectorError(ValueError):
    """Raised when a selector string cannot be tokenized."""


class LocalizeError(ValueError):
    """Raised by the localization engine on misplaced :local/:global markers."""


class ScopeError(Exception):
    """A fatal error of a scoping pass, attached to the offending rule."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.reason = message
        self.line = line
        self.column = column
        if line is not None:
            message = f"{line}:{column}: {message}"
        super().__init__(message)
