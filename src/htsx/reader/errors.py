"""Reader error types."""


class ReadError(Exception):
    """Raised when s-expression source cannot be read.

    ``str()`` is ``"line:column: message"`` when the position is known and the
    bare message otherwise; the bare text stays available as ``message``.
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.message = message
        self.line = line
        self.column = column
        location = self.location
        super().__init__(f"{location}: {message}" if location else message)

    @property
    def location(self) -> str:
        """``line:column`` when known, otherwise an empty string."""
        if self.line is None:
            return ""
        if self.column is None:
            return str(self.line)
        return f"{self.line}:{self.column}"
