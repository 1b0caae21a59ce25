class TrimMarginError(Exception):
    pass


class InvalidMarker(TrimMarginError, ValueError):
    def __init__(self, marker):
        self.marker = marker
        super().__init__("Margin marker must be a single character, got %r" % (marker,))


class MarginNotFound(TrimMarginError, ValueError):
    """Raised in strict mode for a line that doesn't start with a margin."""

    def __init__(self, line: str, lineno: int, marker: str):
        self.line = line
        self.lineno = lineno
        self.marker = marker
        super().__init__(
            "Line %d has no %r margin: %r" % (lineno, marker, line)
        )
