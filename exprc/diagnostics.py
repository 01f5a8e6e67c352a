class ExprSyntaxError(SyntaxError):
    """The one error the pipeline raises: a position in the source plus a message.

    The built-in ``offset`` and ``text`` fields are filled in too, so the
    error still looks like a regular SyntaxError to anything else that
    handles it.
    """

    def __init__(self, pos, message, source=None):
        super().__init__(message, ("<expr>", 1, pos + 1, source))
        self.pos = pos
        self.message = message
        self.source = source

    def __str__(self):
        return f"{self.message} (column {self.pos})"


def error_at(source, pos, message):
    raise ExprSyntaxError(pos, message, source)


def render(error):
    # source line, then a caret under the failing column
    source = error.source if error.source is not None else ""
    return f"{source}\n{' ' * error.pos}^ {error.message}"
