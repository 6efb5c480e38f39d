"""
Error handling for the expression printer.

Author: lox-frontend contributors
"""


class FormatError(Exception):
    """
    Raised when the printer's output sink fails to accept text.

    Never raised because of a tree's shape; the sink's own exception is
    chained as ``__cause__``.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
