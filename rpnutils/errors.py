from typing import Optional


class RPNError(Exception):
    """
    Base error with optional position information.

    ``label`` names what ``position`` counts: "position" for a character
    index in infix input, "token" for an index into an RPN sequence.
    """

    def __init__(
        self, message: str, position: Optional[int] = None, label: str = "position"
    ):
        self.position = position
        self.label = label
        if position is not None:
            super().__init__(f"At {label} {position}: {message}")
        else:
            super().__init__(message)


class MalformedExpression(RPNError):
    pass


class DivisionByZero(RPNError, ZeroDivisionError):
    pass


class UnrecognizedToken(RPNError):
    pass
