import logging
from collections.abc import Iterable
from enum import StrEnum
from typing import Optional, Union

from .errors import DivisionByZero, MalformedExpression, UnrecognizedToken
from .infix2postfix import convert
from .postfix2infix import parse_postfix
from .tokens import GroupOpen, Number, Operator, OperatorSymbol, Token, Unknown

logger = logging.getLogger(__name__)


class UnknownTokenPolicy(StrEnum):
    """
    What the evaluator does with tokens it cannot apply.

    Attributes:
        RAISE: Fail with UnrecognizedToken. (default)
        SKIP: Log a warning and ignore the token.
    """

    RAISE = "raise"
    SKIP = "skip"


def _truncating_div(b: int, a: int) -> int:
    q = abs(b) // abs(a)
    return q if (b < 0) == (a < 0) else -q


def _truncating_mod(b: int, a: int) -> int:
    return b - a * _truncating_div(b, a)


def apply_operator(
    symbol: OperatorSymbol, b: int, a: int, position: Optional[int] = None
) -> int:
    """
    Compute ``b <symbol> a``. ``a`` is the value that was on top of the stack.
    """
    if symbol == OperatorSymbol.ADD:
        return b + a
    if symbol == OperatorSymbol.SUB:
        return b - a
    if symbol == OperatorSymbol.MUL:
        return b * a
    if a == 0:
        if symbol == OperatorSymbol.DIV:
            raise DivisionByZero("division by zero.", position, "token")
        raise DivisionByZero(
            "calculated the remainder with zero.", position, "token"
        )
    if symbol == OperatorSymbol.DIV:
        return _truncating_div(b, a)
    return _truncating_mod(b, a)


class Evaluator:
    """Stack machine over an RPN token sequence."""

    def __init__(self, policy: UnknownTokenPolicy = UnknownTokenPolicy.RAISE):
        self.policy = UnknownTokenPolicy(policy)

    def eval(self, tokens: Union[str, Iterable[Token]]) -> int:
        """
        Evaluate an RPN sequence.

        Args:
            tokens: RPN tokens, or RPN text such as ``"2 3 +"``.

        Returns:
            The single value left on the stack.

        Raises:
            MalformedExpression: On operand underflow or if the stack does not end
                with exactly one value.
            DivisionByZero: If ``/`` or ``%`` has a zero right-hand side.
            UnrecognizedToken: On an unknown token under the RAISE policy.
        """
        if isinstance(tokens, str):
            tokens = parse_postfix(tokens)

        stack: list[int] = []
        for i, token in enumerate(tokens):
            if isinstance(token, Number):
                stack.append(token.value)
            elif isinstance(token, Operator):
                if len(stack) < 2:
                    raise MalformedExpression(
                        f"Stack underflow for operator '{token}'. Need 2, have {len(stack)}.",
                        i,
                        "token",
                    )
                a = stack.pop()
                b = stack.pop()
                stack.append(apply_operator(token.symbol, b, a, i))
            elif isinstance(token, GroupOpen):
                raise MalformedExpression(
                    "Group marker '(' in RPN sequence.", i, "token"
                )
            elif isinstance(token, Unknown):
                if self.policy == UnknownTokenPolicy.RAISE:
                    raise UnrecognizedToken(
                        f"Invalid or unknown token: '{token}'", i, "token"
                    )
                logger.warning("Skipping unknown token '%s' at token %d", token, i)
            else:
                raise TypeError(f"Not an RPN token: {token!r}")

        if len(stack) != 1:
            raise MalformedExpression(
                f"Stack must have exactly 1 value at the end, but has {len(stack)}. Leftovers: {stack}"
            )
        result = stack.pop()
        logger.debug("Evaluated RPN sequence to %d", result)
        return result


def evaluate(
    tokens: Union[str, Iterable[Token]],
    policy: UnknownTokenPolicy = UnknownTokenPolicy.RAISE,
) -> int:
    """
    Evaluate an RPN token sequence or RPN text to an integer.
    """
    return Evaluator(policy).eval(tokens)


def calculate(
    expression: str, policy: UnknownTokenPolicy = UnknownTokenPolicy.RAISE
) -> int:
    """
    Convert an infix expression to RPN and evaluate it.

    >>> calculate("(2 + 3) * 4")
    20
    """
    return evaluate(convert(expression), policy)
