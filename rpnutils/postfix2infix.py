from collections.abc import Iterable
from typing import Union

import regex as re

from .errors import MalformedExpression, UnrecognizedToken
from .tokens import (
    GroupOpen,
    Number,
    Operator,
    OperatorSymbol,
    Token,
    Unknown,
    classify_symbol,
)

OPERATORS = {
    OperatorSymbol.ADD: "({0} + {1})",
    OperatorSymbol.SUB: "({0} - {1})",
    OperatorSymbol.MUL: "({0} * {1})",
    OperatorSymbol.DIV: "({0} / {1})",
    OperatorSymbol.MOD: "({0} % {1})",
}

RE_NUMBER = re.compile(r"^[0-9]+$")


def tokenize(expr: str) -> list[str]:
    return expr.split()


def parse_postfix(expr: str) -> tuple[Token, ...]:
    """
    Parse space separated RPN text into tokens.

    Raises:
        UnrecognizedToken: If a word is neither a number nor a single character.
    """
    tokens: list[Token] = []
    for i, word in enumerate(tokenize(expr)):
        if RE_NUMBER.match(word):
            tokens.append(Number(int(word)))
        elif len(word) == 1 and word not in "()":
            tokens.append(classify_symbol(word))
        else:
            raise UnrecognizedToken(
                f"Invalid or unknown token: '{word}'", i, "token"
            )
    return tuple(tokens)


def format_postfix(tokens: Iterable[Token]) -> str:
    return " ".join(str(token) for token in tokens)


def postfix2infix(expr: Union[str, Iterable[Token]]) -> str:
    """
    Converts an RPN expression to a fully parenthesized infix string.

    Args:
        expr: The RPN expression, as text or as a token sequence.

    Returns:
        The equivalent infix expression.

    Raises:
        MalformedExpression: If the stack underflows or does not end with one value.
        UnrecognizedToken: If the expression holds an unknown token.
        TypeError: If an element is not a token.
    """
    tokens = parse_postfix(expr) if isinstance(expr, str) else tuple(expr)
    stack: list[str] = []

    for i, token in enumerate(tokens):
        if isinstance(token, Number):
            stack.append(str(token.value))
            continue

        if isinstance(token, Operator):
            if len(stack) < 2:
                raise MalformedExpression(
                    f"Stack underflow for operator '{token}'. Need 2, have {len(stack)}.",
                    i,
                    "token",
                )
            right = stack.pop()
            left = stack.pop()
            stack.append(OPERATORS[token.symbol].format(left, right))
            continue

        if isinstance(token, GroupOpen):
            raise MalformedExpression("Group marker '(' in RPN sequence.", i, "token")

        if isinstance(token, Unknown):
            raise UnrecognizedToken(
                f"Invalid or unknown token: '{token}'", i, "token"
            )

        raise TypeError(f"Not an RPN token: {token!r}")

    if len(stack) != 1:
        raise MalformedExpression(
            f"Stack must have exactly 1 value at the end, but has {len(stack)}. Leftovers: {stack}"
        )
    return stack.pop()
