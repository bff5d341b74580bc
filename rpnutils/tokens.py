from dataclasses import dataclass
from enum import StrEnum
from typing import Union


class OperatorSymbol(StrEnum):
    """
    Binary operators understood by the evaluator.

    Attributes:
        ADD: Addition.
        SUB: Subtraction.
        MUL: Multiplication.
        DIV: Integer division, truncating toward zero.
        MOD: Remainder, with the sign of the dividend.
    """

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"


@dataclass(frozen=True)
class Number:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Operator:
    symbol: OperatorSymbol

    def __str__(self) -> str:
        return str(self.symbol)


@dataclass(frozen=True)
class GroupOpen:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class Unknown:
    """A character that is neither a digit, a parenthesis nor an operator."""

    char: str

    def __str__(self) -> str:
        return self.char


Token = Union[Number, Operator, GroupOpen, Unknown]

PRIORITIES: dict[OperatorSymbol, int] = {
    OperatorSymbol.MUL: 100,
    OperatorSymbol.DIV: 100,
    OperatorSymbol.MOD: 100,
    OperatorSymbol.ADD: 10,
    OperatorSymbol.SUB: 10,
}
DEFAULT_PRIORITY = 1

WHITESPACE = frozenset(" \t\n\r")


def priority(token: Token) -> int:
    """
    Return the binding priority of a token on the operator stack.
    Group markers and unknown characters always yield to real operators.
    """
    if isinstance(token, Operator):
        return PRIORITIES[token.symbol]
    return DEFAULT_PRIORITY


def classify_symbol(char: str) -> Token:
    """
    Classify a single non-digit, non-whitespace, non-parenthesis character.
    """
    try:
        return Operator(OperatorSymbol(char))
    except ValueError:
        return Unknown(char)
