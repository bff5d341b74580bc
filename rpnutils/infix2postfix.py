import logging
from typing import Optional

import regex as re

from .errors import MalformedExpression
from .postfix2infix import format_postfix
from .tokens import WHITESPACE, GroupOpen, Number, Token, classify_symbol, priority

logger = logging.getLogger(__name__)

_DIGIT_PATTERN = re.compile(r"[0-9]")


class Converter:
    """
    Shunting-yard converter from infix arithmetic to RPN token order.

    The RPN buffer of the last parse is kept on ``tokens``.
    """

    def __init__(self, expression: Optional[str] = None):
        self.buffer: list[Token] = []
        self.tokens: tuple[Token, ...] = ()
        if expression is not None:
            self.parse(expression)

    @staticmethod
    def _flush_digits(digits: list[str], output: list[Token]) -> None:
        if digits:
            output.append(Number(int("".join(digits))))
            digits.clear()

    def parse(self, expression: str) -> tuple[Token, ...]:
        """
        Convert an infix expression to RPN order.

        Args:
            expression: Input infix expression.

        Returns:
            The RPN token sequence.

        Raises:
            MalformedExpression: If the parentheses are unbalanced. ``buffer``
                and ``tokens`` keep the previous result.
        """
        output: list[Token] = []
        stack: list[Token] = []
        digits: list[str] = []
        group_starts: list[int] = []

        for i, char in enumerate(expression):
            if char in WHITESPACE:
                continue

            if _DIGIT_PATTERN.fullmatch(char):
                digits.append(char)
                continue

            self._flush_digits(digits, output)

            if char == ")":
                while stack and not isinstance(stack[-1], GroupOpen):
                    output.append(stack.pop())
                if not stack:
                    raise MalformedExpression("Unmatched ')'", i)
                # drop '('
                stack.pop()
                group_starts.pop()
            elif char == "(":
                stack.append(GroupOpen())
                group_starts.append(i)
            else:
                token = classify_symbol(char)
                # '(' is only ever removed by its ')'
                while (
                    stack
                    and not isinstance(stack[-1], GroupOpen)
                    and priority(stack[-1]) >= priority(token)
                ):
                    output.append(stack.pop())
                stack.append(token)

        self._flush_digits(digits, output)

        while stack:
            token = stack.pop()
            if isinstance(token, GroupOpen):
                raise MalformedExpression("Unmatched '('", group_starts[-1])
            output.append(token)

        self.buffer = output
        self.tokens = tuple(output)
        logger.debug("Converted %r to %s", expression, format_postfix(self.tokens))
        return self.tokens


def convert(expression: str) -> tuple[Token, ...]:
    """
    Convert an infix expression to an RPN token sequence.
    """
    return Converter().parse(expression)


def infix2postfix(expression: str) -> str:
    R"""
    Convert an infix expression to space separated RPN text.

    Args:
        expression: Input infix expression, e.g. ``"2 + 3 * 4"``.

    Returns:
        Converted postfix text, e.g. ``"2 3 4 * +"``.

    Raises:
        MalformedExpression: If the parentheses are unbalanced.
    """
    return format_postfix(convert(expression))
