"""
Copyright (C) 2025 yuygfgg

This file is part of rpnutils.

rpnutils is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

rpnutils is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with rpnutils.  If not, see <https://www.gnu.org/licenses/>.
"""

from .errors import DivisionByZero, MalformedExpression, RPNError, UnrecognizedToken
from .evaluator import Evaluator, UnknownTokenPolicy, calculate, evaluate
from .infix2postfix import Converter, convert, infix2postfix
from .postfix2infix import format_postfix, parse_postfix, postfix2infix
from .tokens import GroupOpen, Number, Operator, OperatorSymbol, Token, Unknown

__version__ = "0.0.1"

__all__ = [
    "convert",
    "evaluate",
    "calculate",
    "infix2postfix",
    "postfix2infix",
    "parse_postfix",
    "format_postfix",
    "Converter",
    "Evaluator",
    "UnknownTokenPolicy",
    "Token",
    "Number",
    "Operator",
    "OperatorSymbol",
    "GroupOpen",
    "Unknown",
    "RPNError",
    "MalformedExpression",
    "DivisionByZero",
    "UnrecognizedToken",
]
