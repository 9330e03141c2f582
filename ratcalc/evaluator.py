"""
This module provides evaluation of infix expressions over rationals.

Expression is a sequence of tokens that alternates operands ("n/d") and
binary operators (+, -, *, /), e.g., ["1/2", "*", "2/3", "+", "3/4"].
Multiplication and division bind tighter than addition and subtraction,
operators of equal priority associate to the left.
"""

import logging
from typing import Iterable

from .rational import Rational
from .errors import MalformedExpression


logger = logging.getLogger(__name__)


OPERATIONS = {
    '+': Rational.add,
    '-': Rational.subtract,
    '*': Rational.multiply,
    '/': Rational.divide,
}

_PRIORITY = {'+': 1, '-': 1, '*': 2, '/': 2}


def get_priority(op: str) -> int:
    """Operator priority; unknown tokens get the lowest priority 0."""
    return _PRIORITY.get(op, 0)


def split_expression(text: str) -> list[str]:
    """Split whitespace-separated expression, e.g., "1/2 * 2/3"."""
    return text.split()


def _fold(operands: list[Rational], operators: list[str]) -> None:
    # pop one operator and two operands, push the result; right operand is on top
    op = operators.pop()
    if len(operands) < 2:
        raise MalformedExpression("operator {!r} lacks operands".format(op))
    rhs = operands.pop()
    lhs = operands.pop()
    result = OPERATIONS[op](lhs, rhs)
    logger.debug('fold: %s %s %s = %s', lhs, op, rhs, result)
    operands.append(result)


def evaluate(tokens: Iterable[str]) -> Rational:
    """
    Evaluate infix expression given as tokens.

    Two stacks are used: operands and pending operators. Before an operator is pushed,
    all pending operators with priority >= its own are folded; that gives left
    associativity for equal priorities. Remaining operators are folded at the end.

    Raises:
        ParseError: token is neither an operand nor a known operator
        MalformedExpression: empty input, broken operand/operator alternation
        DivisionByZero: from rational arithmetic, or an "n/0" operand
    """
    operands: list[Rational] = []
    operators: list[str] = []
    expect_operand = True
    position = -1

    for position, token in enumerate(tokens):
        if isinstance(token, str) and token in OPERATIONS:
            if expect_operand:
                raise MalformedExpression("operand expected, got {!r}".format(token), position)
            while operators and get_priority(operators[-1]) >= get_priority(token):
                _fold(operands, operators)
            operators.append(token)
            logger.debug('push operator %r', token)
            expect_operand = True
        else:
            number = Rational.parse(token)
            if not expect_operand:
                raise MalformedExpression("operator expected, got {!r}".format(token), position)
            operands.append(number)
            expect_operand = False

    if position < 0:
        raise MalformedExpression("empty expression")
    if expect_operand:
        raise MalformedExpression("expression ends with operator", position)

    while operators:
        _fold(operands, operators)

    if len(operands) != 1:
        raise MalformedExpression("{} operands left after reduction".format(len(operands)))
    result = operands[0]
    logger.info('evaluated %d tokens: %s', position + 1, result)
    return result


class Calculator:
    """
    Stateless facade over rational arithmetic and expression evaluation.

    Holds no data, so instances may be created per use or shared freely.
    """

    @staticmethod
    def add(lhs: Rational, rhs: Rational) -> Rational:
        return lhs.add(rhs)

    @staticmethod
    def subtract(lhs: Rational, rhs: Rational) -> Rational:
        return lhs.subtract(rhs)

    @staticmethod
    def multiply(lhs: Rational, rhs: Rational) -> Rational:
        return lhs.multiply(rhs)

    @staticmethod
    def divide(lhs: Rational, rhs: Rational) -> Rational:
        return lhs.divide(rhs)

    @staticmethod
    def evaluate(tokens: Iterable[str]) -> Rational:
        return evaluate(tokens)
