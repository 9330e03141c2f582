"""
Exceptions raised by rationals and the expression evaluator.
"""


class CalculatorError(Exception):
    """Base class for all ratcalc errors."""


class InvalidArgument(CalculatorError, TypeError):
    pass


class DivisionByZero(CalculatorError, ZeroDivisionError):
    pass


class ParseError(CalculatorError, ValueError):
    def __init__(self, token, message=None):
        self.token = token
        super().__init__(message or 'bad token: {!r}'.format(token))


class MalformedExpression(CalculatorError, ValueError):
    def __init__(self, message, position=None):
        # position: index of the offending token, None if the whole sequence is to blame
        self.position = position
        if position is not None:
            message = '{} (token #{})'.format(message, position)
        super().__init__(message)


class DigitLimitExceeded(CalculatorError, ValueError):
    # raised when an integer is too long for decimal text under sys.get_int_max_str_digits()
    pass
