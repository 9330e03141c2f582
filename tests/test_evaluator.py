import unittest
import logging
import sys

from quicktions import Fraction  # type: ignore

from ratcalc.rational import Rational
from ratcalc.evaluator import Calculator, evaluate, get_priority, split_expression
from ratcalc.errors import DivisionByZero, MalformedExpression, ParseError


def fraction_value(tokens):
    # independent check: evaluate with Python's own precedence over quicktions fractions
    code = ' '.join('Fraction({!r})'.format(t) if '/' in t and len(t) > 1 else t for t in tokens)
    return eval(code, {'Fraction': Fraction})


class TestEvaluator(unittest.TestCase):
    def setUp(self):
        logging.basicConfig(level=logging.INFO, stream=sys.stdout)

    def test_priority(self):
        self.assertEqual([get_priority(op) for op in '+-*/'], [1, 1, 2, 2])
        self.assertEqual(get_priority('^'), 0)
        self.assertEqual(get_priority('1/2'), 0)

    def test_evaluate(self):
        configs = [
            {'expr': '1/2 * 2/3 + 3/4 * 1/2', 'result': '17/24'},
            {'expr': '1/1 - 1/2 - 1/4', 'result': '1/4'},
            {'expr': '1/1 / 1/2 / 1/4', 'result': '8/1'},
            {'expr': '1/2 - 1/3 * 3/1', 'result': '-1/2'},
            {'expr': '2/3 / 4/3 * 3/1 - 1/2 + 1/6', 'result': '7/6'},
            {'expr': '-1/2 * -1/2', 'result': '1/4'},
            {'expr': '5/10', 'result': '1/2'},
            {'expr': '1/3 + 1/3 + 1/3', 'result': '1/1'},
            {'expr': '3/4 - 3/4 * 1/1', 'result': '0/1'},
        ]
        for conf in configs:
            tokens = split_expression(conf['expr'])
            result = evaluate(tokens)
            self.assertEqual(str(result), conf['result'])
            self.assertEqual(result.as_fraction(), fraction_value(tokens))

    def test_precedence_by_hand(self):
        tokens = ['1/2', '*', '2/3', '+', '3/4', '*', '1/2']
        expected = Rational(1, 2).multiply(Rational(2, 3)).add(Rational(3, 4).multiply(Rational(1, 2)))
        self.assertEqual(evaluate(tokens), expected)
        self.assertEqual(expected, Rational(17, 24))

    def test_left_associativity(self):
        result = evaluate(['1/1', '-', '1/2', '-', '1/4'])
        self.assertEqual(result, Rational(1, 4))
        self.assertNotEqual(result, Rational(3, 4))

    def test_iterables(self):
        tokens = ('1/2', '+', '1/3')
        self.assertEqual(evaluate(tokens), Rational(5, 6))
        self.assertEqual(evaluate(t for t in tokens), Rational(5, 6))

    def test_malformed(self):
        configs = [
            {'tokens': [], 'position': None},
            {'tokens': ['+', '1/2'], 'position': 0},
            {'tokens': ['1/2', '+'], 'position': 1},
            {'tokens': ['1/2', '1/3'], 'position': 1},
            {'tokens': ['1/2', '1/3', '+'], 'position': 1},
            {'tokens': ['1/2', '+', '*', '1/3'], 'position': 2},
            {'tokens': ['*'], 'position': 0},
        ]
        for conf in configs:
            with self.assertRaises(MalformedExpression) as ctx:
                evaluate(conf['tokens'])
            self.assertEqual(ctx.exception.position, conf['position'])

    def test_parse_error(self):
        for tokens in [['x'], ['1/2', '^', '1/3'], ['1/2', '+', 'one'], ['(', '1/2', ')'], ['1/2', '+', '2']]:
            with self.assertRaises(ParseError):
                evaluate(tokens)

    def test_division_by_zero(self):
        with self.assertRaises(DivisionByZero):
            evaluate(['1/2', '/', '0/3'])
        with self.assertRaises(DivisionByZero):
            evaluate(['1/2', '+', '1/0'])

    def test_calculator(self):
        calc = Calculator()
        a, b = Rational(1, 2), Rational(2, 3)
        self.assertEqual(calc.add(a, b), Rational(7, 6))
        self.assertEqual(calc.subtract(a, b), Rational(-1, 6))
        self.assertEqual(calc.multiply(a, b), Rational(1, 3))
        self.assertEqual(calc.divide(a, b), Rational(3, 4))
        self.assertEqual(Calculator.evaluate(['1/2', '*', '2/3']), Rational(1, 3))
        self.assertEqual(vars(calc), {})

    def test_operand_over_digit_limit(self):
        self.addCleanup(sys.set_int_max_str_digits, sys.get_int_max_str_digits())
        sys.set_int_max_str_digits(4300)
        with self.assertRaises(ParseError):
            evaluate(['1' * 5000 + '/3', '+', '1/2'])
