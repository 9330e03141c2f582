#!/usr/bin/env python3

import logging
import argparse
import sys

from ratcalc.rational import Rational
from ratcalc.evaluator import Calculator, split_expression
from ratcalc.errors import CalculatorError


DEMO_EXPRESSION = ['1/2', '*', '2/3', '+', '3/4', '*', '1/2']


def run_demo(out=None):
    if out is None:
        out = sys.stdout
    calc = Calculator()
    a = Rational(1, 2)
    b = Rational(2, 3)
    c = Rational(3, 4)

    print('operands:', file=out)
    print('a =', a, file=out)
    print('b =', b, file=out)
    print('c =', c, file=out)

    print('', file=out)
    print('basic operations:', file=out)
    print('a + b =', calc.add(a, b), file=out)
    print('b - c =', calc.subtract(b, c), file=out)
    print('a * c =', calc.multiply(a, c), file=out)
    print('b / c =', calc.divide(b, c), file=out)
    print('a == a.copy():', a == a.copy(), file=out)

    print('', file=out)
    print('expression:', ' '.join(DEMO_EXPRESSION), file=out)
    print('result =', calc.evaluate(DEMO_EXPRESSION), file=out)


def run_calculator(tokens=None, expr=None, demo=False, out=None):
    if out is None:
        out = sys.stdout
    if demo:
        run_demo(out=out)
        return
    if expr is not None:
        tokens = split_expression(expr)
    logging.info('tokens: %s', tokens)
    print(Calculator().evaluate(tokens), file=out)


def main(argv=None):
    argparser = argparse.ArgumentParser(
        description='exact rational calculator',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    argparser.add_argument('tokens', nargs='*', help='expression tokens, e.g.: 1/2 "*" 2/3 + 3/4; put -- before a negative first operand')
    argparser.add_argument('--expr', type=str, help='whitespace-separated expression, e.g., "1/2 * 2/3"')
    argparser.add_argument('--demo', action='store_true', help='run demonstration of basic operations')
    argparser.add_argument('--max-digits', type=int, default=0, help='int/str conversion digit limit (0=unlimited, else >= 640)')
    argparser.add_argument('--verbose', '-v', action='count', default=0, help='loglevel (0=warning, 1=info, 2=debug)')

    args = argparser.parse_args(argv)
    if args.demo and (args.tokens or args.expr is not None):
        argparser.error('--demo takes no expression')
    if args.tokens and args.expr is not None:
        argparser.error('give either tokens or --expr, not both')
    if not (args.demo or args.tokens or args.expr is not None):
        argparser.error('no expression given')
    if args.max_digits != 0 and args.max_digits < 640:
        argparser.error('--max-digits must be 0 or at least 640')

    if args.verbose == 1:
        loglevel = logging.INFO
    elif args.verbose >= 2:
        loglevel = logging.DEBUG
    else:
        loglevel = logging.WARNING
    logging.basicConfig(
        level=loglevel,
        format='%(asctime)s:%(levelname)s:%(name)s:%(message)s',
    )
    logging.info('args: %s', args)  # call after loglevel is set!

    sys.set_int_max_str_digits(args.max_digits)

    try:
        run_calculator(tokens=args.tokens, expr=args.expr, demo=args.demo)
    except CalculatorError as exc:
        print('error: {}'.format(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
