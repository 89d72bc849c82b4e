## algorithms.py provides small pure functions to feed to the combinators.
## Copyright (C) 2000 Bryn Keller

## This library is free software; you can redistribute it and/or
## modify it under the terms of the GNU Lesser General Public
## License as published by the Free Software Foundation; either
## version 2.1 of the License, or (at your option) any later version.

## This library is distributed in the hope that it will be useful,
## but WITHOUT ANY WARRANTY; without even the implied warranty of
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
## Lesser General Public License for more details.

## You should have received a copy of the GNU Lesser General Public
## License along with this library; if not, write to the Free Software
## Foundation, Inc., 59 Temple Place, Suite 330, Boston, MA  02111-1307  USA

"""
Comparisons, arithmetic and searches written as ordinary functions of one
or two arguments, so that they can be curried with bind1st and bind2nd and
composed without any special casing. For example, the index of the first
non-negative number:

>>> find_if(bind2nd(ge, 0), range(-3, 7))
3
"""

import builtins
import operator

from combinators import negate, present

__version__ = "1.1.0"


def lt(a, b):
    return a < b

def le(a, b):
    return a <= b

def gt(a, b):
    return a > b

def ge(a, b):
    return a >= b

def eq(a, b):
    return a == b


def max(a, b):
    """
    Returns the greater of *a* and *b*, preferring *a* on a tie.
    """
    if b > a:
        return b
    return a

def min(a, b):
    """
    Returns the lesser of *a* and *b*, preferring *a* on a tie.
    """
    if b < a:
        return b
    return a

pow = operator.pow


def range(start, count, step = 1):
    """
    Returns a list of *count* numbers, beginning at *start* and going up
    (or down) by *step*. Note this is not the builtin: the second argument
    is a length, not a bound.

    >>> range(16, 5, -4)
    [16, 12, 8, 4, 0]
    """
    return [start + i * step for i in builtins.range(count)]


def fib(n):
    """
    Returns the *n*th Fibonacci number, counting fib(0) == fib(1) == 1.
    """
    a, b = 1, 1
    for _ in builtins.range(n):
        a, b = b, a + b
    return a


def find_if(test_func, sequence):
    """
    Returns the index of the first item in *sequence* for which *test_func*
    returns a true value, or -1 if there is none. Holes are skipped.
    """
    for i in builtins.range(len(sequence)):
        if present(sequence, i) and test_func(sequence[i]):
            return i
    return -1


def every(test_func, sequence):
    """
    Returns True if *test_func* holds for every item in *sequence*. Stops at
    the first item for which it does not.
    """
    return find_if(negate(test_func), sequence) == -1


def some(test_func, sequence):
    """
    Returns True if *test_func* holds for at least one item in *sequence*.
    """
    return find_if(test_func, sequence) != -1


def reduce(func, sequence, initial):
    """
    Folds *sequence* from the left: func(func(initial, s[0]), s[1])...
    """
    acc = initial
    for i in builtins.range(len(sequence)):
        if present(sequence, i):
            acc = func(acc, sequence[i])
    return acc
