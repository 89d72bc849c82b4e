## assertions.py provides a tiny assertion and test-running harness.
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
A self-contained harness for exercising the combinators the way their
reference suite does: assertions that raise, named test definitions
collected into suites, and a runner that reports each failure through a
caller-supplied logger and counts them.

>>> suite = []
>>> defTest('one is one', suite, lambda: assertEquals(1, 1))
1
>>> runTests(suite)
0
"""

import logging

__version__ = "1.1.0"

log = logging.getLogger(__name__)


class Assertion(Exception):
    """
    Base class of the failures raised by this module.
    """
    def __init__(self, message = None):
        Exception.__init__(self, message)
        self.message = message

    def __str__(self):
        if self.message is None:
            return ''
        return str(self.message)


class UnconditionalFailure(Assertion):
    """
    Raised by fail().
    """
    pass


class EqualityFailure(Assertion):
    """
    Raised by assertEquals() when *expected* and *actual* differ. Renders as
    the message (if any) followed by a line naming both values.
    """
    def __init__(self, expected, actual, message = None):
        Assertion.__init__(self, message)
        self.expected = expected
        self.actual = actual

    def __str__(self):
        detail = 'expected: %s, actual: %s' % (self.expected, self.actual)
        if self.message is None:
            return detail
        return '%s\n%s' % (self.message, detail)


def assertEquals(expected, actual, message = None):
    if expected != actual:
        raise EqualityFailure(expected, actual, message)


def fail(message):
    raise UnconditionalFailure(message)


class TestDef:
    """
    A test callable together with the name it is reported under.
    """
    __test__ = False

    def __init__(self, name, test):
        self.name = name
        self.test = test

    def __repr__(self):
        return 'TestDef(%r)' % self.name


def testDef(name, test):
    return TestDef(name, test)


def defTest(name, suite, test):
    """
    Appends a TestDef for *test* to *suite*, and returns the new size of
    the suite.
    """
    suite.append(TestDef(name, test))
    return len(suite)


def runTest(logger, test):
    """
    Runs one test, which may be a TestDef or a bare callable (reported
    under its __name__). If it raises an Assertion, *logger* is called with
    a one-line description and 1 is returned; a passing test returns 0.
    Any other exception is not a test failure and propagates.
    """
    if isinstance(test, TestDef):
        name, func = test.name, test.test
    else:
        name, func = getattr(test, '__name__', repr(test)), test
    try:
        func()
    except Assertion as e:
        logger('failure in %s: %s' % (name, e))
        return 1
    return 0


def runTests(suite, logger = None):
    """
    Runs every test in *suite* and returns the number that failed. Failures
    go to *logger*, or to this module's log when none is given.
    """
    if logger is None:
        logger = log.error
    log.debug('running %d tests', len(suite))
    failures = 0
    for test in suite:
        failures = failures + runTest(logger, test)
    log.info('%d of %d tests failed', failures, len(suite))
    return failures
