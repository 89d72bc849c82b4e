## combinators.py provides point-free combinators over ordinary sequences.
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
combinators.py provides a small set of function builders for a point-free
style of Python programming.

It includes partial application, composition, argument projection and
iteration over (possibly sparse) sequences. Every combinator that wraps
another callable forwards the *receiver* it was called with, so combinators
can be stored as class attributes and used as methods.
"""

import inspect

__version__ = "1.1.0"


class _Hole:
    """
    Marks an absent slot in a sparse sequence. A slot holding Hole is not
    visited by for_ or map, and is distinct from a slot holding None.
    """
    def __repr__(self):
        return 'Hole'

Hole = _Hole()


def sparse(length, items):
    """
    Returns a list of *length* slots, filled from the {index: value} mapping
    *items*, with every other slot left as Hole.

    >>> sparse(4, {1: 'a', 3: 'b'})
    [Hole, 'a', Hole, 'b']
    """
    build = [Hole] * length
    for index, item in items.items():
        build[index] = item
    return build


def present(sequence, index):
    """
    Returns True if *index* names a slot of *sequence* that holds a value.
    """
    return 0 <= index < len(sequence) and sequence[index] is not Hole


def compact(sequence):
    """
    Returns a new list with the holes of *sequence* squeezed out.
    """
    return [item for item in sequence if item is not Hole]


def invoke(func, receiver, args):
    """
    Calls *func* with the positional *args*, handing *receiver* on to it if
    it is a Functor. Ordinary callables have no receiver slot and are
    simply called.
    """
    if isinstance(func, Functor):
        return func.call(receiver, *args)
    return func(*args)


def arity(func):
    """
    Returns the number of positional arguments *func* accepts, or None if
    it takes any number. Callables which offer no signature are taken to
    be unary.
    """
    if isinstance(func, Functor):
        return func.getArgCount()
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return 1
    count = 0
    for param in params:
        if param.kind == param.VAR_POSITIONAL:
            return None
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count = count + 1
    return count


def _visit(func, receiver, sequence, index, count):
    # func gets the first *count* of (item, index, sequence)
    args = (sequence[index], index, sequence)
    return invoke(func, receiver, args[:count])


class Functor:
    """
    Base class for the combinators in this module. A functor is called with
    an explicit receiver through call(); calling it directly passes no
    receiver at all.

    Functors are descriptors: put one in a class body and reading it from an
    instance yields a callable whose receiver is fixed to that instance,
    which is how obj.f() fixes the receiver of f.

    They also support the operators of the older functional module:
    f * g composes, ~p negates.
    """
    def call(self, receiver, *args):
        raise NotImplementedError

    def getArgCount(self):
        return None

    def __call__(self, *args):
        return self.call(None, *args)

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return method(obj, self)

    def __mul__(self, other):
        return compose(self, other)

    def __rmul__(self, other):
        return compose(other, self)

    def __invert__(self):
        return negate(self)


class receiving(Functor):
    """
    Wraps *func*, a function of (receiver, *args), so that it is handed the
    receiver of each call as its first argument.

    >>> whoami = receiving(lambda this: this)
    >>> class Owner:
    ...     me = whoami
    >>> o = Owner()
    >>> o.me() is o
    True
    """
    def __init__(self, func):
        self._func = func

    def getArgCount(self):
        count = arity(self._func)
        if count is None:
            return None
        return max(count - 1, 0)

    def call(self, receiver, *args):
        return self._func(receiver, *args)


## Application primitives

class apply_(Functor):
    def getArgCount(self):
        return 2

    def call(self, receiver, func, args):
        return invoke(func, receiver, args)

apply = apply_()
apply.__doc__ = """
apply(func, args)
Calls *func* with the argument list *args*, forwarding the receiver.
Nothing is added to or dropped from *args*.
"""


class argv_(Functor):
    def call(self, receiver, *args):
        return [arg for arg in args]

argv = argv_()
argv.__doc__ = """
argv(*args)
Returns its own arguments as a new list, ready to be passed to apply.
"""


def itself(v):
    """
    Returns *v* unchanged.
    """
    return v


class value(Functor):
    """
    Returns a callable which always returns *v*, whatever it is called with.
    Example:
    >>> f = value(5)
    >>> f()
    5
    """
    def __init__(self, v):
        self._value = v

    def call(self, receiver, *args):
        return self._value

true_ = value(True)
false_ = value(False)


def not_(v):
    """
    Returns the logical not of *v*.
    """
    return not v


## Partial application and binding

class bind1st(Functor):
    """
    Fixes the first argument of the binary *func*:
    bind1st(func, lhs)(rhs) == func(lhs, rhs)
    """
    def __init__(self, func, lhs):
        self._func = func
        self._lhs = lhs

    def getArgCount(self):
        return 1

    def call(self, receiver, rhs):
        return invoke(self._func, receiver, (self._lhs, rhs))


class bind2nd(Functor):
    """
    Fixes the second argument of the binary *func*:
    bind2nd(func, rhs)(lhs) == func(lhs, rhs)

    >>> square = bind2nd(pow, 2)
    >>> square(7)
    49
    """
    def __init__(self, func, rhs):
        self._func = func
        self._rhs = rhs

    def getArgCount(self):
        return 1

    def call(self, receiver, lhs):
        return invoke(self._func, receiver, (lhs, self._rhs))


class bind(Functor):
    """
    The general binder. *binders* is a sequence of callables; each is
    called with the full argument list of the bound call, and *func* is
    then called with their results, in order. For example, to call *func*
    with the first and third arguments only:

    >>> pair = bind(argv, [project(0), project(2)])
    >>> pair('a', 'b', 'c')
    ['a', 'c']

    Holes in *binders* are skipped; whatever the binders return, Hole
    included, is passed on as is.
    """
    def __init__(self, func, binders):
        self._func = func
        self._binders = compact(binders)

    def call(self, receiver, *args):
        derived = invoke(map, receiver, (bind2nd(apply, args), self._binders))
        return invoke(self._func, receiver, derived)


class method(Functor):
    """
    Returns a callable that calls *func* with its receiver fixed to *owner*,
    no matter what receiver it is itself called with. Other callables have
    no receiver, so they are called with exactly the arguments given; wrap
    a function in receiving() to have it handed *owner*.
    """
    def __init__(self, owner, func):
        self._owner = owner
        self._func = func

    def getArgCount(self):
        if isinstance(self._func, Functor):
            return self._func.getArgCount()
        return arity(self._func)

    def call(self, receiver, *args):
        if isinstance(self._func, Functor):
            return self._func.call(self._owner, *args)
        return self._func(*args)


def push(sequence):
    """
    Returns a callable that appends its argument to *sequence*.
    """
    return method(sequence, sequence.append)


## Composition

class compose(Functor):
    """
    compose(f, g)(*args) == f(g(*args))

    *g* gets all the arguments, *f* gets the single result of *g*. Both are
    given the receiver of the call.
    """
    def __init__(self, f, g):
        self._f = f
        self._g = g

    def getArgCount(self):
        return arity(self._g)

    def call(self, receiver, *args):
        return invoke(self._f, receiver, (invoke(self._g, receiver, args),))


collect = bind2nd(compose, argv)
collect.__doc__ = """
collect(func)
Returns a callable which gathers its arguments into one list and passes
that list to *func* as its only argument.
"""

spread = bind1st(bind1st, apply)
spread.__doc__ = """
spread(func)
The converse of collect: the returned callable takes one sequence and calls
*func* with its items as positional arguments.
"""

negate = bind1st(compose, not_)
negate.__doc__ = """
negate(predicate)
Returns a predicate taking the same arguments as *predicate* and returning
the logical not of its result.
"""


## Projection

class select(Functor):
    """
    select(i)(a) == a[i]
    """
    def __init__(self, index):
        self._index = index

    def getArgCount(self):
        return 1

    def call(self, receiver, a):
        return a[self._index]


class project(Functor):
    """
    Returns a callable which returns its argument at position *index*, and
    ignores the rest.
    """
    def __init__(self, index):
        self._index = index

    def call(self, receiver, *args):
        return args[self._index]

_1 = project(0)
_2 = project(1)
_3 = project(2)


def _N(*args):
    """
    Returns the last of its arguments, however many there are.
    """
    return args[-1]


def member(o, i):
    return o[i]


def size(o):
    """
    Returns the length of *o*, holes included.
    """
    return len(o)


## Iteration

class for__(Functor):
    def getArgCount(self):
        return 2

    def call(self, receiver, sequence, func):
        count = arity(func)
        for i in range(len(sequence)):
            if present(sequence, i):
                _visit(func, receiver, sequence, i, count)

for_ = for__()
for_.__doc__ = """
for_(sequence, func)
Calls func(item, index, sequence) for every present slot of *sequence*, in
ascending order; *func* is given only as many of those three arguments as
it accepts. Holes are skipped. Returns None.
"""


class map_(Functor):
    def getArgCount(self):
        return 2

    def call(self, receiver, func, sequence):
        build = [Hole] * len(sequence)
        count = arity(func)
        for i in range(len(sequence)):
            if present(sequence, i):
                build[i] = _visit(func, receiver, sequence, i, count)
        return build

map = map_()
map.__doc__ = """
map(func, sequence)
Returns a new list of the same length as *sequence*, holding
func(item, index, sequence) at every present slot and Hole wherever
*sequence* has one. *func* is never called for a hole, and is given only as
many of the three arguments as it accepts. Use compact() on the result for
the dense form.
"""


def list():
    """
    Returns a new, empty list.
    """
    return []


## Control

class while__(Functor):
    def getArgCount(self):
        return 2

    def call(self, receiver, cond, func):
        while invoke(cond, receiver, ()):
            invoke(func, receiver, ())

while_ = while__()
while_.__doc__ = """
while_(cond, func)
Calls *func* as long as *cond* returns a true value. Both are called with
no arguments and the receiver of the call.
"""
