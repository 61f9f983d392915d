import abc
import inspect
import logging
import contextlib

from . import strategy
from . import asserts

__all__ = [
    'Property',
    'forall',
    'exists',
    'unit',
    'empty',
    'Outcome',
    'Success',
    'Failure',
    'UnitSuccess',
    'EmptyFailure',
    'Witness',
    'NoWitness',
    'Counter',
    'NoCounter',
    'AssertionCounter',
    'UnrelatedException',
]

log = logging.getLogger('clauses')

class Outcome(abc.ABC):
    def __init__(self, prop, assertions=None, child_outcome=None):
        self.prop = prop
        self._asserts = assertions or []
        self._extra_args = []
        self.child_outcome = child_outcome

        # execution state
        # for nice output
        self.state = {
            'calls': 0,
            'depth': 0,
        }

    @property
    def assertions(self):
        '''The list of assertion messages that *passed* during the execution
        to find this Outcome
        '''
        return self._asserts

    @property
    @abc.abstractmethod
    def reason(self):
        '''Reason for Outcome

        Could be witness or counterexample arguments if one exists
        or None
        '''

    def __repr__(self):
        if self._extra_args:
            _extra = ', '.join(map(repr, self._extra_args))
            return '<%s(%s, %s, %s)>' % (self.__class__.__name__, self.prop, self.reason, _extra)

        return '<%s(%s, %s)>' % (self.__class__.__name__, self.prop, self.reason)

class Success(Outcome):
    @property
    def reason(self):
        return 'N/A'

class UnitSuccess(Success):
    def __init__(self, clause):
        super().__init__(clause, [])

    @property
    def reason(self):
        return '<unit>'

class Witness(Success):
    def __init__(self, prop, witness, assertions=None, child_outcome=None):
        super().__init__(prop, assertions, child_outcome)
        self._witness = witness

    @property
    def reason(self):
        return self._witness

class NoCounter(Success):
    pass

class Failure(Outcome):
    def __init__(self, prop, assertions=None, child_outcome=None, message='Unspecified Failure'):
        self._msg = message
        super().__init__(prop, assertions, child_outcome)

    @property
    def reason(self):
        return self._msg

class EmptyFailure(Failure):
    def __init__(self, clause):
        super().__init__(clause, [])

    @property
    def reason(self):
        return '<empty>'

class NoWitness(Failure):
    pass

class UnrelatedException(Failure):
    '''The property raised something other than an AssertionError
    '''
    def __init__(self, prop, exception, assertions=None, child_outcome=None):
        super().__init__(prop, assertions, child_outcome)
        self._e = exception

    @property
    def reason(self):
        return self._e

class Counter(Failure):
    def __init__(self, prop, counter, assertions=None, child_outcome=None):
        super().__init__(prop, assertions, child_outcome)
        self._counter = counter

    @property
    def reason(self):
        return self._counter

class AssertionCounter(Counter):
    def __init__(self, prop, counter, msg, assertions=None, child_outcome=None):
        super().__init__(prop, counter, assertions=assertions, child_outcome=child_outcome)
        self._msg = msg
        self._extra_args.append(msg)

    @property
    def message(self):
        return self._msg

def _get_name_from_func(func, other):
    if getattr(func, '__name__', None) != '<lambda>':
        with contextlib.suppress(AttributeError):
            return func.__qualname__

    return other

def _get_outcome(p):
    try:
        while True:
            next(p)
    except StopIteration as e:
        return e.value

def _as_types(t):
    if isinstance(t, tuple):
        return t
    return (t,)

def _pretty_type(t):
    return getattr(t, '__name__', None) or str(t).replace('typing.', '')

class Property:
    '''A Property is a piece of computation that can be evaluated
    to a success or a failure

    Running a Property is a generator: it yields once for every call it makes
    and returns its Outcome
    '''
    def __init__(self, name=None):
        self.name = name or 'Unknown'

        # the Property can store its current, partially evaluated state
        # (assertions_log, counterexample/witness)
        self.partial = (None, None)

    def __and__(self, other):
        if not isinstance(other, Property):
            raise TypeError('Can only & together Property instances')

        return _and(self, other)

    def __or__(self, other):
        if not isinstance(other, Property):
            raise TypeError('Can only | together Property instances')

        return _or(self, other)

    def run(self, depth):
        '''Run a Property until completion
        yield at each step
        and then return the Outcome
        '''
        raise NotImplementedError

    def __str__(self):
        return self.name

    def __repr__(self):
        return 'Property<{}>'.format(self.name)

class Quantified(Property):
    '''A Property that is a function quantified over some types
    '''
    def __init__(self, types, func, name=None, quant_name=None):
        self.types = _as_types(types)
        self.func = func
        if not name:
            args = ', '.join(map(_pretty_type, self.types))
            name = '{}({})'.format(_get_name_from_func(func, quant_name), args)
        super().__init__(name=name)

class empty(Property):
    '''The empty property, it always fails
    '''
    def __init__(self):
        super().__init__(name='empty')

    def run(self, _):
        yield
        return EmptyFailure(self)

class unit(Property):
    '''The identity (unit) property, it always succeeds
    '''
    def __init__(self):
        super().__init__(name='unit')

    def run(self, _):
        yield
        return UnitSuccess(self)

def _run_prop_func(depth, prop, types, f):
    '''Runs a property's function against all arguments of types `types`

    If the property holds,   yields Witness(prop, ARGS)
    If it does not hold,     yields Counter(prop, ARGS)
    If an assertion fails,   yields AssertionCounter(prop, ARGS, MESSAGE)

    Any other exception is raised out
    '''
    sig = inspect.signature(f)

    for args in strategy.value_args(depth, *types):
        counter = sig.bind(*args)
        log.debug('{}: call with {}'.format(prop.name, args))

        assertions = []
        prop.partial = (assertions, counter)

        try:
            with asserts.change_assertions_log(assertions):
                v = f(*counter.args, **counter.kwargs)
        except AssertionError as e:
            msg = e.args[0] if e.args else 'assertion failed'
            yield counter, AssertionCounter(prop, counter, msg, assertions=assertions)
            continue

        if v is False:
            yield counter, Counter(prop, counter, assertions=assertions)
        elif isinstance(v, Property):
            outcome = _get_outcome(v.run(depth))
            if isinstance(outcome, Success):
                yield counter, Witness(prop, counter, assertions=assertions, child_outcome=outcome)
            else:
                yield counter, Counter(prop, counter, assertions=assertions, child_outcome=outcome)
        else:
            yield counter, Witness(prop, counter, assertions=assertions)

class forall(Quantified):
    '''Universal quantification

    Takes a type (or tuple of types) and a function `func`, returning a Property
    which tests `func` against all arguments of those types up to some depth.

    >> prop = forall((Natural, Natural), p)  # for all naturals x, y p(x, y) passes
    >> prop.run(3)                           # try prove for all x, y to depth 3
    '''
    def __init__(self, types, func, name=None):
        super().__init__(types, func, name, quant_name='forall')

    def run(self, depth):
        assertions = []
        for c, v in _run_prop_func(depth, self, self.types, self.func):
            yield c

            if isinstance(v, AssertionCounter):
                return v
            if isinstance(v, Failure):
                return Counter(self, c, assertions=v.assertions, child_outcome=v.child_outcome)
            assertions = v.assertions

        return NoCounter(self, assertions=assertions)

class exists(Quantified):
    '''Existential quantification

    Takes a type (or tuple of types) and a function `func`, returning a Property
    which searches for arguments of those types for which `func` passes.

    >> prop = exists(Natural, p)  # there exists some natural n such that p(n) passes
    >> prop.run(3)                # try find n to depth 3
    '''
    def __init__(self, types, func, name=None):
        super().__init__(types, func, name, quant_name='exists')

    def run(self, depth):
        assertions = []
        for c, v in _run_prop_func(depth, self, self.types, self.func):
            yield c

            if isinstance(v, Success):
                return Witness(self, c, assertions=v.assertions, child_outcome=v.child_outcome)
            assertions = v.assertions

        return NoWitness(self, assertions=assertions)

class _or(Property):
    '''p | q, runs p and only if it fails runs q
    '''
    def __init__(self, a, b):
        super().__init__(name='({} or {})'.format(a.name, b.name))
        self.lhs = a
        self.rhs = b

    def run(self, depth):
        outcome = yield from self.lhs.run(depth)
        if isinstance(outcome, Success):
            return outcome

        return (yield from self.rhs.run(depth))

class _and(Property):
    '''p & q, runs p and only if it succeeds runs q
    '''
    def __init__(self, a, b):
        super().__init__(name='({} and {})'.format(a.name, b.name))
        self.lhs = a
        self.rhs = b

    def run(self, depth):
        outcome = yield from self.lhs.run(depth)
        if isinstance(outcome, Failure):
            return outcome

        return (yield from self.rhs.run(depth))
