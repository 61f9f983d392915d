# strategy.py - Strategies for producing arguments to properties
from __future__ import generator_stop

import abc
import typing
import logging
import itertools

from .bits import Bit
from .natural import Natural, ZERO, increment
from .error_types import MissingStrategyError

log = logging.getLogger('strategy')

__all__ = [
    'values',
    'value_args',
    'Strategy',
    'register',
    'has_strat_instance',
    'get_strat_instance',
]

def values(depth, t):
    yield from Strategy.get_strat_instance(t)(depth)

def value_args(depth, *types):
    '''Generates all tuples of values of type *types
    i.e.
        value_args(2, Natural, Bit) ->
            (Natural('0'), Bit.ZERO)
            (Natural('1'), Bit.ZERO)
            (Natural('1'), Bit.ONE)
            (Natural('0'), Bit.ONE)

    If any given type has no strategy instance then a MissingStrategyError is raised
    '''
    yield from generate_args_from_strategies(*map(lambda t: values(depth, t), types))

def generate_args_from_strategies(*iters):
    '''Yields every tuple taking one value from each of `iters'

    Iterators are consumed together, one value each per round, and a tuple is
    yielded as soon as all of its values have been produced, so tuples of
    small values always come out before tuples containing larger ones.
    '''
    if not iters:
        yield ()
        return

    gens = [iter(i) for i in iters]
    vals = [[] for _ in gens]
    done = [False for _ in gens]

    for k in itertools.count():
        for i, g in enumerate(gens):
            if not done[i]:
                try:
                    vals[i].append(next(g))
                except StopIteration:
                    done[i] = True

        if not any(len(v) > k for v in vals):
            return

        log.debug('generate_args_from_strategies: round {}, sizes = {}'.format(k, [len(v) for v in vals]))

        # every tuple with some index k, ordered by the first position holding k
        for i, v in enumerate(vals):
            if len(v) <= k:
                continue

            ranges = (
                [range(min(len(w), k)) for w in vals[:i]]
                + [range(k, k + 1)]
                + [range(min(len(w), k + 1)) for w in vals[i + 1:]])

            for idxs in itertools.product(*ranges):
                yield tuple(vals[j][idx] for j, idx in enumerate(idxs))

def has_strat_instance(t):
    try:
        Strategy.get_strat_instance(t)
        return True
    except MissingStrategyError:
        return False

def get_strat_instance(t):
    '''Gets the strategy instance registered to some type 't'
    '''
    return Strategy.get_strat_instance(t)

def register(t, strategy, override=True):
    '''Register a :class:`Strategy` instance for
    type 't'
    '''
    if t in StratMeta.__strats__ and not override:
        raise ValueError('A strategy is already registered for {}'.format(t))

    StratMeta.__strats__[t] = strategy

def _optional_param(t):
    '''For typing.Optional[X] return X, otherwise None
    '''
    if typing.get_origin(t) is not typing.Union:
        return None

    args = typing.get_args(t)
    params = [p for p in args if p is not type(None)]
    if len(params) != 1 or len(args) != 2:
        return None

    return params[0]

class StratMeta(abc.ABCMeta):
    '''Metaclass for a strat generator
    handles setting up the LUT
    '''
    # global LUT of all strategies
    __strats__ = {}

    def __init__(self, *args, **kwargs):
        pass

    def __new__(mcls, name, bases, namespace, _subtype=None, autoregister=True):
        cls = super().__new__(mcls, name, bases, namespace)

        for base in bases:
            sub = getattr(base, '_subtype', None)
            if sub is not None:
                cls._subtype = sub

                if autoregister:
                    register(sub, cls)

        if _subtype is not None:
            cls._subtype = _subtype

        return cls

    def __getitem__(self, t):
        try:
            return self.get_strat_instance(t)
        except MissingStrategyError:
            pass

        return self.new(t)

    def new(self, t):
        return self.__class__(self.__name__, (self,), {}, _subtype=t)

    def get_strat_instance(self, t):
        try:
            return StratMeta.__strats__[t]
        except KeyError:
            pass

        # typing.Optional[X] is None followed by all the X's
        inner = _optional_param(t)
        if inner is None:
            raise MissingStrategyError('Cannot get Strategy instance for ~{}'.format(t))

        strat_inner = self.get_strat_instance(inner)

        def generate(self, depth):
            yield None
            yield from strat_inner(depth)

        name = 'Generated_Optional[{}]'.format(getattr(inner, '__name__', inner))
        return self.__class__(name, (self.new(t),), dict(generate=generate))

class Strategy(metaclass=StratMeta):
    '''A :class:`Strategy` is a method of generating values of some type
    in a deterministic, gradual way - building smaller values first

    A depth of 0 generates nothing.
    '''
    _subtype = None
    log = logging.getLogger('strategy')

    def __init__(self, depth):
        self.log.debug('{}.new({})'.format(self.__class__.__name__, depth))
        self._depth = depth

    @abc.abstractmethod
    def generate(self, depth):
        '''Generator for all values of depth 'depth'
        '''

    def __iter__(self):
        if self._depth <= 0:
            return iter(())
        return iter(self.generate(self._depth))

    def __str__(self):
        return self.__class__.__name__

    def __repr__(self):
        return '{}({})'.format(self.__class__.__name__, self._depth)

class NaturalStrat(Strategy[Natural]):
    '''Every Natural of fewer than `depth' bits, smallest first
    '''
    def generate(self, depth):
        n = ZERO
        for _ in range(2 ** (depth - 1)):
            yield n
            n = increment(n)

class BitStrat(Strategy[Bit]):
    def generate(self, _):
        yield Bit.ZERO
        yield Bit.ONE
