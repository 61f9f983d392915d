import typing

import pytest

from bitnat import strategy, Natural, Bit, ZERO, MissingStrategyError

def listify(t, d):
    return list(strategy.values(d, t))

def test_naturals():
    assert listify(Natural, 0) == []
    assert listify(Natural, 1) == [ZERO]
    assert [int(n) for n in listify(Natural, 4)] == list(range(8))

def test_naturals_strat_instance():
    nats = strategy.Strategy[Natural]
    xs = [[int(n) for n in nats(i)] for i in range(5)]
    assert xs[0] == []
    assert xs[1] == [0]
    assert xs[2] == [0, 1]
    assert xs[3] == [0, 1, 2, 3]
    assert xs[4] == list(range(8))

def test_bits():
    assert listify(Bit, 0) == []
    assert listify(Bit, 10) == [Bit.ZERO, Bit.ONE]

def test_optional_natural():
    xs = listify(typing.Optional[Natural], 3)
    assert xs[0] is None
    assert [int(n) for n in xs[1:]] == [0, 1, 2, 3]

def test_has_strat_instance():
    assert strategy.has_strat_instance(Natural)
    assert strategy.has_strat_instance(Bit)
    assert not strategy.has_strat_instance(str)

def test_missing_strategy():
    with pytest.raises(MissingStrategyError):
        listify(str, 3)

def test_value_args_order():
    args = [(int(n), b) for n, b in strategy.value_args(2, Natural, Bit)]
    assert args == [(0, Bit.ZERO), (1, Bit.ZERO), (1, Bit.ONE), (0, Bit.ONE)]

def test_value_args_complete():
    args = [tuple(map(int, t)) for t in strategy.value_args(3, Natural, Natural, Natural)]
    assert len(args) == 4 ** 3
    assert len(set(args)) == 4 ** 3

def test_value_args_small_first():
    args = [tuple(map(int, t)) for t in strategy.value_args(4, Natural, Natural)]
    assert args[0] == (0, 0)
    assert set(args[:4]) == {(0, 0), (1, 0), (0, 1), (1, 1)}
    assert max(args[-1]) == 7
    assert len(args) == 64

def test_value_args_no_types():
    assert list(strategy.value_args(3)) == [()]

def test_value_args_uneven():
    args = list(strategy.value_args(5, Bit, Natural))
    assert len(args) == 2 * 16

def test_register():
    class Small:
        pass

    class SmallStrat(strategy.Strategy[Small]):
        def generate(self, depth):
            yield from range(depth)

    assert strategy.get_strat_instance(Small) is SmallStrat
    assert listify(Small, 3) == [0, 1, 2]
