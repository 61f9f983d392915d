# laws.py - The algebraic laws every Natural obeys
from typing import Optional

from .bits import Bit
from .natural import Natural, ZERO, ONE, make, compare, to_int
from .error_types import Underflow
from .clauses import forall
from .asserts import assertEqual, assertTrue, assertRaises
from .pset import PropertySet

__all__ = [
    'NaturalLaws',
]

def _sign(i):
    return (i > 0) - (i < 0)

def _is_canonical(n):
    '''No node of `n', besides ONE, has ZERO as its tail
    '''
    while n is not ZERO:
        if n.tail is ZERO and n is not ONE:
            return False
        n = n.tail
    return True

class NaturalLaws(PropertySet):
    '''Laws of Natural arithmetic, quantified over all small naturals
    '''
    def prop_make_canonical(self):
        return forall(Bit, lambda h: assertTrue(make(ZERO, h) is (ZERO if h is Bit.ZERO else ONE)))

    def prop_results_canonical(self):
        def results_canonical(x, y):
            return all(map(_is_canonical, [x + y, x * y, x ** y, (x + y) - y]))

        return forall((Natural, Natural), results_canonical)

    def prop_add_commutative(self):
        return forall((Natural, Natural), lambda x, y: assertEqual(x + y, y + x))

    def prop_add_associative(self):
        return forall(
            (Natural, Natural, Natural),
            lambda x, y, z: assertEqual((x + y) + z, x + (y + z)))

    def prop_add_identity(self):
        return forall(Natural, lambda x: assertTrue(x + ZERO is x and ZERO + x is x))

    def prop_multiply_commutative(self):
        return forall((Natural, Natural), lambda x, y: assertEqual(x * y, y * x))

    def prop_multiply_identity(self):
        return forall(Natural, lambda x: assertEqual(x * ONE, x))

    def prop_multiply_zero(self):
        return forall(Natural, lambda x: assertTrue(x * ZERO is ZERO))

    def prop_multiply_distributes(self):
        return forall(
            (Natural, Natural, Natural),
            lambda x, y, z: assertEqual(x * (y + z), x * y + x * z))

    def prop_subtract_inverts_add(self):
        return forall((Natural, Natural), lambda x, y: assertEqual((x + y) - y, x))

    def prop_subtract_underflows(self):
        return forall(
            (Natural, Natural),
            lambda x, y: x >= y or assertRaises(Underflow, lambda: x - y))

    def prop_int_round_trip(self):
        return forall(Natural, lambda x: assertEqual(Natural.from_int(to_int(x)), x))

    def prop_int_homomorphism(self):
        def matches_int(x, y):
            a, b = to_int(x), to_int(y)
            assertEqual(to_int(x + y), a + b)
            assertEqual(to_int(x * y), a * b)
            return assertEqual(to_int(x ** y), a ** b)

        return forall((Natural, Natural), matches_int)

    def prop_power_zero(self):
        return forall(Natural, lambda x: assertTrue(x ** ZERO is ONE))

    def prop_power_of_sum(self):
        return forall(
            (Natural, Natural, Natural),
            lambda x, a, b: assertEqual(x ** (a + b), x ** a * x ** b))

    def prop_total_order(self):
        def trichotomy(x, y):
            return [x < y, x == y, x > y].count(True) == 1

        return forall((Natural, Natural), trichotomy)

    def prop_compare_antisymmetric(self):
        return forall(
            (Optional[Natural], Optional[Natural]),
            lambda x, y: assertEqual(_sign(compare(x, y)), -_sign(compare(y, x))))

    def prop_order_matches_int(self):
        return forall(
            (Natural, Natural),
            lambda x, y: assertEqual(compare(x, y), _sign(to_int(x) - to_int(y))))

    def prop_none_is_least(self):
        return forall(Natural, lambda x: assertTrue(compare(x, None) > 0 and compare(None, x) < 0))

    def prop_hash_agrees_with_eq(self):
        return forall(
            (Natural, Natural),
            lambda x, y: x != y or hash(x) == hash(y))
