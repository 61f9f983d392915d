import unittest

from bitnat import (
    Natural, ZERO, ONE,
    add, subtract, multiply, power, increment, decrement, to_int,
    InvalidArgument, Underflow,
)

def N(i):
    return Natural.from_int(i)

class ScenarioTestCase(unittest.TestCase):
    def setUp(self):
        self.two = ONE + ONE
        self.three = self.two + ONE
        self.five = self.three + self.two

    def test_one_plus_one(self):
        self.assertEqual(str(self.two), '10')

    def test_two_plus_three(self):
        self.assertEqual(str(self.two + self.three), '101')

    def test_product(self):
        self.assertEqual(str(self.two * self.three * self.five), '11110')

    def test_power(self):
        self.assertEqual(str(self.two ** self.three), '1000')
        self.assertEqual(str(pow(self.two, self.three)), '1000')

    def test_difference(self):
        self.assertEqual(str(self.three - self.two), '1')
        self.assertIs(self.three - self.two, ONE)

    def test_underflow(self):
        with self.assertRaises(Underflow):
            subtract(self.two, self.three)

    def test_increment(self):
        self.assertEqual(increment(ONE), self.two)
        self.assertEqual(ONE.increment(), self.two)

    def test_decrement(self):
        self.assertIs(decrement(ONE), ZERO)
        self.assertIs(ONE.decrement(), ZERO)

    def test_decrement_zero(self):
        with self.assertRaises(Underflow):
            decrement(ZERO)

class AdditionTestCase(unittest.TestCase):
    def test_identity_returns_operand(self):
        x = N(13)
        self.assertIs(add(x, ZERO), x)
        self.assertIs(add(ZERO, x), x)

    def test_matches_int(self):
        for i in range(40):
            for j in range(40):
                self.assertEqual(to_int(add(N(i), N(j))), i + j)

    def test_carry_chain(self):
        self.assertEqual(str(N(2 ** 64 - 1) + ONE), '1' + '0' * 64)

    def test_shares_tail(self):
        ten = N(10)
        self.assertIs((ten + ONE).tail, ten.tail)

    def test_none(self):
        with self.assertRaises(InvalidArgument):
            add(ONE, None)
        with self.assertRaises(InvalidArgument):
            add(None, ONE)
        with self.assertRaises(InvalidArgument):
            ONE + None

    def test_other_types(self):
        with self.assertRaises(TypeError):
            ONE + 1
        with self.assertRaises(TypeError):
            add(ONE, 1)

class SubtractionTestCase(unittest.TestCase):
    def test_matches_int(self):
        for i in range(40):
            for j in range(i + 1):
                self.assertEqual(to_int(subtract(N(i), N(j))), i - j)

    def test_self(self):
        x = N(21)
        self.assertIs(x - x, ZERO)
        self.assertIs(N(21) - N(21), ZERO)

    def test_zero(self):
        x = N(21)
        self.assertIs(x - ZERO, x)

    def test_borrow(self):
        self.assertEqual(to_int(N(16) - ONE), 15)
        self.assertEqual(to_int(N(1024) - N(3)), 1021)

    def test_underflow_is_invalid_argument(self):
        for i in range(10):
            for j in range(i + 1, 12):
                with self.assertRaises(InvalidArgument):
                    N(i) - N(j)

    def test_none(self):
        with self.assertRaises(InvalidArgument):
            subtract(ONE, None)

class MultiplicationTestCase(unittest.TestCase):
    def test_matches_int(self):
        for i in range(30):
            for j in range(30):
                self.assertEqual(to_int(multiply(N(i), N(j))), i * j)

    def test_shortcuts(self):
        x = N(19)
        self.assertIs(x * ZERO, ZERO)
        self.assertIs(ZERO * x, ZERO)
        self.assertIs(x * ONE, x)
        self.assertIs(ONE * x, x)

    def test_large(self):
        a, b = 2 ** 40 + 7, 3 ** 20
        self.assertEqual(int(N(a) * N(b)), a * b)

    def test_none(self):
        with self.assertRaises(InvalidArgument):
            multiply(None, ONE)

class PowerTestCase(unittest.TestCase):
    def test_matches_int(self):
        for i in range(8):
            for j in range(8):
                self.assertEqual(to_int(power(N(i), N(j))), i ** j)

    def test_zero_exponent(self):
        self.assertIs(power(ZERO, ZERO), ONE)
        self.assertIs(N(9) ** ZERO, ONE)

    def test_large(self):
        self.assertEqual(int(N(2) ** N(100)), 2 ** 100)
        self.assertEqual(int(N(3) ** N(40)), 3 ** 40)

    def test_none_exponent(self):
        with self.assertRaises(InvalidArgument):
            power(ONE, None)
        with self.assertRaises(InvalidArgument):
            ONE ** None

    def test_no_modulo(self):
        with self.assertRaises(TypeError):
            pow(N(2), N(3), N(5))

    def test_no_xor(self):
        with self.assertRaises(TypeError):
            N(2) ^ N(3)

class LawsTestCase(unittest.TestCase):
    def setUp(self):
        self.xs = [N(i) for i in (0, 1, 2, 3, 6, 11, 29)]

    def test_add_commutative_associative(self):
        for x in self.xs:
            for y in self.xs:
                self.assertEqual(x + y, y + x)
                for z in self.xs:
                    self.assertEqual((x + y) + z, x + (y + z))

    def test_multiply_commutative(self):
        for x in self.xs:
            for y in self.xs:
                self.assertEqual(x * y, y * x)

    def test_subtract_inverts_add(self):
        for x in self.xs:
            for y in self.xs:
                self.assertEqual((x + y) - y, x)

    def test_power_of_sum(self):
        for x in self.xs[:5]:
            for a in self.xs[:5]:
                for b in self.xs[:5]:
                    self.assertEqual(x ** (a + b), x ** a * x ** b)

class LargeValuesTestCase(unittest.TestCase):
    '''Values far longer than the interpreter's recursion limit
    '''
    big = 2 ** 1500 + 12345

    def test_from_int_to_int(self):
        self.assertEqual(to_int(N(self.big)), self.big)
        self.assertEqual(int(N(2 ** 1200)), 2 ** 1200)

    def test_hash(self):
        n = Natural.from_bits('1' + '0' * 1200)
        self.assertEqual(hash(n), hash(2 ** 1200))
        self.assertIn(n, {N(2 ** 1200)})

    def test_compare(self):
        self.assertEqual(N(self.big), N(self.big))
        self.assertLess(N(self.big - 1), N(self.big))
        self.assertGreater(N(2 ** 1201), N(2 ** 1200 + 1))

    def test_increment_carries(self):
        n = Natural.from_bits('1' * 1200)
        self.assertEqual(str(n + ONE), '1' + '0' * 1200)
        self.assertEqual(str(decrement(n + ONE)), '1' * 1200)

    def test_arithmetic(self):
        a, b = self.big, 3 ** 900
        self.assertEqual(to_int(N(a) + N(b)), a + b)
        self.assertEqual(to_int(N(a) - N(b)), a - b)
        self.assertEqual(to_int(N(a) * N(b)), a * b)
        self.assertEqual(to_int(N(2 ** 1300) ** N(2)), 2 ** 2600)

    def test_underflow(self):
        with self.assertRaises(Underflow):
            N(2 ** 1200) - N(2 ** 1200 + 1)
