#!/usr/bin/env python3
from bitnat import ZERO, ONE, compare

def main():
    zero = ZERO
    print('zero is {} [0]'.format(zero))
    one = ONE
    print('one is {} [1]'.format(one))

    # addition
    two = one + one
    print('addition of 1+1 is {} [10]'.format(two))
    three = two + one
    print('addition of 2+1 is {} [11]'.format(three))
    five = three + two
    print('addition of 3+2 is {} [101]'.format(five))

    print('increment of 1 is {}'.format(one.increment()))

    mult = two * three * five
    print('multiplication of 2*3*5 is {} [11110]'.format(mult))

    power = two ** three
    print('power of 2^3 is {} [1000]'.format(power))

    sub = three - two
    print('subtraction 3-2 is {} [1]'.format(sub))
    print('decrement of 1 is {} [0]'.format(sub.decrement()))

    for name, op in [('<', lambda a, b: a < b), ('>', lambda a, b: a > b),
                     ('<=', lambda a, b: a <= b), ('>=', lambda a, b: a >= b),
                     ('==', lambda a, b: a == b)]:
        for a, b, sa, sb in [(one, one, 1, 1), (two, three, 2, 3), (two, one, 2, 1), (two, None, 2, None)]:
            print('comparison [{} {} {}] is {}'.format(sa, name, sb, op(a, b)))

    for a, b, sa, sb in [(one, one, 1, 1), (two, three, 2, 3), (two, one, 2, 1), (two, None, 2, None)]:
        print('comparison [{} compare {}] is {}'.format(sa, sb, compare(a, b)))

    print('hash [zero] is {}'.format(hash(zero)))
    print('hash [one] is {}'.format(hash(one)))

    print('int [two] is {}'.format(int(two)))
    print('int [three] is {}'.format(int(three)))
    print('int [five] is {}'.format(int(five)))

if __name__ == '__main__':
    main()

'''
Sample Output:

zero is 0 [0]
one is 1 [1]
addition of 1+1 is 10 [10]
addition of 2+1 is 11 [11]
addition of 3+2 is 101 [101]
increment of 1 is 10
multiplication of 2*3*5 is 11110 [11110]
power of 2^3 is 1000 [1000]
subtraction 3-2 is 1 [1]
decrement of 1 is 0 [0]
comparison [1 < 1] is False
comparison [2 < 3] is True
comparison [2 < 1] is False
comparison [2 < None] is False
...
comparison [2 == None] is False
comparison [1 compare 1] is 0
comparison [2 compare 3] is -1
comparison [2 compare 1] is 1
comparison [2 compare None] is 1
hash [zero] is 0
hash [one] is 1
int [two] is 2
int [three] is 3
int [five] is 5
'''
