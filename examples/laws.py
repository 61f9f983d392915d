#!/usr/bin/env python3
import sys

import bitnat
from bitnat import check, forall, exists, Natural, NaturalLaws

def prop_even_or_odd():
    '''Every natural is 2*k or 2*k + 1 for some k
    '''
    two = bitnat.ONE + bitnat.ONE
    return forall(Natural, lambda n: exists(Natural, lambda k: n in (two * k, two * k + bitnat.ONE)))

def prop_doubling_is_wrong():
    '''Doubling never changes a natural (false, 0 is the only fixed point)
    '''
    return forall(Natural, lambda n: n + n == n)

if __name__ == '__main__':
    depth = int(sys.argv[1]) if len(sys.argv) > 1 else 4
    check(depth, NaturalLaws)
    check(depth, prop_even_or_odd)
    check(depth, prop_doubling_is_wrong)

'''
Sample Output (of the last check):

..F
================================================================================
Failure
After 2 call(s)
To depth 4
In property `prop_doubling_is_wrong`

prop_doubling_is_wrong ->
 counterexample:
  n=Natural('1')

FAIL
'''
