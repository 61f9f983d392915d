#!/usr/bin/env python3
from bitnat import Natural, ONE
from bitnat import grapher

if __name__ == '__main__':
    five = Natural.from_int(5)
    ten = five + five
    eleven = ten + ONE
    twenty_two = eleven * (ONE + ONE)

    # eleven reuses ten's tail, twenty_two has eleven as its tail
    print(grapher.sharing_graph(five, ten, eleven, twenty_two).source)
    grapher.render([five, ten, eleven, twenty_two], 'sharing.gv')
