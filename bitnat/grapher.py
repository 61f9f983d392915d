# grapher.py - Draw the shared node structure of Naturals
import logging

import graphviz as gv

from .natural import ZERO

__all__ = [
    'Graph',
    'sharing_graph',
    'render',
]

log = logging.getLogger('grapher')

class Graph:
    '''The nodes reachable from some Naturals, each distinct object once

    Values that share a tail share the node for it, so the graph shows how
    much structure a group of values has in common.
    '''
    def __init__(self):
        self._ids = {}
        # hold on to visited objects so their id()s cannot be reused
        self._nodes = []
        self.edges = []
        self.roots = []

    def add(self, n, label=None):
        self.roots.append((self._visit(n), label or str(n)))
        return self

    def _visit(self, n):
        first = None
        prev = None
        while n is not None:
            seen = id(n) in self._ids
            if not seen:
                self._ids[id(n)] = str(len(self._nodes))
                self._nodes.append(n)

            node_id = self._ids[id(n)]
            if prev is not None:
                self.edges.append((prev, node_id))
            if first is None:
                first = node_id
            if seen:
                break

            prev = node_id
            n = n.tail
        return first

    def __len__(self):
        return len(self._nodes)

    def __contains__(self, n):
        return id(n) in self._ids

    def to_digraph(self, digraph=None):
        g = digraph if digraph is not None else gv.Digraph(format='svg', comment='Natural sharing')

        for n in self._nodes:
            label = 'Z' if n is ZERO else str(n.head)
            g.node(self._ids[id(n)], label=label, shape='circle')

        for a, b in self.edges:
            g.edge(a, b)

        for i, (node_id, label) in enumerate(self.roots):
            root = 'root{}'.format(i)
            g.node(root, label=label, shape='box')
            g.edge(root, node_id, style='dashed')

        log.debug('graph of {} root(s), {} node(s), {} edge(s)'.format(len(self.roots), len(self), len(self.edges)))
        return g

def sharing_graph(*naturals, digraph=None):
    '''Builds a graphviz.Digraph of the given Naturals
    with one graph node per distinct Natural object
    '''
    graph = Graph()
    for n in naturals:
        graph.add(n)
    return graph.to_digraph(digraph)

def render(naturals, filename='sharing.gv'):
    '''Renders the sharing graph of `naturals' to `filename', returning the output path

    Needs the graphviz `dot' executable on the PATH
    '''
    g = sharing_graph(*naturals)
    path = g.render(filename)
    log.info('rendered {}'.format(path))
    return path
