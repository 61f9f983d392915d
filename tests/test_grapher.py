import graphviz

from bitnat import Natural, ZERO, ONE
from bitnat import grapher

def test_single_chain():
    five = Natural.from_int(5)
    g = grapher.Graph().add(five)
    # 101 -> 10 -> 1 -> Z
    assert len(g) == 4
    assert len(g.edges) == 3
    assert five in g and ZERO in g and ONE in g

def test_shared_tails_once():
    ten = Natural.from_int(10)
    eleven = ten + ONE
    g = grapher.Graph().add(ten).add(eleven)
    # 1010 -> 101 -> 10 -> 1 -> Z, eleven only adds its own node on top of ten's tail
    assert len(g) == 6
    assert len(g.edges) == 5
    assert len(g.roots) == 2

def test_distinct_equal_values_not_shared():
    g = grapher.Graph().add(Natural.from_int(6)).add(Natural.from_int(6))
    # 110 and 11 are built twice, ONE and ZERO are the same objects
    assert len(g) == 2 + 2 + 2

def test_digraph_source():
    d = grapher.sharing_graph(Natural.from_int(2))
    assert isinstance(d, graphviz.Digraph)
    src = d.source
    assert 'label=Z' in src
    assert 'label=10' in src
    assert 'style=dashed' in src

def test_existing_digraph():
    d = graphviz.Digraph(comment='mine')
    out = grapher.sharing_graph(ONE, digraph=d)
    assert out is d
    assert '// mine' in d.source
