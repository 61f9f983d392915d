class Config:
    '''Configuration object contains settings

    Settings:
    - Config.graphviz: bool
        When True a failing check renders the node graph of its counterexample
        to a counterexample.gv/counterexample.gv.svg file

    - Config.depth: int
        The depth `check' uses when it is not given one
    '''
    def __init__(self, graphviz=False, depth=4):
        self.graphviz = graphviz
        self.depth = depth

    def __repr__(self):
        return 'Config(graphviz={}, depth={})'.format(self.graphviz, self.depth)

CONFIG = Config()
