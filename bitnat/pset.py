import io
import unittest

from . import runner
from . import clauses

__all__ = [
    'PropertySet',
    'unittest_wrapper',
]

def _extend_properties(props, bases):
    for b in bases:
        if getattr(b, '__properties__', False):
            props = props.union(b.__properties__)
            props = _extend_properties(props, b.__bases__)
    return props

class PSetMeta(type):
    '''Collects every `prop_' method of a class (and its bases)
    into the `__properties__' frozenset
    '''
    def __new__(mcls, name, bases, namespace):
        cls = super().__new__(mcls, name, bases, namespace)
        props = {name for name in namespace.keys() if name.startswith('prop_')}
        props = _extend_properties(props, bases)
        cls.__properties__ = frozenset(props)
        return cls

    def __iter__(self):
        return iter(sorted(self.__properties__))

    def __len__(self):
        return len(self.__properties__)

class PropertySet(metaclass=PSetMeta):
    '''A group of related properties, each a `prop_' method returning a Property
    '''
    def __iter__(self):
        return iter(sorted(self.__properties__))

    def __len__(self):
        return len(self.__properties__)

    def properties(self):
        '''The (name, Property) pairs of this set, in name order
        '''
        for name in self:
            prop = getattr(self, name)()
            prop.name = name
            yield name, prop

def unittest_wrapper(depth):
    '''Turns a PropertySet into a unittest.TestCase
    with a `test_prop_...' method for every property, checked to `depth'
    '''
    def _wrapper(pset):
        class NewPSet(pset, unittest.TestCase):
            pass

        for p in NewPSet.__properties__:
            def _f(self, p=p):
                self.depth = depth
                out = runner.check(depth, getattr(self, p), outfile=io.StringIO())
                # raise other exceptions out
                if isinstance(out, clauses.UnrelatedException):
                    raise out.reason

                self.assertIsInstance(out, clauses.Success, msg=repr(out))

            setattr(NewPSet, 'test_{}'.format(p), _f)

        NewPSet.__name__ = pset.__name__
        NewPSet.__qualname__ = pset.__qualname__
        NewPSet.__module__ = pset.__module__
        return NewPSet
    return _wrapper
