import enum

__all__ = [
    'Bit',
]

class Bit(enum.Enum):
    '''A single binary digit
    '''
    ZERO = '0'
    ONE = '1'

    @classmethod
    def of(cls, i):
        '''The bit for the low digit of int `i'
        '''
        return cls.ONE if i & 1 else cls.ZERO

    def __int__(self):
        return 1 if self is Bit.ONE else 0

    def __str__(self):
        return self.value

    def __repr__(self):
        return 'Bit.{}'.format(self.name)
