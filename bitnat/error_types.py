class InvalidArgument(ValueError):
    '''An operation was given an absent or malformed operand
    '''

class Underflow(InvalidArgument):
    '''A subtraction would produce a negative result
    '''

class MissingStrategyError(Exception):
    pass
