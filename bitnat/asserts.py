import contextlib

__all__ = [
    'assertTrue',
    'assertFalse',
    'assertEqual',
    'assertNotEqual',
    'assertRaises',
    'change_assertions_log',
]

AssertionsLogger = None

@contextlib.contextmanager
def change_assertions_log(log=None):
    '''Collect the messages of passing assertions into the list `log'
    for the duration of the block
    '''
    global AssertionsLogger
    old_log = AssertionsLogger
    AssertionsLogger = log
    try:
        yield
    finally:
        AssertionsLogger = old_log

def _assert(p, succ_m, fail_m):
    if not p:
        raise AssertionError(fail_m)
    elif AssertionsLogger is not None:
        AssertionsLogger.append(succ_m)

    return True

# UnitTest style assertions
def assertTrue(a, fmt='{a}', fmt_fail='not {a}'):
    return _assert(a, fmt.format(a=a), fmt_fail.format(a=a))

def assertFalse(a, fmt='not {a}', fmt_fail='{a}'):
    return _assert(not a, fmt.format(a=a), fmt_fail.format(a=a))

def assertEqual(a, b, fmt='{a} == {b}', fmt_fail='{a} != {b}'):
    return _assert(a == b, fmt.format(a=a, b=b), fmt_fail.format(a=a, b=b))

def assertNotEqual(a, b, fmt='{a} != {b}', fmt_fail='{a} == {b}'):
    return _assert(a != b, fmt.format(a=a, b=b), fmt_fail.format(a=a, b=b))

def assertRaises(exc, f, *args):
    '''Assert that f(*args) raises `exc'
    '''
    name = getattr(f, '__name__', str(f))
    call = '{}({})'.format(name, ', '.join(map(repr, args)))
    try:
        v = f(*args)
    except exc:
        return _assert(True, '{} raises {}'.format(call, exc.__name__), None)

    return _assert(False, None, '{} returned {!r}, expected {}'.format(call, v, exc.__name__))
