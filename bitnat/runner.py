# runner.py - Run properties and report their outcomes
import sys
import logging
import traceback

from . import clauses
from . import grapher
from . import config
from .natural import Natural

__all__ = [
    'check',
]

log = logging.getLogger('runner')

def _print_arg(counter, outfile=sys.stdout):
    for arg, value in counter.arguments.items():
        outfile.write('  {}={!r}\n'.format(arg, value))

def _print_assertions(assertions, outfile=sys.stdout):
    if assertions:
        outfile.write(' passed assertions:\n')

        for a in assertions:
            outfile.write(' >  assert,    {}\n'.format(a))

def _print_reason(outcome, outfile=sys.stdout):
    _print_assertions(outcome.assertions, outfile=outfile)

    if isinstance(outcome, clauses.AssertionCounter):
        outfile.write('\n')
        outfile.write(' failure reason: {}\n'.format(outcome.message))

def _print_child(outcome, outfile=sys.stdout):
    child = outcome.child_outcome
    while child is not None:
        outfile.write('{} ->\n'.format(child.prop.name))
        if isinstance(child, clauses.Counter):
            outfile.write(' counterexample:\n')
            _print_arg(child.reason, outfile=outfile)
        elif isinstance(child, clauses.Witness):
            outfile.write(' witness:\n')
            _print_arg(child.reason, outfile=outfile)
        _print_reason(child, outfile=outfile)
        child = child.child_outcome

def _print_prop_summary(prop, outcome, outfile=sys.stdout):
    outfile.write('After {} call(s)\n'.format(outcome.state['calls']))
    outfile.write('To depth {}\n'.format(outcome.state['depth']))
    outfile.write('In property `{}`\n'.format(prop.name))
    outfile.write('\n')

def _print_success(prop, success, outfile=sys.stdout):
    outfile.write('-' * 80 + '\n')

    if isinstance(success, clauses.Witness):
        outfile.write('Found witness\n')
        _print_prop_summary(prop, success, outfile=outfile)
        outfile.write('{} ->\n'.format(success.prop.name))
        outfile.write(' witness:\n')
        _print_arg(success.reason, outfile=outfile)
        _print_reason(success, outfile=outfile)
        _print_child(success, outfile=outfile)
    else:
        outfile.write('Found no counterexample\n')
        _print_prop_summary(prop, success, outfile=outfile)

    outfile.write('\nOK\n')

def _print_failure(prop, failure, outfile=sys.stdout):
    outfile.write('=' * 80 + '\n')
    outfile.write('Failure\n')
    _print_prop_summary(prop, failure, outfile=outfile)
    outfile.write('{} ->\n'.format(failure.prop.name))

    if isinstance(failure, clauses.Counter):
        outfile.write(' counterexample:\n')
        _print_arg(failure.reason, outfile=outfile)
        _print_reason(failure, outfile=outfile)
        _print_child(failure, outfile=outfile)
    elif isinstance(failure, clauses.UnrelatedException):
        outfile.write(' exception:\n')
        outfile.write('\n')
        e = failure.reason
        traceback.print_exception(type(e), e, e.__traceback__, file=outfile)
    elif isinstance(failure, clauses.NoWitness):
        outfile.write(' no witness.\n')
    else:
        outfile.write(' {}\n'.format(failure.reason))

    outfile.write('\nFAIL\n')

def _pretty_print(prop, outcome, outfile=sys.stdout):
    if isinstance(outcome, clauses.Success):
        _print_success(prop, outcome, outfile=outfile)
    else:
        _print_failure(prop, outcome, outfile=outfile)

def _render_counter(outcome):
    naturals = [
        v
        for v in outcome.reason.arguments.values()
        if isinstance(v, Natural)
    ]

    if naturals:
        grapher.render(naturals, 'counterexample.gv')

def check(depth, prop, outfile=sys.stdout):
    '''Check the Property 'prop' (or every property of a PropertySet 'prop')
    to depth 'depth', printing a report to 'outfile' and returning the Outcome

    If 'prop' is a function instead it is called to get the Property
    and the function's name is given to it.
    A depth of None means config.CONFIG.depth.

    def prop_add_zero():
        return forall(Natural, lambda n: n + ZERO == n)

    # both of these are valid
    > check(3, prop_add_zero)
    > check(3, prop_add_zero())
    '''
    if depth is None:
        depth = config.CONFIG.depth

    if isinstance(prop, type) and hasattr(prop, '__properties__'):
        prop = prop()

    if hasattr(prop, '__properties__'):
        return _check_set(depth, prop, outfile)

    if not isinstance(prop, clauses.Property) and callable(prop):
        f = prop
        prop = f()
        prop.name = f.__name__

    return _check_prop(depth, prop, outfile)

def _check_set(depth, pset, outfile):
    for _, p in pset.properties():
        out = _check_prop(depth, p, outfile)
        if isinstance(out, clauses.Failure):
            return out

        outfile.write('~' * 80)
        outfile.write('\n')

    return clauses.UnitSuccess(None)

def _check_prop(depth, prop, outfile):
    log.debug('check {} to depth {}'.format(prop.name, depth))
    outs = prop.run(depth)
    n = 0
    d = 1
    dots = 0
    try:
        while True:
            try:
                next(outs)
            except StopIteration:
                raise
            except Exception as e:
                raise StopIteration(clauses.UnrelatedException(prop, e))

            if n % d == 0:
                dots += 1
                print('.', flush=True, end='', file=outfile)
                if dots % 80 == 0:
                    print('', file=outfile)

            if n == d * 10:
                d *= 10
                print('(x{})'.format(d), flush=True, end='', file=outfile)

            n += 1
    except StopIteration as e:
        outcome = e.value

    outcome.state['calls'] = n
    outcome.state['depth'] = depth

    if isinstance(outcome, clauses.UnrelatedException):
        print('E', file=outfile)
    elif isinstance(outcome, clauses.Failure):
        print('F', file=outfile)
    else:
        print('', file=outfile)

    log.info('{}: {} after {} call(s)'.format(prop.name, outcome.__class__.__name__, n))
    _pretty_print(prop, outcome, outfile=outfile)

    if config.CONFIG.graphviz and isinstance(outcome, clauses.Counter):
        _render_counter(outcome)

    return outcome
