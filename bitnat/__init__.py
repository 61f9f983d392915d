import logging
import logging.config

import sys

from .bits import *
from .natural import *
from .error_types import *
from .strategy import *
from .clauses import *
from .asserts import *
from .pset import *
from .laws import *
from .config import CONFIG
from . import runner

def check(depth, testable, outfile=sys.stdout):
    '''Checks some testable (Property, function returning one, PropertySet)
    to depth 'depth'
    '''
    return runner.check(depth, testable, outfile=outfile)

def enableLogging(debug=False):
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,

        'formatters': {
            'default': {
                'format': '[{asctime}] {levelname}, {name}: {message}',
                'datefmt': '%Y/%m/%d %H:%M:%S',
                'style': '{',
            },
        },

        'handlers': {
            'stdout': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
            },
        },

        'root': {
            'level': logging.DEBUG if debug else logging.INFO,
            'handlers': ['stdout'],
        },
    })
