__version__ = '0.1.0'

import logging
import sys

import structlog

# library default until configure_logging() runs: warnings and up, on stderr
if not structlog.is_configured():
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )

from boxdispatch.core.dispatcher import Dispatcher
from boxdispatch.utils.boxing import Typed, box, lit
from boxdispatch.utils.overload import (
    overload,
    OverloadError,
    NoMatchingOverloadError,
    AmbiguousOverloadError,
    UntypedArgumentError,
)

__all__ = [
    'Dispatcher',
    'Typed',
    'box',
    'lit',
    'overload',
    'OverloadError',
    'NoMatchingOverloadError',
    'AmbiguousOverloadError',
    'UntypedArgumentError',
]
