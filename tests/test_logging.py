import json
import logging

import numpy as np

from boxdispatch.config.logging import configure_logging
from boxdispatch.utils.overload import overload


def test_verbose_enables_debug():
    configure_logging(verbose=True)
    assert logging.getLogger('boxdispatch').level == logging.DEBUG
    assert logging.getLogger().level == logging.WARNING


def test_default_is_warning():
    configure_logging()
    assert logging.getLogger('boxdispatch').level == logging.WARNING


def test_resolution_is_logged_as_json(capsys):
    @overload
    def f(x: str):
        pass

    @overload
    def f(x: object):
        pass

    configure_logging(verbose=True, log_json=True)
    overload.resolve(f.name, np.int32)

    lines = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.strip()]
    events = [line for line in lines if line['event'] == 'overload_resolved']
    assert events
    assert events[-1]['phase'] == 'boxing'
    assert events[-1]['static_types'] == ['int']
