import logging

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    pkg = logging.getLogger('boxdispatch')
    pkg_level = pkg.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    pkg.setLevel(pkg_level)
