import io
import subprocess
import sys

import numpy as np

from boxdispatch.core.dispatcher import Dispatcher
from boxdispatch.utils.boxing import Typed, lit


def test_text_argument_selects_string_overload():
    out = io.StringIO()
    Dispatcher(out).fly(lit('test'))
    assert out.getvalue() == 'string '


def test_int_argument_selects_object_overload():
    out = io.StringIO()
    Dispatcher(out).fly(lit(56))
    assert out.getvalue() == 'object '


def test_call_order_is_preserved():
    out = io.StringIO()
    dispatcher = Dispatcher(out)
    dispatcher.fly(lit('test'))
    dispatcher.fly(lit(56))
    assert out.getvalue() == 'string object '


def test_repeated_calls_are_identical():
    out = io.StringIO()
    dispatcher = Dispatcher(out)
    for _ in range(3):
        dispatcher.fly(lit(56))
    assert out.getvalue() == 'object ' * 3


def test_declared_type_wins_over_runtime_type():
    out = io.StringIO()
    Dispatcher(out).fly(Typed('test', object))
    assert out.getvalue() == 'object '


def test_other_primitives_are_boxed():
    out = io.StringIO()
    dispatcher = Dispatcher(out)
    dispatcher.fly(lit(True))
    dispatcher.fly(Typed(np.int64(7), np.int64))
    assert out.getvalue() == 'object object '


def test_run_writes_to_stdout(capsys):
    Dispatcher().run()
    assert capsys.readouterr().out == 'string object '


def test_unconfigured_library_keeps_stdout_clean():
    code = 'from boxdispatch import Dispatcher; Dispatcher().run()'
    result = subprocess.run([sys.executable, '-c', code], capture_output=True, text=True, check=True)
    assert result.stdout == 'string object '


def test_redirected_output_leaves_stdout_empty(capsys):
    out = io.StringIO()
    Dispatcher(out).fly(lit('test'))
    assert out.getvalue() == 'string '
    assert capsys.readouterr().out == ''
