'''
    Dispatcher with a text overload and a general object overload of fly
'''

import sys

import structlog

from boxdispatch.utils.boxing import lit
from boxdispatch.utils.overload import overload

log = structlog.get_logger(__name__)


class Dispatcher:
    '''
        fly(str) writes "string ", fly(object) writes "object ".
        The overload is picked from the declared type of the argument, so an
        int literal is boxed and ends up in the object overload.

        Args:
            stream: Where the literals are written, defaults to sys.stdout
    '''

    def __init__(self, stream=None):
        self.stream = stream

    def write(self, text: str):
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(text)
        stream.flush()

    @overload
    def fly(self, s: str):
        self.write('string ')

    @overload
    def fly(self, o: object):
        self.write('object ')

    def run(self):
        log.debug('dispatch_started')
        self.fly(lit('test'))
        # 56 is an int literal: boxed before it can reach fly(object)
        self.fly(lit(56))
        log.debug('dispatch_finished')
