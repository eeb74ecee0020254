'''
    fly("test") picks fly(str), fly(56) boxes 56 to an int and picks fly(object)
'''

from boxdispatch import Dispatcher, lit, overload
from boxdispatch.config.logging import configure_logging


if __name__ == '__main__':

    configure_logging(verbose=False)

    obj = Dispatcher()
    obj.fly(lit('test'))
    obj.fly(lit(56))
    print()

    for static_type in (str, object):
        resolution = overload.resolve(Dispatcher.fly.name, static_type)
        print(f'{static_type.__name__:>6} -> {resolution.param_types[0].__name__}, boxed: {resolution.boxed}')
