'''
    Classes and functions used for function overloading
'''
import inspect
from dataclasses import dataclass

import structlog

from boxdispatch.utils.boxing import Typed, box, is_primitive, type_name, widens_to, wrapper_type

log = structlog.get_logger(__name__)

STRICT = 'strict'
BOXING = 'boxing'


class OverloadError(TypeError):
    pass


class UntypedArgumentError(OverloadError):
    pass


class NoMatchingOverloadError(OverloadError):
    pass


class AmbiguousOverloadError(OverloadError):
    pass


@dataclass(frozen=True)
class Resolution:
    func: object
    param_types: tuple
    phase: str

    @property
    def boxed(self) -> bool:
        return self.phase == BOXING


def signature(func) -> tuple:
    '''
        Annotated parameter types of func, skipping self and cls
    '''

    try:
        # string annotations from `from __future__ import annotations`
        params = list(inspect.signature(func, eval_str=True).parameters.values())
    except NameError as exc:
        raise OverloadError(f'{func.__qualname__}: cannot evaluate annotation: {exc}') from exc
    if params and params[0].name in ('self', 'cls'):
        params = params[1:]
    param_types = []
    for param in params:
        if param.kind not in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            raise OverloadError(f'{func.__qualname__}: only positional parameters can be overloaded')
        if param.annotation is inspect.Parameter.empty:
            raise OverloadError(f'{func.__qualname__}: parameter {param.name!r} has no type annotation')
        if not isinstance(param.annotation, type):
            raise OverloadError(
                f'{func.__qualname__}: parameter {param.name!r} is annotated with {param.annotation!r}, not a class'
            )
        param_types.append(param.annotation)
    return tuple(param_types)


def format_signature(name: str, param_types) -> str:
    return f"{name}({', '.join(type_name(tp) for tp in param_types)})"


def assignable(static_type: type, param_type: type, phase: str) -> bool:
    if is_primitive(static_type):
        if static_type is param_type or widens_to(static_type, param_type):
            return True
        if phase == STRICT:
            return False
        static_type = wrapper_type(static_type)
    if is_primitive(param_type):
        # reference types are never unboxed
        return False
    return issubclass(static_type, param_type)


def convert(arg: Typed, param_type: type):
    '''
        Value passed to the parameter: widened if both sides are primitives,
        boxed if only the argument is
    '''

    if not is_primitive(arg.static_type) or arg.static_type is param_type:
        return arg.value
    if is_primitive(param_type):
        return param_type(arg.value)
    return box(arg.value, arg.static_type)


def more_specific(a: tuple, b: tuple) -> bool:
    return all(assignable(x, y, STRICT) for x, y in zip(a, b))


class overload:
    # This class will act as the decorator directly
    functions = {}

    def __init__(self, func):
        self.func = func
        self.name = f'{func.__module__}.{func.__qualname__}'
        self.register(func)

    def register(self, func):
        param_types = signature(func)
        overload.functions.setdefault(self.name, {})[param_types] = func

    @classmethod
    def signatures(cls, name: str) -> list:
        return list(cls.functions.get(name, {}))

    @classmethod
    def resolve(cls, name: str, *static_types) -> Resolution:
        '''
            Select the overload of name for the given declared argument types

            Args:
                name (str): Qualified name of the overload set
                static_types (type): Declared type of each argument

            Returns:
                Resolution: The selected function, its parameter types and the phase that selected it
        '''

        candidates = {
            param_types: func
            for param_types, func in cls.functions.get(name, {}).items()
            if len(param_types) == len(static_types)
        }

        for phase in (STRICT, BOXING):
            applicable = [
                param_types for param_types in candidates
                if all(assignable(st, pt, phase) for st, pt in zip(static_types, param_types))
            ]
            if not applicable:
                continue

            best = [
                a for a in applicable
                if all(a == b or more_specific(a, b) for b in applicable)
            ]
            if len(best) != 1:
                options = ', '.join(format_signature(name, p) for p in applicable)
                raise AmbiguousOverloadError(
                    f'Ambiguous call {format_signature(name, static_types)}: candidates {options}'
                )

            resolution = Resolution(candidates[best[0]], best[0], phase)
            log.debug(
                'overload_resolved',
                name=name,
                static_types=[type_name(tp) for tp in static_types],
                phase=phase,
                selected=format_signature(name, best[0]),
            )
            return resolution

        raise NoMatchingOverloadError(f'No matching function for arguments {format_signature(name, static_types)}')

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return _BoundOverload(self, instance)

    def __call__(self, *args):
        return self._dispatch((), args)

    def _dispatch(self, bound: tuple, args: tuple):
        for arg in args:
            if not isinstance(arg, Typed):
                raise UntypedArgumentError(
                    f'{self.name}: argument {arg!r} has no declared type, wrap it with lit() or Typed()'
                )

        static_types = tuple(arg.static_type for arg in args)
        resolution = overload.resolve(self.name, *static_types)

        values = [convert(arg, pt) for arg, pt in zip(args, resolution.param_types)]
        return resolution.func(*bound, *values)


class _BoundOverload:

    def __init__(self, overloaded: overload, instance):
        self.overloaded = overloaded
        self.instance = instance

    def __call__(self, *args):
        return self.overloaded._dispatch((self.instance,), args)
