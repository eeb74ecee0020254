'''
    Declared (static) types for call-site arguments and boxing of primitives.

    Primitive types are modelled with numpy scalar types. They are Python
    classes, but for resolution purposes they are not assignable to reference
    types until they have been boxed to their wrapper type.
'''

from dataclasses import dataclass
from typing import Any

import numpy as np

# primitive -> wrapper
PRIMITIVES: dict[type, type] = {
    np.int8: int,
    np.int16: int,
    np.int32: int,
    np.int64: int,
    np.float32: float,
    np.float64: float,
    np.bool_: bool,
}

# source-level names for primitive and reference types
TYPE_NAMES: dict[str, type] = {
    'byte': np.int8,
    'short': np.int16,
    'int': np.int32,
    'long': np.int64,
    'float': np.float32,
    'double': np.float64,
    'boolean': np.bool_,
    'str': str,
    'object': object,
}


@dataclass(frozen=True)
class Typed:
    '''
        An argument together with the static type declared at its call site

        Args:
            value: The runtime value
            static_type (type): The declared type resolution is based on
    '''

    value: Any
    static_type: type

    def __repr__(self) -> str:
        return f'Typed({self.value!r}, {type_name(self.static_type)})'


def is_primitive(static_type: type) -> bool:
    return static_type in PRIMITIVES


def type_name(static_type: type) -> str:
    for name, tp in TYPE_NAMES.items():
        if tp is static_type:
            return name
    return getattr(static_type, '__name__', repr(static_type))


def lit(value) -> Typed:
    '''
        Type a literal the way a compiler types a source literal.
        Text is a str, integers are 32 bit ints (64 bit when they do not fit), reals are doubles.
    '''

    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return Typed(np.bool_(value), np.bool_)
    if isinstance(value, int):
        # too big for an int: a long literal, as with an L suffix
        for static_type in (np.int32, np.int64):
            info = np.iinfo(static_type)
            if info.min <= value <= info.max:
                return Typed(static_type(value), static_type)
        raise ValueError(f'integer literal {value} out of range for long')
    if isinstance(value, float):
        return Typed(np.float64(value), np.float64)
    return Typed(value, type(value))


def wrapper_type(static_type: type) -> type:
    '''
        Reference type a primitive boxes to. Reference types are returned unchanged.
    '''
    return PRIMITIVES.get(static_type, static_type)


def box(value, static_type: type):
    '''
        Convert a primitive value to its wrapper representation

        Args:
            value: A value whose declared type is static_type
            static_type (type): The declared type of value

        Returns:
            The boxed value, or value itself when static_type is a reference type
    '''

    if not is_primitive(static_type):
        return value
    wrapper = PRIMITIVES[static_type]
    return wrapper(np.asarray(value, dtype=static_type).item())


def widens_to(source: type, target: type) -> bool:
    '''
        Primitive widening without boxing, e.g. int -> long or int -> double
    '''

    if not (is_primitive(source) and is_primitive(target)):
        return False
    if source is np.bool_ or target is np.bool_:
        return source is target
    return bool(np.can_cast(source, target, casting='safe'))


def parse_literal(text: str, static_type: type):
    '''
        Parse command line text into a value of the given declared type.
        Raises ValueError on text that does not represent such a value.
    '''

    if static_type is np.bool_:
        lowered = text.strip().lower()
        if lowered not in ('true', 'false'):
            raise ValueError(f'not a boolean literal: {text!r}')
        return np.bool_(lowered == 'true')
    if is_primitive(static_type):
        info = np.iinfo(static_type) if np.issubdtype(static_type, np.integer) else None
        if info is not None:
            number = int(text)
            if not info.min <= number <= info.max:
                raise ValueError(f'{text} out of range for {type_name(static_type)}')
            return static_type(number)
        return static_type(float(text))
    return text
