""" Value types and constant expressions.

A constant expression is a token group such as ``( i32.const 1 )`` or
``( v128.const f32x4 1.0 2.0 nan 4.0 )``. For vector constants the
"type" is the lane shape (e.g. ``f32x4``), since that is what the
comparison code needs. Declarations use ``declared_type`` to get back
to ``v128``.
"""

from collections import namedtuple
from .common import UnknownConstKind


SCALAR_CONSTS = {
    'i32.const': 'i32',
    'i64.const': 'i64',
    'f32.const': 'f32',
    'f64.const': 'f64',
}

# Lane shape -> (lane type, lane count)
LANE_SHAPES = {
    'i8x16': ('i8', 16),
    'i16x8': ('i16', 8),
    'i32x4': ('i32', 4),
    'i64x2': ('i64', 2),
    'f32x4': ('f32', 4),
    'f64x2': ('f64', 2),
}

NAN_SENTINELS = ('nan:canonical', 'nan:arithmetic')

Constant = namedtuple('Constant', ['typ', 'is_vector', 'values'])


def get_type_from_const(group):
    """ Determine the value type of a constant expression group """
    kind = group[1] if len(group) > 1 else None
    if kind in SCALAR_CONSTS:
        return SCALAR_CONSTS[kind]
    elif kind == 'v128.const':
        return group[2]
    raise UnknownConstKind('Not a constant: {}'.format(' '.join(group)))


def parse_const(group):
    """ Split a constant group into its type and literal value tokens """
    typ = get_type_from_const(group)
    is_vector = group[1] == 'v128.const'
    start = 3 if is_vector else 2
    values = group[start:-1]
    return Constant(typ, is_vector, values)


def declared_type(typ):
    """ The type to use in a signature declaration """
    return 'v128' if typ in LANE_SHAPES else typ


def is_nan_literal(value):
    return value.lstrip('+-').startswith('nan')


def canonicalize_nan(value):
    """ Both sentinels become a plain nan, their difference is not checked """
    return 'nan' if value in NAN_SENTINELS else value
