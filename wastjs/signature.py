""" Recover exported function signatures from a module's tokens.

assert_trap directives only name the function to call, so the import
declaration of the driver module has to be rebuilt from the module
under test.
"""

import logging
from collections import namedtuple
from .tokstream import TokenStream


logger = logging.getLogger('wastjs.signature')

FunctionSignature = namedtuple('FunctionSignature', ['params', 'results'])


def strip_quotes(name):
    return name[1:-1] if name.startswith('"') else name


def extract_signatures(module_tokens):
    """ Map export name to FunctionSignature for all exported functions.

    Only ``func`` fields with inline ``(export "name")`` clauses are
    found. A later export with the same name replaces an earlier one.
    """
    signatures = {}
    ts = TokenStream(module_tokens)
    ts.match(['(', 'module'])
    while not ts.peek([')']):
        if ts.peek(['(']):
            field = TokenStream(ts.collect())
            if field.eat(['(', 'func']):
                for name, signature in parse_func_field(field):
                    signatures[name] = signature
        else:
            ts.get()  # module id
    logger.debug('Exported functions: %s', ', '.join(signatures))
    return signatures


def parse_func_field(ts):
    """ Yield (export name, signature) for a func field, without its head """
    if not ts.peek(['(']) and ts.peek_prefix(1)[0].startswith('$'):
        ts.get()
    names = []
    while ts.eat(['(', 'export']):
        names.append(strip_quotes(ts.match_string()))
        ts.match([')'])
    if not names:
        return

    if ts.peek(['(', 'type']):
        ts.collect()
    params = []
    while ts.eat(['(', 'param']):
        params.extend(read_value_types(ts))
    results = []
    while ts.eat(['(', 'result']):
        results.extend(read_value_types(ts))

    signature = FunctionSignature(params, results)
    for name in names:
        yield name, signature


def read_value_types(ts):
    """ Read the types of a param or result clause, up to its ')' """
    types = []
    while not ts.eat([')']):
        token = ts.get()
        if not token.startswith('$'):
            types.append(token)
    return types
