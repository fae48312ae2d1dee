""" Generation of driver modules and the JavaScript that runs them.

A driver module imports the function under test from the instance
``ins`` under the import module name ``""``, calls it with the literal
arguments from the test script and exports a ``run`` function that
reports the outcome.

Return values are checked inside the driver, in wasm:

* scalars compare with ``T.eq``.
* vectors compare lane wise and reduce with ``i8x16.all_true``. An eq
  sets all bits of a matching lane, so checking every byte is the same
  as checking every lane. ``i64x2`` is compared as ``i32x4``.
* when an expected value is a nan, both sides are reinterpreted as
  integers and masked to the exponent and quiet bit before comparing.
  Sign and payload of nans are not checked.
"""

from .common import MultiResultUnsupported
from .consts import parse_const, declared_type, LANE_SHAPES
from .consts import is_nan_literal, canonicalize_nan


ENTRY = 'run'

# Integer view and nan mask per float type
INT_VIEW = {'f32': 'i32', 'f64': 'i64'}
NAN_MASKS = {'f32': '0x7fc00000', 'f64': '0x7ff8000000000000'}
INT_SHAPE = {'f32x4': 'i32x4', 'f64x2': 'i64x2'}


def template_literal(text):
    """ Quote text as a JavaScript template literal """
    return '`{}`'.format(text.replace('`', '\\`').replace('${', '\\${'))


def compile_and_instantiate(text, imports=None):
    expr = 'new WebAssembly.Module(wasmTextToBinary({}))'.format(
        template_literal(text))
    if imports:
        return 'new WebAssembly.Instance({}, {})'.format(expr, imports)
    return 'new WebAssembly.Instance({})'.format(expr)


def compare_shape(shape):
    """ There is no i64x2.eq to rely on, i32 lanes give the same answer """
    return 'i32x4' if shape == 'i64x2' else shape


def func_type(params, results):
    clauses = []
    if params:
        clauses.append('(param {})'.format(' '.join(params)))
    if results:
        clauses.append('(result {})'.format(' '.join(results)))
    return ' '.join(clauses)


def call_expr(args):
    return ' '.join(['(call $f'] + [' '.join(arg) for arg in args]) + ')'


def driver_module(name, params, results, body, result=True):
    """ Text of a driver module importing name with the given signature """
    signature = func_type(params, results)
    run_type = ' (result i32)' if result else ''
    return '\n'.join([
        '(module',
        '  (import "" {} (func $f{}))'.format(
            name, ' ' + signature if signature else ''),
        '  (func (export "{}"){}'.format(ENTRY, run_type),
        '    {}))'.format(body),
    ])


def compare_expr(actual, expected_group):
    """ An i32 expression that is 1 when actual equals the expectation """
    expected = parse_const(expected_group)
    expected_text = ' '.join(canonicalize_nan(t) for t in expected_group)
    has_nan = any(is_nan_literal(v) for v in expected.values)

    if not expected.is_vector:
        typ = expected.typ
        if has_nan and typ in INT_VIEW:
            ityp = INT_VIEW[typ]
            mask = '({}.const {})'.format(ityp, NAN_MASKS[typ])

            def masked(x):
                return '({0}.and ({0}.reinterpret_{1} {2}) {3})'.format(
                    ityp, typ, x, mask)

            return '({}.eq {} {})'.format(
                ityp, masked(actual), masked(expected_text))
        return '({}.eq {} {})'.format(typ, actual, expected_text)

    shape = expected.typ
    if has_nan and shape in INT_SHAPE:
        lane_type = LANE_SHAPES[shape][0]
        lanes = [
            NAN_MASKS[lane_type] if is_nan_literal(v) else '-1'
            for v in expected.values]
        int_shape = INT_SHAPE[shape]
        mask = '(v128.const {} {})'.format(int_shape, ' '.join(lanes))
        return '(i8x16.all_true ({}.eq (v128.and {} {}) (v128.and {} {})))'\
            .format(compare_shape(int_shape), actual, mask,
                    expected_text, mask)
    return '(i8x16.all_true ({}.eq {} {}))'.format(
        compare_shape(shape), actual, expected_text)


def assert_return_driver(invoke, results):
    """ Driver module text for an assert_return directive """
    if len(results) > 1:
        raise MultiResultUnsupported(
            'Multiple results are not supported: {}'.format(invoke.name))
    params = [declared_type(parse_const(arg).typ) for arg in invoke.args]
    result_types = [declared_type(parse_const(r).typ) for r in results]
    call = call_expr(invoke.args)
    if results:
        body = compare_expr(call, results[0])
    else:
        body = '{}\n    (i32.const 1)'.format(call)
    return driver_module(invoke.name, params, result_types, body)


def assert_trap_driver(invoke, signature):
    """ Driver module text for an assert_trap directive """
    if len(signature.results) > 1:
        raise MultiResultUnsupported(
            'Multiple results are not supported: {}'.format(invoke.name))
    call = call_expr(invoke.args)
    body = '(drop {})'.format(call) if signature.results else call
    return driver_module(
        invoke.name, signature.params, signature.results, body, result=False)


def instance_statements(source):
    return ['var ins = {};'.format(compile_and_instantiate(source.text()))]


def run_driver_statement(driver):
    return 'var run = {};'.format(
        compile_and_instantiate('\n' + driver + '\n', "{'': ins.exports}"))


def return_statements(driver):
    return [
        run_driver_statement(driver),
        'assertEq(run.exports.{}(), 1);'.format(ENTRY),
    ]


def trap_statements(driver):
    return [
        run_driver_statement(driver),
        'var trapped = false;',
        'try {{ run.exports.{}(); }} catch (e) {{ trapped = true; }}'.format(
            ENTRY),
        'assertEq(trapped, true);',
    ]


def malformed_statements(source):
    return [
        'var error = null;',
        'try {{ wasmTextToBinary({}); }} catch (e) {{ error = e; }}'.format(
            template_literal(source.text())),
        'assertEq(error !== null, true);',
        'assertEq(error instanceof SyntaxError, true);',
    ]


def invalid_statements(source):
    return [
        'var bin = wasmTextToBinary({});'.format(
            template_literal(source.text())),
        'assertEq(WebAssembly.validate(bin), false);',
        'var error = null;',
        'try { new WebAssembly.Module(bin); } catch (e) { error = e; }',
        'assertEq(error instanceof WebAssembly.CompileError, true);',
    ]
