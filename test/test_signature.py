import unittest

from wastjs.signature import extract_signatures, FunctionSignature
from wastjs.tokenizer import tokenize


class SignatureTestCase(unittest.TestCase):
    def signatures(self, text):
        return extract_signatures(tokenize(text))

    def test_exported_function(self):
        signatures = self.signatures("""
        (module
          (func (export "f") (param i32 i32) (result i32)
            (i32.add (local.get 0) (local.get 1))))
        """)
        self.assertEqual(
            {'f': FunctionSignature(['i32', 'i32'], ['i32'])}, signatures)

    def test_not_exported(self):
        signatures = self.signatures("""
        (module
          (func $g (param i32))
          (func (param i64))
          (func (export "h")))
        """)
        self.assertEqual({'h': FunctionSignature([], [])}, signatures)

    def test_repeated_clauses(self):
        signatures = self.signatures(
            '(module (func (export "f") (param i32) (param f64 v128) '
            '(result f32) (unreachable)))')
        self.assertEqual(
            FunctionSignature(['i32', 'f64', 'v128'], ['f32']),
            signatures['f'])

    def test_named_function_and_params(self):
        signatures = self.signatures(
            '(module $M (type $t (func)) (func $f (export "f") '
            '(param $x i32) (param $y i64) (local i32)))')
        self.assertEqual(
            {'f': FunctionSignature(['i32', 'i64'], [])}, signatures)

    def test_several_exports(self):
        signatures = self.signatures(
            '(module (func (export "a") (export "b") (result i64) '
            '(i64.const 0)))')
        self.assertEqual(['a', 'b'], list(signatures))
        self.assertEqual(signatures['a'], signatures['b'])

    def test_last_export_wins(self):
        signatures = self.signatures(
            '(module (func (export "f") (param i32)) '
            '(func (export "f") (param f32)))')
        self.assertEqual(FunctionSignature(['f32'], []), signatures['f'])

    def test_other_fields(self):
        signatures = self.signatures(
            '(module (memory 1) (global i32 (i32.const 0)) '
            '(export "mem" (memory 0)))')
        self.assertEqual({}, signatures)
