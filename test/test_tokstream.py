import unittest

from pytest import raises
from hypothesis import given, strategies as st

from wastjs.tokstream import TokenStream
from wastjs.common import StreamExhausted, TypeMismatch
from wastjs.common import UnmatchedPattern, UnbalancedGroup


class TokenStreamTestCase(unittest.TestCase):
    def setUp(self):
        self.ts = TokenStream(
            ['(', 'invoke', '"f"', '(', 'i32.const', '1', ')', ')'])

    def test_peek(self):
        self.assertTrue(self.ts.peek(['(', 'invoke']))
        self.assertFalse(self.ts.peek(['(', 'module']))
        self.assertTrue(self.ts.peek([]))
        self.assertEqual(0, self.ts.i)

    def test_peek_beyond_end(self):
        ts = TokenStream(['(', 'a'])
        self.assertFalse(ts.peek(['(', 'a', ')']))

    def test_peek_prefix(self):
        self.assertEqual(['(', 'invoke', '"f"'], self.ts.peek_prefix(3))
        ts = TokenStream(['a'])
        self.assertEqual(['a'], ts.peek_prefix(5))

    def test_get(self):
        self.assertEqual('(', self.ts.get())
        self.assertEqual('invoke', self.ts.get())

    def test_get_at_end(self):
        ts = TokenStream([])
        self.assertTrue(ts.at_end())
        with self.assertRaises(StreamExhausted):
            ts.get()

    def test_match_string(self):
        self.ts.match(['(', 'invoke'])
        self.assertEqual('"f"', self.ts.match_string())
        with self.assertRaises(TypeMismatch):
            self.ts.match_string()

    def test_match(self):
        self.ts.match(['(', 'invoke'])
        self.assertEqual(2, self.ts.i)
        with self.assertRaises(UnmatchedPattern):
            self.ts.match([')'])
        self.assertEqual(2, self.ts.i)

    def test_eat(self):
        self.assertFalse(self.ts.eat(['(', 'module']))
        self.assertEqual(0, self.ts.i)
        self.assertTrue(self.ts.eat(['(', 'invoke']))
        self.assertEqual(2, self.ts.i)

    def test_collect(self):
        self.ts.skip(3)
        self.assertEqual(['(', 'i32.const', '1', ')'], self.ts.collect())
        self.assertEqual([], self.ts.collect())
        self.ts.match([')'])
        self.assertTrue(self.ts.at_end())

    def test_collect_whole(self):
        self.assertEqual(self.ts.tokens, self.ts.collect())
        self.assertTrue(self.ts.at_end())

    def test_collect_needs_group(self):
        self.ts.skip(1)
        with self.assertRaises(UnmatchedPattern):
            self.ts.collect()

    def test_collect_unbalanced(self):
        ts = TokenStream(['(', 'a', '(', 'b', ')'])
        with self.assertRaises(UnbalancedGroup):
            ts.collect()


atoms = st.sampled_from(['a', 'i32', '"s"', '0', '$x'])


def as_group(parts):
    return ['('] + [token for part in parts for token in part] + [')']


groups = st.lists(
    st.recursive(
        atoms.map(lambda atom: [atom]),
        lambda children: st.lists(children, max_size=4).map(as_group),
        max_leaves=20),
    max_size=5).map(as_group)


@given(groups, st.lists(atoms, max_size=3))
def test_collect_balanced(group, trailing):
    ts = TokenStream(group + trailing)
    collected = ts.collect()
    assert collected == group
    assert collected[0] == '(' and collected[-1] == ')'
    assert collected.count('(') == collected.count(')')
    assert ts.i == len(group)


@given(groups, st.data())
def test_collect_truncated(group, data):
    n = data.draw(st.integers(min_value=1, max_value=len(group) - 1))
    ts = TokenStream(group[:n])
    with raises(UnbalancedGroup):
        ts.collect()
