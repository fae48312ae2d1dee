""" A cursor over a flat list of tokens.

The stream knows nothing about the meaning of the tokens, only about
their nesting: ``collect`` cuts out one balanced, parenthesized group,
which can then be inspected through a fresh ``TokenStream``.
"""

from .common import StreamExhausted, TypeMismatch
from .common import UnmatchedPattern, UnbalancedGroup


class TokenStream:
    """ Token sequence with a cursor in [0, len(tokens)] """

    def __init__(self, tokens):
        self.tokens = tokens
        self.i = 0
        self.lim = len(tokens)

    def __repr__(self):
        return 'TokenStream({}/{})'.format(self.i, self.lim)

    def at_end(self):
        return self.i >= self.lim

    def peek(self, pattern):
        """ Check if the upcoming tokens equal pattern, without advancing """
        if self.i + len(pattern) > self.lim:
            return False
        return all(
            self.tokens[self.i + n] == token for n, token in enumerate(pattern)
        )

    def peek_prefix(self, n):
        """ Return up to n upcoming tokens, for diagnostics """
        return self.tokens[self.i:self.i + n]

    def get(self):
        """ Return the token under the cursor and advance """
        if self.at_end():
            raise StreamExhausted('Unexpected end of token stream')
        token = self.tokens[self.i]
        self.i += 1
        return token

    def match_string(self):
        """ Get the next token, which must be a string literal """
        token = self.get()
        if not token.startswith('"'):
            raise TypeMismatch('Expected a string, got {}'.format(token))
        return token

    def match(self, pattern):
        if not self.peek(pattern):
            raise UnmatchedPattern('Did not match: {}, got: {}'.format(
                ' '.join(pattern), ' '.join(self.peek_prefix(len(pattern)))))
        self.skip(len(pattern))

    def eat(self, pattern):
        """ Skip pattern if it is next and report whether it was """
        if self.peek(pattern):
            self.skip(len(pattern))
            return True
        return False

    def skip(self, n):
        self.i += n

    def collect(self):
        """ Cut out the next balanced group, including its parenthesis.

        Returns an empty list when the next token closes the enclosing
        group, so that absent optional groups can be collected too.
        """
        if self.peek([')']):
            return []
        self.match(['('])
        group = ['(']
        depth = 1
        while depth > 0:
            if self.at_end():
                raise UnbalancedGroup(
                    'Token stream ended inside a group: {}'.format(
                        ' '.join(group[:8])))
            token = self.get()
            group.append(token)
            if token == '(':
                depth += 1
            elif token == ')':
                depth -= 1
        return group
