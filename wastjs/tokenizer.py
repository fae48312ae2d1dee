""" Split wast test scripts into tokens.

Tokens are plain strings of three kinds:

* structural: ``(`` and ``)``
* string literals, including their surrounding quotes. Every backslash
  inside a string literal is doubled, so that the token can be pasted
  into a JavaScript template literal and still reach ``wasmTextToBinary``
  with its original escapes.
* atoms: keywords, identifiers and numbers.

Whitespace and ``;`` line comments produce no tokens.
"""

import io
import logging
from .tools.handlexer import HandLexerBase, create_chunks


__all__ = ('tokenize',)

WHITESPACE = ' \t\r\n'
DELIMITERS = WHITESPACE + ';()"'

logger = logging.getLogger('wastjs.tokenizer')


def tokenize(text, filename=None):
    """ Turn wast source text into a list of token strings. """
    lexer = WastLexer()
    tokens = [token.val for token in lexer.tokenize(text, filename)]
    logger.debug('%s tokens from %s', len(tokens), filename or 'text')
    return tokens


class WastLexer(HandLexerBase):
    """ Lexical scanner for the wast s-expression dialect """

    def tokenize(self, text, filename):
        chunks = create_chunks(io.StringIO(text))
        for token in super().tokenize(filename, chunks, self.lex_wast):
            if token.typ == 'string':
                token = token._replace(val=token.val.replace('\\', '\\\\'))
            yield token

    def lex_wast(self):
        c = self.next_char()
        if c is None:
            return  # EOF

        if c in '()':
            self.emit(c)
        elif c == ';':
            self.lex_line_comment()
        elif c == '"':
            self.lex_string()
        elif c in WHITESPACE:
            self.ignore()
        elif c not in DELIMITERS:
            self.lex_atom()
        else:  # pragma: no cover
            self.error('Unexpected character {!r}'.format(c))

        return self.lex_wast

    def lex_atom(self):
        while True:
            c = self.next_char()
            if c is None:
                break
            elif c in DELIMITERS:
                self.backup_char(c)
                break
        self.emit('atom')

    def lex_line_comment(self):
        """ Eat all characters until end of line """
        while True:
            c = self.next_char()
            if c is None or c in '\r\n':
                break
        self.ignore()

    def lex_string(self):
        """ Scan until the closing quote, or the end of input. """
        while True:
            c = self.next_char()
            if c is None or c == '"':
                break
            elif c == '\\':
                self.next_char()  # The escaped char cannot end the string
        self.emit('string')
