""" Hand written lexer.

The idea of lexers is to split the sourcecode into chunks.

Chunks consists of a tuple (row, column, text)

A source file can be split up into a sequence of these chunks.

A cursor is a pointer to a specific character in the chunk sequence.

"""

from collections import namedtuple
from ..common import SourceLocation, LexError


Token = namedtuple('Token', ['typ', 'val', 'loc'])


def create_chunks(f):
    """ Create a sequence of chunks, one per line """
    for row, line in enumerate(f, 1):
        yield (row, 1, line)


class HandLexerBase:
    """ Base class for handwritten lexers based on an idea of Rob Pike.

    A lexer is a sequence of state functions. Each state function
    consumes some characters, possibly emits a token and returns the
    next state function, or None when the input is exhausted.
    """

    def __init__(self):
        self.token_buffer = []  # emitted tokens
        self.current_text = []
        self._filename = None
        self._start_loc = None
        self._chunk = None
        self._chunk_iter = None
        self._chunk_index = 0
        self._chunk_start = 0

    def tokenize(self, filename, chunks, start_state):
        """ Return a sequence of tokens """
        self._filename = filename
        self._chunk_iter = iter(chunks)
        self._next_chunk()
        self._mark_start()
        state = start_state
        while state:
            while self.token_buffer:
                yield self.token_buffer.pop(0)
            state = state()
        while self.token_buffer:
            yield self.token_buffer.pop(0)

    def next_char(self):
        """ Retrieve next character, or None at end of input. """
        if self._chunk:
            if self._chunk_index < len(self._chunk[2]):
                c = self._chunk[2][self._chunk_index]
                self._chunk_index += 1
            else:
                self._next_chunk()
                c = self.next_char()
        else:
            c = None
        return c

    def backup_char(self, char):
        """ go back one item """
        if char:
            assert self._chunk_index > 0
            self._chunk_index -= 1

    def get_location(self):
        """ Return current location. """
        if self._chunk:
            row = self._chunk[0]
            column = self._chunk[1] + self._chunk_index
            return SourceLocation(self._filename, row, column, 1)

    def _next_chunk(self):
        """ Enter next text chunk. """
        if self._chunk:
            text = self._chunk[2][self._chunk_start:]
            self.current_text.append(text)
        self._chunk = next(self._chunk_iter, None)
        self._chunk_index = 0
        self._chunk_start = 0
        if not ''.join(self.current_text):
            self._start_loc = self.get_location()

    def _mark_start(self):
        """ Store location, and reset text buffer. """
        self._start_loc = self.get_location()
        self.current_text.clear()
        self._chunk_start = self._chunk_index

    def emit(self, typ):
        """ Emit the current text under scope as a token """
        if self._chunk and self._chunk_index > self._chunk_start:
            text = self._chunk[2][self._chunk_start:self._chunk_index]
            self.current_text.append(text)
        val = ''.join(self.current_text)
        self.token_buffer.append(Token(typ, val, self._start_loc))
        self._mark_start()

    def ignore(self):
        """ Ignore text under cursor """
        self._mark_start()

    def error(self, message):
        raise LexError(message, self.get_location())
