"""
   Error handling routines
   Source location structures
"""

import os


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


class SourceLocation:
    """ A location that refers to a position in a source file """

    __slots__ = ['filename', 'row', 'col', 'length']

    def __init__(self, filename, row, col, ln):
        self.filename = filename
        self.row = row
        self.col = col
        self.length = ln

    def __repr__(self):
        return '({}, {}, {}, {})'.format(
            self.filename, self.row, self.col, self.length)

    def print_message(self, message, lines=None, file=None):
        """ Print a message at this location in the given source lines """
        if lines is None:
            if not (self.filename and os.path.exists(self.filename)):
                print(message, file=file)
                return
            with open(self.filename, 'r') as f:
                lines = f.read().splitlines()

        if self.filename:
            print('File : "{}"'.format(self.filename), file=file)

        prerow = max(self.row - 2, 1)
        afterrow = min(self.row + 3, len(lines))
        for r in range(prerow, afterrow + 1):
            print('{:5} :{}'.format(r, lines[r - 1]), file=file)
            if r == self.row:
                indent = '      :' + ' ' * (self.col - 1)
                print(indent + '^' * max(self.length, 1), file=file)
                print(indent + '+---- {}'.format(message), file=file)


class CompilerError(Exception):
    """ Base class of all faults raised while translating """
    def __init__(self, msg, loc=None):
        super().__init__(msg)
        self.msg = msg
        self.loc = loc
        if loc:
            assert isinstance(loc, SourceLocation), \
                   '{0} must be SourceLocation'.format(type(loc))

    def __repr__(self):
        return '"{}"'.format(self.msg)

    def render(self, lines):
        """ Render this error in some lines of context """
        self.loc.print_message('Error: {0}'.format(self.msg), lines=lines)

    def print(self, file=None):
        """ Print the error inside some nice context """
        if self.loc:
            self.loc.print_message(self.msg, file=file)
        else:
            print(self.msg, file=file)


class LexError(CompilerError):
    """ Character that cannot start any token """
    pass


class StreamError(CompilerError):
    """ Malformed token stream: the test script itself is broken """
    pass


class StreamExhausted(StreamError):
    pass


class TypeMismatch(StreamError):
    pass


class UnmatchedPattern(StreamError):
    pass


class UnbalancedGroup(StreamError):
    pass


class TranslateError(CompilerError):
    """ A well formed directive that cannot be translated """
    pass


class UnknownConstKind(TranslateError):
    pass


class MultiResultUnsupported(TranslateError):
    pass


class UnrecognizedDirective(TranslateError):
    pass


class UnknownFunction(TranslateError):
    pass


class NoModuleContext(TranslateError):
    pass


def get_file(f, mode='r'):
    """ Determine if argument is a file like object or make it so! """
    if hasattr(f, 'read'):
        # Assume this is a file like object
        return f
    elif isinstance(f, str):
        return open(f, mode)
    else:
        raise FileNotFoundError('Cannot open {}'.format(f))
