""" The directives of a wast script, parsed from balanced token groups.

Each top level group of a script is one directive. ``parse_directive``
cuts the next group from a stream and turns it into one of the
directive classes below, which carry the pieces the code generator
needs.
"""

import re
from .common import UnrecognizedDirective
from .tokstream import TokenStream
from .tokenizer import tokenize


class ModuleSource:
    """ The text of a module, either inline tokens or quoted strings.

    ``text`` gives the module text with backslashes doubled, the same
    convention the tokenizer uses for string tokens.
    """

    def text(self):
        raise NotImplementedError()

    def tokens(self):
        raise NotImplementedError()


class InlineModule(ModuleSource):
    def __init__(self, tokens):
        self._tokens = tokens

    def __repr__(self):
        return 'InlineModule({})'.format(' '.join(self._tokens[:4]))

    def text(self):
        return ' '.join(self._tokens)

    def tokens(self):
        return self._tokens


class QuotedModule(ModuleSource):
    """ A ``(module quote "..." ...)`` module, one decoded line per string """
    def __init__(self, lines):
        self.lines = lines

    def __repr__(self):
        return 'QuotedModule({} lines)'.format(len(self.lines))

    def source(self):
        return '(module\n{}\n)'.format('\n'.join(self.lines))

    def text(self):
        return self.source().replace('\\', '\\\\')

    def tokens(self):
        return tokenize(self.source())


escape_prog = re.compile(r'\\(u\{[0-9a-fA-F_]+\}|[0-9a-fA-F]{2}|.)', re.S)
simple_escapes = {'t': '\t', 'n': '\n', 'r': '\r', '"': '"', "'": "'",
                  '\\': '\\'}


def unescape(token):
    """ Decode a string token back into the text it denotes.

    Hex escapes outside the ascii range are kept as written, they only
    occur in modules that are meant to be rejected anyway.
    """
    text = token[1:-1] if token.endswith('"') and len(token) > 1 \
        else token[1:]
    text = text.replace('\\\\', '\\')

    def replace(match):
        escape = match.group(1)
        if escape in simple_escapes:
            return simple_escapes[escape]
        elif escape.startswith('u{'):
            return chr(int(escape[2:-1].replace('_', ''), 16))
        elif len(escape) == 2 and int(escape, 16) < 0x80:
            return chr(int(escape, 16))
        else:
            return match.group(0)

    return escape_prog.sub(replace, text)


def parse_module_source(group):
    """ Turn a module group into a ModuleSource """
    ts = TokenStream(group)
    ts.match(['(', 'module'])
    if ts.peek_prefix(1)[0].startswith('$'):
        ts.skip(1)
    if ts.eat(['quote']):
        lines = []
        while not ts.eat([')']):
            lines.append(unescape(ts.match_string()))
        return QuotedModule(lines)
    return InlineModule(group)


class Directive:
    """ A single toplevel command of a test script """
    kind = None

    def __repr__(self):
        return '{}()'.format(self.__class__.__name__)


class ModuleDirective(Directive):
    kind = 'module'

    def __init__(self, source):
        self.source = source


class Invocation:
    """ The ``(invoke "name" const...)`` part of an assertion """
    def __init__(self, name, args):
        self.name = name
        self.args = args

    @property
    def export_name(self):
        return self.name[1:-1]


class AssertReturn(Directive):
    kind = 'assert_return'

    def __init__(self, invoke, results):
        self.invoke = invoke
        self.results = results


class AssertTrap(Directive):
    kind = 'assert_trap'

    def __init__(self, invoke):
        self.invoke = invoke


class AssertMalformed(Directive):
    kind = 'assert_malformed'

    def __init__(self, source):
        self.source = source


class AssertInvalid(Directive):
    kind = 'assert_invalid'

    def __init__(self, source):
        self.source = source


def parse_directive(stream):
    """ Take the next directive from a token stream """
    if stream.peek(['(', 'module']):
        return ModuleDirective(parse_module_source(stream.collect()))
    elif stream.peek(['(', 'assert_return', '(', 'invoke']):
        ts = TokenStream(stream.collect())
        ts.match(['(', 'assert_return'])
        invoke = parse_invoke(ts.collect())
        results = []
        while not ts.peek([')']):
            results.append(ts.collect())
        ts.match([')'])
        return AssertReturn(invoke, results)
    elif stream.peek(['(', 'assert_trap', '(', 'invoke']):
        ts = TokenStream(stream.collect())
        ts.match(['(', 'assert_trap'])
        invoke = parse_invoke(ts.collect())
        ts.match_string()  # failure message
        ts.match([')'])
        return AssertTrap(invoke)
    elif stream.peek(['(', 'assert_malformed']):
        return AssertMalformed(parse_module_assertion(stream.collect()))
    elif stream.peek(['(', 'assert_invalid']):
        return AssertInvalid(parse_module_assertion(stream.collect()))
    else:
        raise UnrecognizedDirective('Unrecognized directive: {}'.format(
            ' '.join(stream.peek_prefix(6))))


def parse_invoke(group):
    ts = TokenStream(group)
    ts.match(['(', 'invoke'])
    name = ts.match_string()
    args = []
    while not ts.peek([')']):
        args.append(ts.collect())
    ts.match([')'])
    return Invocation(name, args)


def parse_module_assertion(group):
    """ Module of an assert_malformed or assert_invalid, the message
    is skipped without looking at it """
    ts = TokenStream(group)
    ts.skip(2)
    source = parse_module_source(ts.collect())
    ts.match_string()
    ts.match([')'])
    return source
