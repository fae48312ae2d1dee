""" Translate a stream of wast directives into JavaScript statements.

The translator handles one directive at a time, in order. The only
state carried between directives is the module context: the last
module seen, against which assertions are run.
"""

import logging
from . import codegen
from .common import NoModuleContext, UnknownFunction, UnrecognizedDirective
from .directives import parse_directive, ModuleDirective, AssertReturn
from .directives import AssertTrap, AssertMalformed, AssertInvalid
from .signature import extract_signatures
from .tokstream import TokenStream


class ModuleContext:
    """ The most recently defined module and its exported signatures """

    logger = logging.getLogger('wastjs.context')

    def __init__(self):
        self.source = None
        self._signatures = None

    def replace(self, source):
        """ A new module replaces the previous one entirely """
        self.logger.debug('Entering module %s', source)
        self.source = source
        self._signatures = None

    def signatures(self):
        """ Signatures of the current module, extracted on first use """
        if self.source is None:
            raise NoModuleContext('No module defined before assertion')
        if self._signatures is None:
            self._signatures = extract_signatures(self.source.tokens())
        return self._signatures

    def get_signature(self, name):
        signatures = self.signatures()
        if name not in signatures:
            raise UnknownFunction(
                'Function "{}" is not exported by the current module'.format(
                    name))
        return signatures[name]


class Translator:
    """ Turns wast tokens into a JavaScript test script.

    Statements are collected in ``lines``. Each call of ``translate`` starts
    a new pass with no lines and no module. When a directive fails, the
    statements of all earlier directives remain available there, while
    ``translate`` raises without returning any text.
    """

    logger = logging.getLogger('wastjs.translate')

    def __init__(self):
        self.lines = []
        self.context = ModuleContext()

    def translate(self, tokens):
        self.lines = []
        self.context = ModuleContext()
        stream = TokenStream(tokens)
        count = 0
        while not stream.at_end():
            directive = parse_directive(stream)
            self.lines.extend(self.gen_directive(directive))
            count += 1
        self.logger.info('Translated %s directives', count)
        return ''.join(line + '\n' for line in self.lines)

    def gen_directive(self, directive):
        """ Generate the statements for a single directive """
        self.logger.debug('Generating %s', directive.kind)
        if isinstance(directive, ModuleDirective):
            self.context.replace(directive.source)
            return codegen.instance_statements(directive.source)
        elif isinstance(directive, AssertReturn):
            driver = codegen.assert_return_driver(
                directive.invoke, directive.results)
            return codegen.return_statements(driver)
        elif isinstance(directive, AssertTrap):
            invoke = directive.invoke
            signature = self.context.get_signature(invoke.export_name)
            driver = codegen.assert_trap_driver(invoke, signature)
            return codegen.trap_statements(driver)
        elif isinstance(directive, AssertMalformed):
            return codegen.malformed_statements(directive.source)
        elif isinstance(directive, AssertInvalid):
            return codegen.invalid_statements(directive.source)
        else:
            raise UnrecognizedDirective(
                'Unrecognized directive: {}'.format(directive))
