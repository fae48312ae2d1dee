"""
The api module contains the handy functions to translate wast test
scripts.
"""

import logging
from .common import get_file
from .tokenizer import tokenize
from .translate import Translator


__all__ = ['translate_text', 'translate_file']

logger = logging.getLogger('wastjs.api')


def translate_text(text, filename=None):
    """ Translate wast source text into JavaScript test statements """
    tokens = tokenize(text, filename)
    return Translator().translate(tokens)


def translate_file(f):
    """ Translate a wast file, given as filename or file like object """
    if isinstance(f, str):
        with get_file(f) as fh:
            text = fh.read()
        filename = f
    else:
        text = get_file(f).read()
        filename = getattr(f, 'name', None)
    logger.info('Translating %s', filename)
    return translate_text(text, filename)
