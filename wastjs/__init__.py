""" Translate WebAssembly spec test scripts (wast) into JavaScript shell
test snippets.

Example usage:

>>> from wastjs import translate_text
>>> print(translate_text('(module)'))
var ins = new WebAssembly.Instance(new WebAssembly.Module(wasmTextToBinary(`( module )`)));

"""

# Define version here. Used in docs, and setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))

from .api import translate_text, translate_file  # noqa: E402

__all__ = ['translate_text', 'translate_file', '__version__']
