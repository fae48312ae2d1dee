""" Translate a wast test script into JavaScript shell test snippets.

The input file is given as argument, or else through the WAST_INPUT_FILE
environment variable.
"""


import argparse
import os
import sys
from .base import base_parser, LogSetup
from ..api import translate_file


INPUT_ENV = 'WAST_INPUT_FILE'

parser = argparse.ArgumentParser(
    description=__doc__,
    parents=[base_parser])
parser.add_argument(
    'wast', metavar='wast file', nargs='?',
    help='wast script to translate, default is ${}'.format(INPUT_ENV))
parser.add_argument(
    '-o', '--output', metavar='js file', type=argparse.FileType('w'),
    help='File to write the JavaScript to, default is stdout')


def wast2js(args=None):
    """ Translate a wast file to JavaScript """
    args = parser.parse_args(args)
    wast = args.wast or os.environ.get(INPUT_ENV)
    if not wast:
        parser.error('No input file given and {} is not set'.format(
            INPUT_ENV))
    with LogSetup(args):
        text = translate_file(wast)
        output = args.output or sys.stdout
        output.write(text)
        if args.output:
            args.output.close()


if __name__ == '__main__':
    wast2js()
