""" Test cases for the commandline utility. """

import unittest
import tempfile
import io
import os
from unittest.mock import patch

from wastjs.cli.wast2js import wast2js, INPUT_ENV


def new_temp_file(suffix, content=None):
    """ Generate a new temporary filename """
    handle, filename = tempfile.mkstemp(suffix=suffix)
    os.close(handle)
    if content is not None:
        with open(filename, 'w') as f:
            f.write(content)
    return filename


WAST = """
(module (func (export "one") (result i32) (i32.const 1)))
(assert_return (invoke "one") (i32.const 1))
"""


class Wast2JsTestCase(unittest.TestCase):
    """ Test the wastjs-translate command-line utility """
    def setUp(self):
        self.wast_file = new_temp_file('.wast', WAST)

    def tearDown(self):
        os.remove(self.wast_file)

    @patch('sys.stderr', new_callable=io.StringIO)
    def test_output_file(self, mock_stderr):
        js_file = new_temp_file('.js')
        wast2js([self.wast_file, '-o', js_file])
        with open(js_file) as f:
            js = f.read()
        os.remove(js_file)
        self.assertIn('var ins = ', js)
        self.assertIn('assertEq(run.exports.run(), 1);', js)

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_stdout(self, mock_stdout, mock_stderr):
        wast2js(['-v', self.wast_file])
        self.assertIn('(import "" "one"', mock_stdout.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_environment(self, mock_stdout, mock_stderr):
        with patch.dict(os.environ, {INPUT_ENV: self.wast_file}):
            wast2js([])
        self.assertIn('var run = ', mock_stdout.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    def test_no_input(self, mock_stderr):
        with patch.dict(os.environ):
            os.environ.pop(INPUT_ENV, None)
            with self.assertRaises(SystemExit) as cm:
                wast2js([])
        self.assertEqual(2, cm.exception.code)
        self.assertIn(INPUT_ENV, mock_stderr.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    def test_translate_error(self, mock_stderr):
        bad_file = new_temp_file('.wast', '(module (func)')
        js_file = new_temp_file('.js')
        with self.assertRaises(SystemExit) as cm:
            wast2js([bad_file, '-o', js_file])
        os.remove(bad_file)
        self.assertEqual(1, cm.exception.code)
        self.assertFalse(os.path.exists(js_file))
        self.assertIn('inside a group', mock_stderr.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    def test_missing_file(self, mock_stderr):
        with self.assertRaises(SystemExit) as cm:
            wast2js(['no_such_file.wast'])
        self.assertEqual(1, cm.exception.code)

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_help(self, mock_stdout):
        """ Test help function """
        with self.assertRaises(SystemExit) as cm:
            wast2js(['-h'])
        self.assertEqual(0, cm.exception.code)
        self.assertIn('wast', mock_stdout.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    def test_invalid_log_level(self, mock_stderr):
        """ Test invalid log level """
        with self.assertRaises(SystemExit) as cm:
            wast2js(['--log', 'blabla', self.wast_file])
        self.assertEqual(2, cm.exception.code)
