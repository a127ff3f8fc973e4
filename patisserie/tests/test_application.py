# -*- coding: utf-8 -*-
# Copyright(C) 2025 Beth Rennie
#
# This file is part of patisserie.
#
# patisserie is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# patisserie is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with patisserie. If not, see <https://www.gnu.org/licenses/>.
import io
import logging
import os
import shutil
import tempfile
from unittest import TestCase, mock

from patisserie.application import Patisserie
from patisserie.browser import PasteryBrowser
from patisserie.exceptions import ClientError, TransportError
from patisserie.paste import Paste


class MockBrowser(PasteryBrowser):
    """
    Records the requests instead of sending them.
    """
    posted = []
    error = None
    instances = 0

    def __init__(self, *args, **kwargs):
        super(MockBrowser, self).__init__(*args, **kwargs)
        type(self).instances += 1

    def post_paste(self, request):
        self.posted.append(request)
        if self.error is not None:
            raise self.error
        return Paste('abc123', url='https://pastery.net/abc123')


class MockPatisserie(Patisserie):
    BROWSER = MockBrowser


def stdin_with(data):
    return io.TextIOWrapper(io.BytesIO(data), encoding='utf-8')


class PatisserieTest(TestCase):

    def setUp(self):
        MockBrowser.posted = []
        MockBrowser.error = None
        MockBrowser.instances = 0

        self.tmpdir = tempfile.mkdtemp(prefix='patisserie_test_')
        environ = dict(os.environ)
        environ.pop('PASTERY_API_KEY', None)
        environ['XDG_CONFIG_HOME'] = os.path.join(self.tmpdir, 'config')
        patcher = mock.patch.dict(os.environ, environ, clear=True)
        patcher.start()
        self.addCleanup(patcher.stop)

        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        for name, value in (('stdout', self.stdout), ('stderr', self.stderr)):
            patcher = mock.patch('sys.%s' % name, value)
            patcher.start()
            self.addCleanup(patcher.stop)

    def tearDown(self):
        shutil.rmtree(self.tmpdir)
        logging.root.handlers = []

    def write_file(self, name, contents):
        path = os.path.join(self.tmpdir, name)
        with open(path, 'wb') as f:
            f.write(contents)
        return path

    def write_config(self, text):
        confdir = os.path.join(self.tmpdir, 'config', 'patisserie')
        os.makedirs(confdir)
        with open(os.path.join(confdir, 'patisserie'), 'w') as f:
            f.write(text)

    def run_app(self, args, stdin=b''):
        with mock.patch('sys.stdin', stdin_with(stdin)):
            with self.assertRaises(SystemExit) as cm:
                MockPatisserie.run(args)
        return cm.exception.code

    def test_post_file(self):
        path = self.write_file('notes.txt', b'hello')

        code = self.run_app([path, '--api-key', 'key'])

        self.assertEqual(0, code)
        self.assertEqual('https://pastery.net/abc123\n', self.stdout.getvalue())
        self.assertEqual(1, len(MockBrowser.posted))
        request = MockBrowser.posted[0]
        self.assertEqual('hello', request.contents)
        self.assertEqual('notes.txt', request.title)
        self.assertIsNone(request.language)
        self.assertEqual(1440, request.duration)
        self.assertEqual('key', request.api_key)
        self.assertNotIn('language', dict(request.params()))

    def test_post_stdin(self):
        os.environ['PASTERY_API_KEY'] = 'envkey'

        code = self.run_app(['--duration', '2y', '--lang', 'autodetect', '--title', 'My Paste'], stdin=b'x')

        self.assertEqual(0, code)
        self.assertEqual('https://pastery.net/abc123\n', self.stdout.getvalue())
        request = MockBrowser.posted[0]
        self.assertEqual('x', request.contents)
        self.assertEqual(1051200, request.duration)
        self.assertEqual('autodetect', request.language)
        self.assertEqual('My Paste', request.title)
        self.assertEqual('envkey', request.api_key)

    def test_dash_is_stdin(self):
        code = self.run_app(['-', '--api-key', 'key'], stdin=b'piped')
        self.assertEqual(0, code)
        request = MockBrowser.posted[0]
        self.assertEqual('piped', request.contents)
        self.assertIsNone(request.title)

    def test_short_options(self):
        path = self.write_file('script.py', b'print(1)')
        code = self.run_app(['-d', '3mo', '-t', 'Script', '--max-views', '5', '--api-key', 'key', path])
        self.assertEqual(0, code)
        request = MockBrowser.posted[0]
        self.assertEqual(129600, request.duration)
        self.assertEqual('Script', request.title)
        self.assertEqual('python', request.language)
        self.assertEqual(5, request.max_views)

    def test_flag_wins_over_environment(self):
        os.environ['PASTERY_API_KEY'] = 'envkey'
        self.run_app(['--api-key', 'flagkey'], stdin=b'x')
        self.assertEqual('flagkey', MockBrowser.posted[0].api_key)

    def test_missing_api_key(self):
        path = self.write_file('notes.txt', b'hello')

        code = self.run_app([path])

        self.assertEqual(3, code)
        self.assertEqual(0, MockBrowser.instances)
        self.assertEqual([], MockBrowser.posted)
        self.assertEqual('', self.stdout.getvalue())
        self.assertIn('PASTERY_API_KEY', self.stderr.getvalue())

    def test_invalid_duration(self):
        code = self.run_app(['-d', '5x', '--api-key', 'key'], stdin=b'x')
        self.assertEqual(2, code)
        self.assertEqual([], MockBrowser.posted)
        self.assertIn('5x', self.stderr.getvalue())

    def test_non_ascii_duration(self):
        code = self.run_app(['-d', u'2day\u017f', '--api-key', 'key'], stdin=b'x')
        self.assertEqual(2, code)
        self.assertEqual([], MockBrowser.posted)
        self.assertIn('Error:', self.stderr.getvalue())
        self.assertNotIn('Traceback', self.stderr.getvalue())

    def test_invalid_max_views(self):
        code = self.run_app(['--max-views', '0', '--api-key', 'key'], stdin=b'x')
        self.assertEqual(2, code)
        self.assertEqual([], MockBrowser.posted)

    def test_missing_file(self):
        code = self.run_app([os.path.join(self.tmpdir, 'nope.txt'), '--api-key', 'key'])
        self.assertEqual(4, code)
        self.assertEqual(0, MockBrowser.instances)
        self.assertIn('nope.txt', self.stderr.getvalue())

    def test_not_utf8(self):
        path = self.write_file('binary.bin', b'\xff\xfe\x00')
        code = self.run_app([path, '--api-key', 'key'])
        self.assertEqual(4, code)
        self.assertIn('UTF-8', self.stderr.getvalue())

    def test_transport_error(self):
        MockBrowser.error = ClientError('Your API key is invalid. (403 Client Error: Forbidden)')

        code = self.run_app(['--api-key', 'key'], stdin=b'x')

        self.assertEqual(5, code)
        self.assertEqual('', self.stdout.getvalue())
        self.assertIn('Error: Your API key is invalid.', self.stderr.getvalue())
        self.assertIn('--debug', self.stderr.getvalue())

    def test_connection_error_with_debug(self):
        MockBrowser.error = TransportError('Could not connect')

        code = self.run_app(['--api-key', 'key', '--debug'], stdin=b'x')

        self.assertEqual(5, code)
        self.assertIn('Error: Could not connect', self.stderr.getvalue())
        self.assertIn('Traceback', self.stderr.getvalue())

    def test_too_many_paths(self):
        code = self.run_app(['a.txt', 'b.txt', '--api-key', 'key'])
        self.assertEqual(2, code)
        self.assertEqual([], MockBrowser.posted)

    def test_help(self):
        code = self.run_app(['--help'])
        self.assertEqual(0, code)
        self.assertIn('--duration', self.stdout.getvalue())
        self.assertIn('--api-key', self.stdout.getvalue())

    def test_config_file(self):
        self.write_config('[ROOT]\nduration = 1w\nmax_views = 10\ntimeout = 2.5\n')

        code = self.run_app(['--api-key', 'key'], stdin=b'x')

        self.assertEqual(0, code)
        request = MockBrowser.posted[0]
        self.assertEqual(10080, request.duration)
        self.assertEqual(10, request.max_views)

    def test_flag_wins_over_config_file(self):
        self.write_config('[ROOT]\nduration = 1w\n')
        self.run_app(['-d', '1h', '--api-key', 'key'], stdin=b'x')
        self.assertEqual(60, MockBrowser.posted[0].duration)

    def test_explicit_config_file(self):
        path = self.write_file('other.ini', b'[ROOT]\nduration = 2h\n')
        self.run_app(['-c', path, '--api-key', 'key'], stdin=b'x')
        self.assertEqual(120, MockBrowser.posted[0].duration)

    def test_bad_config_file(self):
        self.write_config('[ROOT]\ntimeout = soon\n')
        code = self.run_app(['--api-key', 'key'], stdin=b'x')
        self.assertEqual(1, code)
        self.assertIn('Configuration error', self.stderr.getvalue())
        self.assertEqual([], MockBrowser.posted)
