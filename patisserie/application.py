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

import logging
from optparse import OptionGroup, OptionParser
import sys

from . import __version__
from .browser import PasteryBrowser
from .builder import API_KEY_ENV_VAR, build_paste, parse_max_views, resolve_api_key
from .config import INIConfig, default_config_path
from .duration import DEFAULT_DURATION, format_duration, parse_duration
from .exceptions import (
    ConfigError, InputReadError, InvalidDuration, InvalidMaxViews, MissingApiKey,
    PatisserieError, TransportError,
)
from .log import create_file_handler, create_stream_handler, getLogger, setup_logging, \
    settings as log_settings


__all__ = ['Patisserie']


class Patisserie(object):
    """
    Console application posting a file or standard input to Pastery.
    """

    APPNAME = 'patisserie'
    VERSION = __version__
    COPYRIGHT = 'Copyright(C) 2025 Beth Rennie'
    SYNOPSIS = 'Usage: %prog [-h] [-d DURATION] [-l LANG] [-t TITLE] [--api-key API_KEY] [PATH]\n'
    SYNOPSIS += '       %prog [--help] [--version]'
    DESCRIPTION = ('A CLI for https://www.pastery.net, the sweetest pastebin in the world. '
                   'PATH is the file to upload; without it (or with "-"), '
                   'standard input is read.')

    # Default configuration, overridden by the configuration file
    CONFIG = {
        'duration': DEFAULT_DURATION,
        'max_views': '',
        'timeout': '',
    }

    BROWSER = PasteryBrowser

    EXIT_CODES = (
        (InvalidDuration, 2),
        (InvalidMaxViews, 2),
        (MissingApiKey, 3),
        (InputReadError, 4),
        (TransportError, 5),
    )

    def __init__(self, option_parser=None):
        self.logger = getLogger(self.APPNAME)
        self.config = None
        self.options = None
        self.timeout = None
        if option_parser is None:
            self._parser = OptionParser(self.SYNOPSIS, version=self._get_optparse_version())
        else:
            self._parser = option_parser
        if self.DESCRIPTION:
            self._parser.description = self.DESCRIPTION
        app_options = OptionGroup(self._parser, '%s Options' % self.APPNAME.capitalize())
        self.add_application_options(app_options)
        self._parser.add_option_group(app_options)
        self._parser.add_option('-c', '--config', action='store', type='string',
                                help='configuration file (default: %s)' % default_config_path(self.APPNAME))
        self._parser.add_option('-I', '--insecure', action='store_true', help='do not validate SSL')
        logging_options = OptionGroup(self._parser, 'Logging Options')
        logging_options.add_option('--debug', action='store_true', help='display debug messages')
        logging_options.add_option('-q', '--quiet', action='store_true', help='display only error messages')
        logging_options.add_option('-v', '--verbose', action='store_true', help='display info messages')
        logging_options.add_option('--logging-file', action='store', type='string', dest='logging_file',
                                   help='file to save logs')
        self._parser.add_option_group(logging_options)

    def add_application_options(self, group):
        group.add_option('-d', '--duration', action='store', type='string',
                         help='How long the paste lives before being deleted: a number of minutes, '
                              'or a number followed by one of m(inute), h(our), d(ay), w(eek), '
                              'mo(nth), y(ear). Default "%s", "never" for the longest.' % DEFAULT_DURATION)
        group.add_option('-l', '--lang', action='store', type='string',
                         help='Language of the paste. Guessed from the file extension if not '
                              'provided; "autodetect" lets Pastery detect it.')
        group.add_option('-t', '--title', action='store', type='string',
                         help='Paste title. The name of the file is used if not provided.')
        group.add_option('--max-views', action='store', type='int', dest='max_views',
                         help='Number of times the paste can be viewed before expiring.')
        group.add_option('--api-key', action='store', type='string', dest='api_key',
                         help='Your Pastery API key, from https://www.pastery.net/account/. '
                              'Read from the %s environment variable if not provided.' % API_KEY_ENV_VAR)

    def handle_application_options(self):
        self.load_config(self.options.config)

        if self.options.duration is None:
            self.options.duration = self.config.get('duration', DEFAULT_DURATION)
        if self.options.max_views is None:
            self.options.max_views = self.config.get('max_views')

        timeout = self.config.get('timeout')
        if timeout is not None:
            try:
                self.timeout = float(timeout)
            except ValueError:
                raise ConfigError('Invalid timeout `%s\'' % timeout)

        # fail before waiting on standard input
        parse_duration(self.options.duration)
        parse_max_views(self.options.max_views)

    def load_config(self, path=None):
        if path is None:
            path = default_config_path(self.APPNAME)
        self.config = INIConfig(path)
        self.config.load(self.CONFIG)

    def _get_optparse_version(self):
        return '%s v%s %s' % (self.APPNAME, self.VERSION, self.COPYRIGHT)

    def parse_args(self, args):
        self.options, args = self._parser.parse_args(args)

        if self.options.debug:
            level = logging.DEBUG
        elif self.options.verbose:
            level = logging.INFO
        elif self.options.quiet:
            level = logging.ERROR
        else:
            level = logging.WARNING
        log_settings['ssl_insecure'] = bool(self.options.insecure)

        handlers = []
        if self.options.logging_file:
            handlers.append(self.create_logging_file_handler(self.options.logging_file))
        else:
            handlers.append(create_stream_handler(sys.stderr))
        setup_logging(level, handlers)

        if len(args) > 1:
            self._parser.error('only one PATH can be posted')

        self.handle_application_options()
        return args

    def create_logging_file_handler(self, filename):
        try:
            return create_file_handler(filename)
        except (IOError, OSError) as e:
            self.logger.error('Unable to create the logging file: %s' % e)
            sys.exit(1)

    def create_browser(self):
        return self.BROWSER(logger=self.logger, timeout=self.timeout)

    def acquire_input(self, path=None):
        """
        Read the paste contents from a file, or from standard input.
        """
        if path is None:
            source = 'stdin'
            try:
                data = getattr(sys.stdin, 'buffer', sys.stdin).read()
            except (IOError, OSError) as e:
                raise InputReadError('Could not read from stdin: %s' % e)
        else:
            source = 'file `%s\'' % path
            try:
                with open(path, 'rb') as fp:
                    data = fp.read()
            except (IOError, OSError) as e:
                raise InputReadError('Could not open file `%s\' for reading: %s' % (path, e.strerror or e))

        if isinstance(data, bytes):
            try:
                data = data.decode('utf-8')
            except UnicodeDecodeError:
                raise InputReadError('Could not read %s: contents are not valid UTF-8' % source)
        return data

    def main(self, args):
        path = args[0] if args else None
        if path == '-':
            path = None

        api_key = resolve_api_key(self.options.api_key)
        contents = self.acquire_input(path)
        request = build_paste(contents, api_key,
                              path=path,
                              title=self.options.title,
                              language=self.options.lang,
                              duration=self.options.duration,
                              max_views=self.options.max_views)
        self.logger.info('Paste will expire after %s' % format_duration(request.duration))

        with self.create_browser() as browser:
            paste = browser.post_paste(request)

        print(paste.page_url)
        return 0

    def error_handler(self, error):
        """
        Report an error and get the exit status matching it.
        """
        print('Error: %s' % error, file=sys.stderr)
        if isinstance(error, TransportError):
            if logging.root.level == logging.DEBUG:
                self.logger.debug('Backtrace:', exc_info=error)
            else:
                print('Use --debug option to print backtraces', file=sys.stderr)

        for cls, code in self.EXIT_CODES:
            if isinstance(error, cls):
                return code
        return 1

    @classmethod
    def run(cls, args=None):
        """
        This static method can be called to run the application.

        It creates the application object, handles options, setups logging, calls
        the main() method, and catches common exceptions.

        You can't do anything after this call, as it *always* finishes with
        a call to sys.exit().
        """
        setup_logging(logging.WARNING, [create_stream_handler(sys.stderr)])

        if args is None:
            args = sys.argv[1:]

        app = cls()
        try:
            args = app.parse_args(args)
            sys.exit(app.main(args))
        except KeyboardInterrupt:
            print('Program killed by SIGINT', file=sys.stderr)
            sys.exit(1)
        except ConfigError as e:
            print('Configuration error: %s' % e, file=sys.stderr)
            sys.exit(1)
        except PatisserieError as e:
            sys.exit(app.error_handler(e))
