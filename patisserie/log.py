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

from logging import FileHandler, Formatter, StreamHandler, getLogger as _getLogger
import sys


__all__ = ['getLogger', 'createColoredFormatter', 'create_stream_handler',
           'create_file_handler', 'setup_logging', 'settings']


RESET_SEQ = "\033[0m"
COLOR_SEQ = "%s%%s" + RESET_SEQ

COLORS = {
    'DEBUG': COLOR_SEQ % "\033[36m",
    'INFO': "%s",
    'WARNING': COLOR_SEQ % "\033[1;1m",
    'ERROR': COLOR_SEQ % "\033[1;31m",
    'CRITICAL': COLOR_SEQ % ("\033[1;33m\033[1;41m"),
}


# Set from the command line.
settings = {'ssl_insecure': False}


def getLogger(name, parent=None):
    if parent:
        name = parent.name + '.' + name
    return _getLogger(name)


class ColoredFormatter(Formatter):
    def format(self, record):
        levelname = record.levelname
        msg = Formatter.format(self, record)
        if levelname in COLORS:
            msg = COLORS[levelname] % msg
        return msg


def createColoredFormatter(stream, format):
    isatty = getattr(stream, 'isatty', None)
    if sys.platform != 'win32' and isatty is not None and isatty():
        return ColoredFormatter(format)
    else:
        return Formatter(format)


LOG_FORMAT = '%(asctime)s:%(levelname)s:%(name)s:%(filename)s:%(lineno)d %(message)s'


def create_stream_handler(stream=None):
    # stdout carries the paste URL, so log to stderr by default
    if stream is None:
        stream = sys.stderr
    handler = StreamHandler(stream)
    handler.setFormatter(createColoredFormatter(stream, LOG_FORMAT))
    return handler


def create_file_handler(filename):
    handler = FileHandler(filename, mode='w')
    handler.setFormatter(Formatter(LOG_FORMAT))
    return handler


def setup_logging(level, handlers):
    root = _getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    root.setLevel(level)
    for handler in handlers:
        root.addHandler(handler)
