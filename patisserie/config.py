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

from collections import OrderedDict
from configparser import Error as ConfigParserError, RawConfigParser
import logging
import os

from .exceptions import ConfigError


__all__ = ['INIConfig', 'default_config_path']


ROOT_SECTION = 'ROOT'


def default_config_path(appname, environ=None):
    """
    Path of the configuration file, following the XDG base directory spec.
    """
    if environ is None:
        environ = os.environ
    confdir = environ.get('XDG_CONFIG_HOME') or os.path.join(os.path.expanduser('~'), '.config')
    return os.path.join(confdir, appname, appname)


class INIConfig(object):
    """
    Read-only INI configuration.

    Keys of the ``[ROOT]`` section are the application settings; a missing
    file leaves the defaults untouched.
    """

    def __init__(self, path):
        self.path = path
        self.values = OrderedDict()
        self.config = RawConfigParser()

    def load(self, default={}):
        self.values = OrderedDict(default)

        if not os.path.exists(self.path):
            logging.debug(u'No configuration file at %s, using defaults.' % self.path)
            return self.values

        try:
            with open(self.path, encoding='utf-8') as f:
                self.config.read_file(f)
        except (IOError, OSError) as e:
            raise ConfigError('Unable to read "%s": %s' % (self.path, e.strerror))
        except ConfigParserError as e:
            raise ConfigError('Unable to parse "%s": %s' % (self.path, e))

        if self.config.has_section(ROOT_SECTION):
            for key, value in self.config.items(ROOT_SECTION):
                self.set(key, value)
        logging.debug(u'Application configuration file loaded: %s.' % self.path)
        return self.values

    def get(self, key, default=None):
        value = self.values.get(key, default)
        if value == '':
            return default
        return value

    def set(self, key, value):
        self.values[key] = value
