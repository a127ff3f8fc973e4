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


__all__ = ['PatisserieError', 'InvalidDuration', 'InvalidMaxViews',
           'MissingApiKey', 'InputReadError', 'TransportError', 'HTTPError',
           'ClientError', 'ServerError', 'ResponseParseError', 'PasteryError',
           'ConfigError']


class PatisserieError(Exception):
    pass


class InvalidDuration(PatisserieError, ValueError):
    def __init__(self, duration, reason=None):
        self.duration = duration
        if reason is None:
            reason = 'Invalid duration `%s\'' % duration
        PatisserieError.__init__(self, reason)


class InvalidMaxViews(PatisserieError, ValueError):
    pass


class MissingApiKey(PatisserieError):
    def __init__(self, env_var='PASTERY_API_KEY'):
        PatisserieError.__init__(self,
            'No API key: use --api-key or set the %s environment variable' % env_var)


class InputReadError(PatisserieError):
    pass


class TransportError(PatisserieError):
    pass


class HTTPError(TransportError):
    """
    The service answered with a non-success status code.
    """
    def __init__(self, message, response=None):
        TransportError.__init__(self, message)
        self.response = response


class ClientError(HTTPError):
    pass


class ServerError(HTTPError):
    pass


class ResponseParseError(TransportError):
    pass


class PasteryError(TransportError):
    """
    The service accepted the request but reported an error.
    """


class ConfigError(Exception):
    pass
