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

from urllib.parse import urljoin

import requests
import urllib3

from . import __version__
from .exceptions import ClientError, PasteryError, ResponseParseError, ServerError, TransportError
from .log import getLogger, settings as log_settings
from .paste import Paste


__all__ = ['PasteryBrowser']


class PasteryBrowser(object):
    """
    Talk to the Pastery API.

    Every paste is a single request: there is no retry.
    """

    BASEURL = 'https://www.pastery.net/'
    API_PATH = 'api/paste/'

    TIMEOUT = 10.0
    """
    Default timeout during requests.
    """

    VERIFY = True
    """
    Check SSL certificates.
    """

    USER_AGENT = 'patisserie/%s' % __version__

    def __init__(self, logger=None, timeout=None, verify=None):
        self.logger = getLogger('browser', logger)
        if timeout is not None:
            self.TIMEOUT = timeout
        if verify is not None:
            self.VERIFY = verify
        elif log_settings['ssl_insecure']:
            self.VERIFY = False
        self._setup_session()

    def _setup_session(self):
        """
        Set up a python-requests session for our usage.
        """
        session = requests.Session()
        session.verify = self.VERIFY
        if not session.verify:
            urllib3.disable_warnings()

        # one shot: a failed request is reported, never replayed
        adapter = requests.adapters.HTTPAdapter(max_retries=0)
        session.mount('http://', adapter)
        session.mount('https://', adapter)

        # the API key is the only credential we send
        session.trust_env = False
        session.headers['User-Agent'] = self.USER_AGENT
        session.headers['Accept'] = 'application/json'

        self.session = session

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    @property
    def api_url(self):
        return urljoin(self.BASEURL, self.API_PATH)

    def post_paste(self, request):
        """
        Submit a new paste.

        :param request: the paste to create
        :type request: :class:`patisserie.paste.PasteRequest`
        :rtype: :class:`patisserie.paste.Paste`
        :raises TransportError: the paste was not created
        """
        self.logger.info('Posting %r to %s' % (request, self.api_url))
        try:
            response = self.session.post(self.api_url,
                                         params=request.params(),
                                         data=request.contents.encode('utf-8'),
                                         headers={'Content-Type': 'text/plain; charset=utf-8'},
                                         timeout=self.TIMEOUT)
        except requests.exceptions.Timeout:
            raise TransportError('Request to %s timed out after %ss' % (self.BASEURL, self.TIMEOUT))
        except requests.exceptions.ConnectionError as e:
            raise TransportError('Could not connect to %s: %s' % (self.BASEURL, e))
        except requests.exceptions.RequestException as e:
            raise TransportError('Could not make HTTP request: %s' % e)

        self.logger.debug('Response: %s %s' % (response.status_code, response.reason))
        data = self.parse_response(response)
        self.raise_for_status(response, data)

        if data.get('error_msg'):
            raise PasteryError(data['error_msg'])
        if not data.get('url'):
            raise ResponseParseError('Unexpected response from Pastery: no paste URL')

        paste = Paste.from_json(data)
        self.logger.info('Created paste %s' % paste.id)
        return paste

    def parse_response(self, response):
        try:
            data = response.json()
        except ValueError:
            # error pages are reported by raise_for_status()
            if response.status_code >= 400:
                return {}
            raise ResponseParseError('Could not parse JSON response')
        if not isinstance(data, dict):
            raise ResponseParseError('Could not parse JSON response: expected an object')
        return data

    def raise_for_status(self, response, data=None):
        """
        Like Response.raise_for_status but will use other classes if needed.

        The error message of the service is preferred to the HTTP reason.
        """
        http_error_msg = None
        if 400 <= response.status_code < 500:
            http_error_msg = '%s Client Error: %s' % (response.status_code, response.reason)
            cls = ClientError
        elif 500 <= response.status_code < 600:
            http_error_msg = '%s Server Error: %s' % (response.status_code, response.reason)
            cls = ServerError

        if http_error_msg:
            if data and data.get('error_msg'):
                http_error_msg = '%s (%s)' % (data['error_msg'], http_error_msg)
            raise cls(http_error_msg, response=response)
