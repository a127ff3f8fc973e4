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

import os

from .duration import DEFAULT_DURATION, parse_duration
from .exceptions import InvalidMaxViews, MissingApiKey
from .language import resolve_language
from .paste import PasteRequest


__all__ = ['API_KEY_ENV_VAR', 'resolve_api_key', 'build_paste']


API_KEY_ENV_VAR = 'PASTERY_API_KEY'


def resolve_api_key(api_key=None, environ=None):
    """
    Get the API key from the command line, or else from the environment.

    :raises MissingApiKey: neither is set
    """
    if api_key:
        return api_key
    if environ is None:
        environ = os.environ
    api_key = environ.get(API_KEY_ENV_VAR)
    if not api_key:
        raise MissingApiKey(API_KEY_ENV_VAR)
    return api_key


def parse_max_views(value):
    if value is None or value == '':
        return None
    try:
        max_views = int(value)
    except (TypeError, ValueError):
        raise InvalidMaxViews('Invalid number of views `%s\'' % value)
    if max_views < 1:
        raise InvalidMaxViews('The number of views must be at least 1, not %d' % max_views)
    return max_views


def build_paste(contents, api_key, path=None, title=None, language=None,
                duration=None, max_views=None):
    """
    Assemble the request for a new paste.

    :param contents: text of the paste
    :type contents: str
    :param api_key: resolved API key, see :func:`resolve_api_key`
    :type api_key: str
    :param path: file the contents were read from, None for standard input
    :type path: str or None
    :param title: explicit title, defaults to the file name
    :type title: str or None
    :param language: explicit language, defaults to a guess from the file name
    :type language: str or None
    :param duration: lifetime of the paste, defaults to one day
    :type duration: str or None
    :param max_views: number of views after which the paste expires
    :type max_views: int or str or None
    :rtype: :class:`PasteRequest`
    """
    if not api_key:
        raise MissingApiKey(API_KEY_ENV_VAR)

    if title is None and path:
        title = os.path.basename(path)

    return PasteRequest(contents,
                        api_key=api_key,
                        duration=parse_duration(DEFAULT_DURATION if duration is None else duration),
                        title=title,
                        language=resolve_language(language, path),
                        max_views=parse_max_views(max_views))
