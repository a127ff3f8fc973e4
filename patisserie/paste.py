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


__all__ = ['PasteRequest', 'Paste']


class PasteRequest(object):
    """
    A paste ready to be sent to Pastery.
    """

    FIELDS = ('title', 'language', 'duration', 'max_views')

    def __init__(self, contents, api_key, duration, title=None, language=None, max_views=None):
        self.contents = contents
        self.api_key = api_key
        self.duration = duration
        self.title = title
        self.language = language
        self.max_views = max_views

    def iter_fields(self):
        for name in self.FIELDS:
            yield name, getattr(self, name)

    def params(self):
        """
        Query parameters of the request.

        Fields which are not set are left out, so that the service picks its
        own default.
        """
        params = [('api_key', self.api_key)]
        for name, value in self.iter_fields():
            if value is not None:
                params.append((name, str(value)))
        return params

    def __eq__(self, other):
        if not isinstance(other, PasteRequest):
            return NotImplemented
        return self.contents == other.contents and \
            self.api_key == other.api_key and \
            dict(self.iter_fields()) == dict(other.iter_fields())

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self):
        # never show the API key
        return '<%s title=%r language=%r duration=%r max_views=%r size=%d>' % (
            type(self).__name__, self.title, self.language, self.duration,
            self.max_views, len(self.contents))


class Paste(object):
    """
    Represents a paste stored by Pastery.
    """

    BASEURL = 'https://www.pastery.net/'

    def __init__(self, _id, url=None, title=None, language=None, duration=None):
        self.id = _id
        self.url = url
        self.title = title
        self.language = language
        self.duration = duration

    @classmethod
    def id2url(cls, _id):
        return '%s%s/' % (cls.BASEURL, _id)

    @property
    def page_url(self):
        if self.url:
            return self.url
        return self.id2url(self.id)

    @classmethod
    def from_json(cls, data):
        return cls(data.get('id'),
                   url=data.get('url'),
                   title=data.get('title'),
                   language=data.get('language'),
                   duration=data.get('duration'))

    def __repr__(self):
        return '<%s id=%r url=%r>' % (type(self).__name__, self.id, self.page_url)
