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

import re

from .exceptions import InvalidDuration


__all__ = ['parse_duration', 'format_duration', 'UNITS', 'FOREVER',
           'DEFAULT_DURATION']


# Pastery takes the lifetime of a paste in minutes.
ONE_MINUTE = 1
ONE_HOUR = ONE_MINUTE * 60
ONE_DAY = ONE_HOUR * 24
ONE_WEEK = ONE_DAY * 7
ONE_MONTH = ONE_DAY * 30
ONE_YEAR = ONE_DAY * 365

FOREVER = ONE_YEAR * 100
"""
Longest lifetime the service keeps a paste, used for "never".
"""

DEFAULT_DURATION = '1d'

UNITS = {
    'm': ONE_MINUTE,
    'min': ONE_MINUTE,
    'mins': ONE_MINUTE,
    'minute': ONE_MINUTE,
    'minutes': ONE_MINUTE,
    'h': ONE_HOUR,
    'hr': ONE_HOUR,
    'hrs': ONE_HOUR,
    'hour': ONE_HOUR,
    'hours': ONE_HOUR,
    'd': ONE_DAY,
    'day': ONE_DAY,
    'days': ONE_DAY,
    'w': ONE_WEEK,
    'week': ONE_WEEK,
    'weeks': ONE_WEEK,
    'mo': ONE_MONTH,
    'month': ONE_MONTH,
    'months': ONE_MONTH,
    'y': ONE_YEAR,
    'yr': ONE_YEAR,
    'yrs': ONE_YEAR,
    'year': ONE_YEAR,
    'years': ONE_YEAR,
}

# longest spellings first, so that "mo" is not read as "m" followed by "o"
DURATION_RE = re.compile(
    r'^(?P<amount>[0-9]+)\s*(?P<unit>%s)?$' % '|'.join(
        re.escape(unit) for unit in sorted(UNITS, key=len, reverse=True)),
    re.IGNORECASE | re.ASCII)
AMOUNT_RE = re.compile(r'^(?P<amount>[0-9]+)\s*(?P<unit>.*)$', re.ASCII)


def parse_duration(s):
    """
    Convert a human friendly duration to a number of minutes.

    The duration is a number followed by an optional unit: m(inute),
    h(our), d(ay), w(eek), mo(nth) or y(ear). Without a unit the number is
    already in minutes. "never" is the longest duration the service accepts.

    >>> parse_duration('3mo')
    129600
    >>> parse_duration('90')
    90

    :param s: duration
    :type s: str
    :rtype: int
    :raises InvalidDuration: the amount or the unit cannot be understood
    """
    if s is None:
        raise InvalidDuration(s)
    text = s.strip()
    if text.lower() == 'never':
        return FOREVER

    m = DURATION_RE.match(text)
    if m is None:
        m = AMOUNT_RE.match(text)
        if m is None:
            raise InvalidDuration(s, 'Invalid duration `%s\'; expected a number of minutes '
                                     'or a number followed by a unit' % s)
        raise InvalidDuration(s, 'Unknown unit `%s\' in duration `%s\'; expected one of '
                                 '`m\', `h\', `d\', `w\', `mo\', or `y\'' % (m.group('unit'), s))

    amount = int(m.group('amount'))
    unit = m.group('unit')
    if unit is None:
        return amount
    return amount * UNITS[unit.lower()]


def format_duration(minutes):
    """
    Render a number of minutes with the largest unit dividing it exactly.
    """
    if minutes == FOREVER:
        return 'never'
    for unit, scale in (('y', ONE_YEAR), ('mo', ONE_MONTH), ('w', ONE_WEEK),
                        ('d', ONE_DAY), ('h', ONE_HOUR)):
        if minutes and minutes % scale == 0:
            return '%d%s' % (minutes // scale, unit)
    return '%dm' % minutes
