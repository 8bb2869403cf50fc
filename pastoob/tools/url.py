# -*- coding: utf-8 -*-

# Copyright(C) 2026 pastoob contributors
#
# This file is part of pastoob.
#
# pastoob is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# pastoob is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with pastoob. If not, see <http://www.gnu.org/licenses/>.

import re
from urllib.parse import urlsplit

from pastoob.exceptions import MalformedUrl


__all__ = ['parse_url', 'path_segments', 'last_segment', 'domain']


WHITESPACE_RE = re.compile(r'\s')


def parse_url(url):
    """
    Check that ``url`` is an absolute URL and return it without surrounding
    whitespace.

    >>> parse_url(' https://sprunge.us/abcd\\n')
    'https://sprunge.us/abcd'

    :raises: :class:`MalformedUrl`
    """
    url = url.strip()
    if not url or WHITESPACE_RE.search(url):
        raise MalformedUrl(url)
    try:
        parts = urlsplit(url)
        # port is validated lazily by urlsplit
        parts.port
    except ValueError:
        raise MalformedUrl(url)
    if not parts.scheme or not parts.netloc or not parts.hostname:
        raise MalformedUrl(url, 'url is not absolute')
    return url


def path_segments(url):
    """
    Non-empty segments of the path of ``url``.

    >>> path_segments('https://gist.github.com/user/1234/')
    ['user', '1234']
    """
    return [s for s in urlsplit(url).path.split('/') if s]


def last_segment(url):
    segments = path_segments(url)
    if not segments:
        raise MalformedUrl(url, 'paste url was a root url')
    return segments[-1]


def domain(url):
    return (urlsplit(url).hostname or '').lower()
