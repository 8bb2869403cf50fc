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

"""
Index of a multi-file paste.

An index is a plain text document listing the files of a paste, each one
being uploaded as its own paste::

    2 files
    -------

    1. hello.py: https://sprunge.us/aBcD
    2. README: https://sprunge.us/eFgH

"""

from collections import OrderedDict, namedtuple

from pastoob.exceptions import InvalidIndex, MalformedUrl

from .url import parse_url


__all__ = ['Index', 'RawDocument', 'parse_document', 'check_name']


SEPARATOR = ': '


RawDocument = namedtuple('RawDocument', ['contents'])
RawDocument.__doc__ = 'A fetched document which is not an index, i.e. a single raw file.'


def check_name(name):
    """
    Check that a file name can be written in an index.

    :raises: :class:`InvalidIndex`
    """
    if not name or not name.strip():
        raise InvalidIndex('empty file name')
    if SEPARATOR in name or '\n' in name or '\r' in name:
        raise InvalidIndex('file name %r can not be written in an index' % name)


class Index(object):
    """
    Ordered mapping of file names to URLs.

    :param files: (name, url) pairs, or a mapping
    :raises: :class:`InvalidIndex` if empty, if a name is duplicated or
             unwritable, or if an URL is not absolute
    """

    def __init__(self, files):
        if hasattr(files, 'items'):
            files = files.items()
        self._files = OrderedDict()
        for name, url in files:
            check_name(name)
            if name in self._files:
                raise InvalidIndex('duplicate file name %r' % name)
            try:
                self._files[name] = parse_url(url)
            except MalformedUrl as e:
                raise InvalidIndex('invalid url for %r: %s' % (name, e.url))
        if not self._files:
            raise InvalidIndex('index has no files')

    def __len__(self):
        return len(self._files)

    def __iter__(self):
        return iter(self._files)

    def __getitem__(self, name):
        return self._files[name]

    def __eq__(self, other):
        if not isinstance(other, Index):
            return NotImplemented
        return list(self.items()) == list(other.items())

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __repr__(self):
        return '<Index %r>' % list(self.items())

    def items(self):
        return self._files.items()

    def names(self):
        return list(self._files)

    def render(self):
        header = '%d files' % len(self)
        lines = [header, '-' * len(header), '']
        for number, (name, url) in enumerate(self.items(), 1):
            lines.append('%d. %s%s%s' % (number, name, SEPARATOR, url))
        return '\n'.join(lines) + '\n'

    __str__ = render

    @classmethod
    def parse(cls, text):
        """
        Parse a rendered index.

        :raises: :class:`InvalidIndex`
        """
        document = parse_document(text)
        if not isinstance(document, Index):
            raise InvalidIndex()
        return document


def _parse_entries(text):
    lines = text.split('\n')
    # header, separator, blank line and at least one entry
    if len(lines) < 4:
        return None

    entries = []
    for line in lines[3:]:
        if not line.strip():
            continue
        left, sep, right = line.partition(SEPARATOR)
        if not sep:
            return None
        number, space, name = left.partition(' ')
        if not space or not name:
            return None
        try:
            url = parse_url(right)
        except MalformedUrl:
            return None
        entries.append((name, url))
    return entries or None


def parse_document(text):
    """
    Read a fetched paste document.

    :returns: an :class:`Index` if ``text`` is a valid index, else a
              :class:`RawDocument` holding ``text``
    """
    entries = _parse_entries(text)
    if entries is None:
        return RawDocument(text)
    names = [name for name, url in entries]
    if len(set(names)) != len(names):
        return RawDocument(text)
    if any(SEPARATOR in name or '\r' in name or not name.strip() for name in names):
        return RawDocument(text)
    return Index(entries)
