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

from types import MappingProxyType

from pastoob.backends.gist import GistBackend
from pastoob.backends.hastebin import HastebinBackend
from pastoob.backends.pasters import PastersBackend
from pastoob.backends.sprunge import SprungeBackend
from pastoob.exceptions import BinNotFound
from pastoob.tools.log import getLogger
from pastoob.tools.url import domain


__all__ = ['BACKENDS', 'Bins']


BACKENDS = (
    GistBackend,
    SprungeBackend,
    HastebinBackend,
    PastersBackend,
)


class Bins(object):
    """
    The bins known by pastoob, looked up by name or by domain.

    The table is built once and is never changed afterwards.

    :param config: per bin configuration, ``{name: {key: value}}``
    :type config: dict
    :param backends: bin classes to instanciate
    """

    def __init__(self, config=None, backends=BACKENDS):
        self.logger = getLogger('bins')
        if config is None:
            config = {}
        bins = tuple(klass(config.get(klass.NAME) or {}, logger=self.logger)
                     for klass in backends)
        self.bins = bins
        self.by_name = MappingProxyType(dict((b.name.lower(), b) for b in bins))
        self.by_domain = MappingProxyType(dict((b.DOMAIN.lower(), b) for b in bins))

    def __iter__(self):
        return iter(self.bins)

    def get_bin_names(self):
        return [b.name for b in self.bins]

    def get_bin_by_name(self, name):
        """
        :raises: :class:`BinNotFound`
        """
        try:
            return self.by_name[name.lower()]
        except KeyError:
            raise BinNotFound(name)

    def get_bin_by_domain(self, name):
        """
        :raises: :class:`BinNotFound`
        """
        try:
            return self.by_domain[name.lower()]
        except KeyError:
            raise BinNotFound(name)

    def get_bin_for_url(self, url):
        """
        Find the bin of an URL, by its domain first, then by asking each bin.

        :raises: :class:`BinNotFound`
        """
        b = self.by_domain.get(domain(url))
        if b is not None:
            return b
        for b in self.bins:
            if b.verify_url(url):
                return b
        raise BinNotFound(url)
