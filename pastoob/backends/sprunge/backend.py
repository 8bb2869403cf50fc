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

from urllib.parse import urlsplit, urlunsplit

from pastoob.tools.backend import Module
from pastoob.tools.capabilities.paste import IndexedPasteBin

from .browser import SprungeBrowser


__all__ = ['SprungeBackend']


class SprungeBackend(Module, IndexedPasteBin):
    NAME = 'sprunge'
    DOMAIN = 'sprunge.us'
    MAINTAINER = u'pastoob contributors'
    VERSION = '1.0'
    DESCRIPTION = 'sprunge.us command line pastebin'
    LICENSE = 'LGPLv3+'
    BROWSER = SprungeBrowser

    def verify_url(self, url):
        return urlsplit(url).hostname == self.DOMAIN and len(self.segments(url)) == 1

    def convert_url_to_raw_url(self, url):
        # "?py" only asks for syntax highlighting
        parts = urlsplit(url)
        return urlunsplit((parts.scheme, parts.netloc, parts.path, '', ''))

    def download(self, url):
        return self.browser.get_contents(url)

    def get_upload_url(self):
        return self.browser.BASEURL

    def upload(self, url, params, paste):
        return self.browser.post_paste(url, paste.contents)
