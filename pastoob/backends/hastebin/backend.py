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

import posixpath
from urllib.parse import urlsplit

from pastoob.exceptions import MalformedUrl
from pastoob.tools.backend import Module
from pastoob.tools.capabilities.paste import IndexedPasteBin

from .browser import HastebinBrowser


__all__ = ['HastebinBackend']


class HastebinBackend(Module, IndexedPasteBin):
    NAME = 'hastebin'
    DOMAIN = 'hastebin.com'
    MAINTAINER = u'pastoob contributors'
    VERSION = '1.0'
    DESCRIPTION = 'hastebin text sharing service'
    LICENSE = 'LGPLv3+'
    BROWSER = HastebinBrowser

    def verify_url(self, url):
        if urlsplit(url).hostname != self.DOMAIN:
            return False
        segments = self.segments(url)
        return len(segments) == 1 or (len(segments) == 2 and segments[0] == 'raw')

    def get_key(self, url):
        segments = self.segments(url)
        if not segments or len(segments) > 2:
            raise MalformedUrl(url, 'not a hastebin document')
        # the extension only selects syntax highlighting
        return posixpath.splitext(segments[-1])[0]

    def convert_url_to_raw_url(self, url):
        return self.browser.absurl('raw/%s' % self.get_key(url))

    def download(self, url):
        return self.browser.get_contents(url)

    def get_upload_url(self):
        return self.browser.absurl('documents')

    def upload(self, url, params, paste):
        return self.browser.post_paste(url, paste.contents)
