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

from urllib.parse import urlsplit

from pastoob.capabilities.paste import RemotePasteFile
from pastoob.exceptions import MalformedUrl, UnsupportedOperation, UploadError
from pastoob.tools.backend import BackendConfig, Module
from pastoob.tools.capabilities.paste import BasePasteBin
from pastoob.tools.url import parse_url
from pastoob.tools.value import ValueBackendPassword

from .browser import GistBrowser


__all__ = ['GistBackend']


RAW_DOMAIN = 'gist.githubusercontent.com'


class GistBackend(Module, BasePasteBin):
    """
    Gists natively hold several files, so this bin does not use indexes.
    """
    NAME = 'gist'
    DOMAIN = 'gist.github.com'
    MAINTAINER = u'pastoob contributors'
    VERSION = '1.0'
    DESCRIPTION = 'GitHub gists'
    LICENSE = 'LGPLv3+'
    BROWSER = GistBrowser
    CONFIG = BackendConfig(
        ValueBackendPassword('token', label='Optional GitHub API token', default=''),
    )

    def create_default_browser(self):
        return self.create_browser(self.config['token'].get() or None)

    def is_raw_url(self, url):
        return urlsplit(url).hostname == RAW_DOMAIN

    def verify_url(self, url):
        hostname = urlsplit(url).hostname
        segments = self.segments(url)
        if hostname == self.DOMAIN:
            return len(segments) in (1, 2)
        if hostname == RAW_DOMAIN:
            return len(segments) >= 3 and segments[2] == 'raw'
        return False

    def get_gist_id(self, url):
        """
        Get the gist id of a gist page URL or of a raw file URL.
        """
        segments = self.segments(url)
        if self.is_raw_url(url):
            # /<user>/<id>/raw/<revision>/<name>
            if len(segments) < 3:
                raise MalformedUrl(url, 'not a gist file')
            return segments[1]
        if len(segments) not in (1, 2):
            raise MalformedUrl(url, 'not a gist')
        return segments[-1]

    def produce_info(self, url):
        if self.is_raw_url(url):
            return super(GistBackend, self).produce_info(url)

        gist = self.browser.get_gist(self.get_gist_id(url))
        info = []
        for name, f in gist['files'].items():
            # the API omits the contents of big files
            contents = None if f.get('truncated') else f.get('content')
            info.append(RemotePasteFile(name, f['raw_url'], contents))
        self.logger.debug(u'gist %s has %d files', gist.get('id'), len(info))
        return info

    def convert_url_to_raw_url(self, url):
        if self.is_raw_url(url):
            return url
        files = self.browser.get_gist(self.get_gist_id(url))['files']
        if len(files) != 1:
            raise UnsupportedOperation('gist %s has %d files, there is no single raw url' % (url, len(files)))
        return list(files.values())[0]['raw_url']

    def download(self, url):
        return self.browser.get_contents(url)

    def get_upload_url(self):
        return self.browser.absurl('gists')

    def upload(self, url, params, paste):
        return self.browser.post_gist(url, [paste], params.get('public'), params.get('title'))

    def upload_all(self, pastes, params=None):
        if params is None:
            params = {}
        if len(pastes) <= 1:
            return super(GistBackend, self).upload_all(pastes, params)
        names = [p.name for p in pastes]
        if len(set(names)) != len(names):
            raise UploadError('file names must be unique: %s' % ', '.join(names))
        url = parse_url(self.get_upload_url())
        response = self.browser.post_gist(url, pastes, params.get('public'), params.get('title'))
        try:
            return parse_url(response)
        except MalformedUrl:
            raise UploadError('service did not answer with an url', body=response)
