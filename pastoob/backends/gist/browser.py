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

from pastoob.browser import DomainBrowser
from pastoob.exceptions import UploadError


__all__ = ['GistBrowser']


class GistBrowser(DomainBrowser):
    BASEURL = 'https://api.github.com/'

    def __init__(self, token, *args, **kwargs):
        super(GistBrowser, self).__init__(*args, **kwargs)
        self.token = token

    def api_headers(self):
        headers = {'Accept': 'application/vnd.github+json'}
        if self.token:
            headers['Authorization'] = 'token %s' % self.token
        return headers

    def get_gist(self, gist_id):
        """
        Get the description of a gist from the API.

        :rtype: dict
        """
        return self.open('gists/%s' % gist_id, headers=self.api_headers()).json()

    def post_gist(self, url, pastes, public=False, description=None):
        """
        Create a gist holding every given file.

        :returns: URL of the gist page
        """
        data = {
            'description': description or '',
            'public': bool(public),
            'files': dict((p.name, {'content': p.contents}) for p in pastes),
        }
        response = self.open(url, json=data, headers=self.api_headers())
        try:
            return response.json()['html_url']
        except (ValueError, KeyError, TypeError):
            raise UploadError('unexpected answer from the gist API', body=response.text)
