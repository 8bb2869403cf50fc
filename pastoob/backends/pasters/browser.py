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


__all__ = ['PastersBrowser']


class PastersBrowser(DomainBrowser):
    BASEURL = 'https://paste.rs/'

    def post_paste(self, url, contents):
        response = self.open(url, data=contents.encode('utf-8'))
        # the service stores only the beginning of too big pastes
        if response.status_code == 206:
            raise UploadError('paste was too big and has been truncated', body=response.text)
        return response.text
