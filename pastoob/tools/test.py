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
Helpers for tests: an in-memory bin and a fake HTTP adapter for browsers.
"""

from collections import OrderedDict
from http.client import responses
from urllib.parse import urlsplit

import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict
from requests.utils import get_encoding_from_headers

from pastoob.browser.exceptions import HTTPNotFound
from pastoob.tools.backend import Module
from pastoob.tools.capabilities.paste import BasePasteBin, ContentProducer, IndexedPasteBin


__all__ = ['FakeAdapter', 'make_response', 'MemoryBackend', 'MemorySingleFileBackend',
           'MemoryRawBackend']


def make_response(request, status_code=200, body=u'', headers=None):
    """
    Build a response whose body is encoded as UTF-8. As with real
    responses, the encoding is only known when ``headers`` declare it.
    """
    response = requests.Response()
    response.status_code = status_code
    response.reason = responses.get(status_code, '')
    response.headers = CaseInsensitiveDict(
        {'Content-Type': 'text/plain; charset=utf-8'} if headers is None else headers)
    response._content = body.encode('utf-8')
    response.encoding = get_encoding_from_headers(response.headers)
    response.url = request.url if request is not None else None
    response.request = request
    return response


class FakeAdapter(BaseAdapter):
    """
    Transport adapter answering requests without any network access.

    :param handler: called with each :class:`requests.PreparedRequest`, returns
                    ``(status_code, body)`` or ``(status_code, body, headers)``
    """

    def __init__(self, handler):
        super(FakeAdapter, self).__init__()
        self.handler = handler
        self.requests = []

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        return make_response(request, *self.handler(request))

    def close(self):
        pass

    @classmethod
    def mount(cls, browser, handler):
        adapter = cls(handler)
        browser.session.mount('http://', adapter)
        browser.session.mount('https://', adapter)
        return adapter


class MemoryStore(object):
    """
    Pastes of the memory bins, keyed by raw URL.
    """

    BASEURL = 'https://paste.example.org/'

    def __init__(self):
        self.pastes = OrderedDict()
        self.downloads = []
        self.uploads = []

    def html_url(self, paste_id):
        return '%s%s' % (self.BASEURL, paste_id)

    def raw_url(self, paste_id):
        return '%sraw/%s' % (self.BASEURL, paste_id)

    def add(self, paste_id, contents):
        self.pastes[self.raw_url(paste_id)] = contents
        return self.html_url(paste_id)

    def get(self, url):
        self.downloads.append(url)
        try:
            return self.pastes[url]
        except KeyError:
            raise HTTPNotFound('404 Client Error: Not Found', response=make_response(None, 404, u'no such paste'))


class MemoryRawBackend(Module, ContentProducer):
    """
    Only able to fetch and to convert URLs.
    """
    NAME = 'memoryraw'
    DOMAIN = 'paste.example.org'
    DESCRIPTION = 'pastes kept in memory'

    def __init__(self, *args, **kwargs):
        super(MemoryRawBackend, self).__init__(*args, **kwargs)
        self.store = MemoryStore()

    def convert_url_to_raw_url(self, url):
        path = urlsplit(url).path
        if path.startswith('/raw/'):
            return url
        return self.store.raw_url(path.lstrip('/'))

    def download(self, url):
        return self.store.get(url)


class MemorySingleFileBackend(MemoryRawBackend, BasePasteBin):
    NAME = 'memorysingle'

    # answer set by tests to simulate a broken service
    answer = None

    def verify_url(self, url):
        return urlsplit(url).hostname == self.DOMAIN

    def get_upload_url(self):
        return self.store.BASEURL

    def upload(self, url, params, paste):
        self.store.uploads.append((paste, params))
        if self.answer is not None:
            return self.answer
        return self.store.add('p%d' % len(self.store.uploads), paste.contents) + '\n'


class MemoryBackend(MemorySingleFileBackend, IndexedPasteBin):
    NAME = 'memory'
