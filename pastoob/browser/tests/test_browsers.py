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

import json
import os
import shutil
import tempfile
from unittest import TestCase

from pastoob.browser import Browser, DomainBrowser
from pastoob.browser.exceptions import ClientError, HTTPNotFound, ServerError
from pastoob.exceptions import BrowserHTTPError, BrowserHTTPNotFound, BrowserUnavailable
from pastoob.tools.log import settings
from pastoob.tools.test import FakeAdapter


class MyMockBrowser(DomainBrowser):
    BASEURL = 'https://paste.example.org/'


def echo(request):
    body = request.body
    if isinstance(body, bytes):
        body = body.decode('utf-8')
    return 200, u'%s %s\n%s' % (request.method, request.url, body or '')


class BrowserTest(TestCase):
    def setUp(self):
        self.browser = MyMockBrowser()
        self.adapter = FakeAdapter.mount(self.browser, echo)

    def test_absurl(self):
        self.assertEqual(self.browser.absurl('raw/abcd'), 'https://paste.example.org/raw/abcd')
        self.assertEqual(self.browser.absurl('/documents'), 'https://paste.example.org/documents')
        self.assertEqual(self.browser.absurl('http://sprunge.us/x'), 'http://sprunge.us/x')
        self.assertEqual(DomainBrowser().absurl('abcd'), 'abcd')
        self.assertEqual(DomainBrowser('https://paste.rs/').absurl('abcd'), 'https://paste.rs/abcd')

    def test_get(self):
        self.assertEqual(self.browser.get_contents('abcd'), u'GET https://paste.example.org/abcd\n')
        request = self.adapter.requests[0]
        self.assertEqual(request.headers['User-Agent'], Browser.USER_AGENT)

    def test_post(self):
        response = self.browser.open('documents', data={'sprunge': u'hé'.encode('utf-8')})
        self.assertEqual(response.text, u'POST https://paste.example.org/documents\nsprunge=h%C3%A9')

    def test_post_json(self):
        self.browser.open('gists', json={'public': False})
        request = self.adapter.requests[0]
        self.assertEqual(request.method, 'POST')
        self.assertEqual(json.loads(request.body.decode('utf-8')), {'public': False})

    def test_explicit_method(self):
        self.browser.open('documents', method='PUT', data=b'x')
        self.assertEqual(self.adapter.requests[0].method, 'PUT')

    # Without charset, text is UTF-8 and not the ISO-8859-1 of requests
    def test_undeclared_charset(self):
        FakeAdapter.mount(self.browser, lambda request: (200, u'héllo ✓\n', {'Content-Type': 'text/plain'}))
        self.assertEqual(self.browser.get_contents('abcd'), u'héllo ✓\n')
        FakeAdapter.mount(self.browser, lambda request: (200, u'1. é: https://paste.rs/a\n', {}))
        self.assertEqual(self.browser.get_contents('abcd'), u'1. é: https://paste.rs/a\n')

    def test_declared_charset(self):
        FakeAdapter.mount(self.browser, lambda request: (200, u'héllo', {'Content-Type': 'text/plain; charset=UTF-8'}))
        response = self.browser.open('abcd')
        self.assertEqual(response.encoding, 'UTF-8')
        self.assertEqual(response.text, u'héllo')


class StatusTest(TestCase):
    def setUp(self):
        self.browser = MyMockBrowser()
        self.status = 200
        FakeAdapter.mount(self.browser, lambda request: (self.status, u'some error\n'))

    def test_not_found(self):
        self.status = 404
        with self.assertRaises(HTTPNotFound) as cm:
            self.browser.open('missing')
        self.assertIsInstance(cm.exception, BrowserHTTPNotFound)
        self.assertEqual(cm.exception.response.status_code, 404)
        self.assertIn('some error', str(cm.exception))

    def test_client_error(self):
        self.status = 403
        with self.assertRaises(ClientError) as cm:
            self.browser.open('forbidden')
        self.assertIsInstance(cm.exception, BrowserHTTPError)
        self.assertTrue(str(cm.exception).startswith('403 Client Error: Forbidden'))

    def test_server_error(self):
        self.status = 503
        with self.assertRaises(ServerError) as cm:
            self.browser.open('down')
        self.assertIsInstance(cm.exception, BrowserUnavailable)
        self.assertEqual(cm.exception.response.status_code, 503)

    def test_partial_content_is_not_an_error(self):
        self.status = 206
        self.assertEqual(self.browser.open('big').status_code, 206)


class SaveResponsesTest(TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp(prefix='pastoob_test_')
        settings['save_responses'] = True

    def tearDown(self):
        settings['save_responses'] = None
        shutil.rmtree(self.tmpdir)

    def test_saved(self):
        browser = MyMockBrowser(responses_dirname=self.tmpdir)
        FakeAdapter.mount(browser, echo)
        browser.open('abcd.txt')
        files = sorted(os.listdir(self.tmpdir))
        self.assertEqual(files, ['01-200-abcd.txt', '01-200-abcd.txt-request.txt',
                                 '01-200-abcd.txt-response.txt', 'url_response_match.txt'])
