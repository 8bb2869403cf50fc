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
from unittest import TestCase
from urllib.parse import parse_qs, urlsplit

from pastoob.backends.gist import GistBackend
from pastoob.backends.hastebin import HastebinBackend
from pastoob.backends.pasters import PastersBackend
from pastoob.backends.sprunge import SprungeBackend
from pastoob.browser.exceptions import HTTPNotFound
from pastoob.capabilities.paste import PasteFile
from pastoob.exceptions import MalformedUrl, UnsupportedOperation, UploadError
from pastoob.tools.capabilities.paste import Selection
from pastoob.tools.index import Index
from pastoob.tools.test import FakeAdapter


class FakeService(object):
    """
    Pastes stored by path, answering like a minimalist pastebin.
    """

    def __init__(self, baseurl):
        self.baseurl = baseurl
        # sprunge and paste.rs answer text/plain without charset
        self.headers = {'Content-Type': 'text/plain'}
        self.pastes = {}
        self.posted = []

    def store(self, contents):
        paste_id = 'id%d' % (len(self.pastes) + 1)
        self.pastes['/' + paste_id] = contents
        self.posted.append(contents)
        return paste_id

    def read_body(self, request):
        return request.body.decode('utf-8')

    def __call__(self, request):
        path = urlsplit(request.url).path
        if request.method == 'POST':
            return 200, u'%s%s\n' % (self.baseurl, self.store(self.read_body(request))), self.headers
        if path in self.pastes:
            return 200, self.pastes[path], self.headers
        return 404, u'Not found'


class SprungeService(FakeService):
    def read_body(self, request):
        return parse_qs(request.body)['sprunge'][0]


class SprungeTest(TestCase):
    def setUp(self):
        self.backend = SprungeBackend()
        self.service = SprungeService('http://sprunge.us/')
        self.adapter = FakeAdapter.mount(self.backend.browser, self.service)

    def test_verify_url(self):
        self.assertTrue(self.backend.verify_url('http://sprunge.us/aBcD'))
        self.assertTrue(self.backend.verify_url('http://sprunge.us/aBcD?py'))
        self.assertFalse(self.backend.verify_url('http://sprunge.us/'))
        self.assertFalse(self.backend.verify_url('http://paste.rs/aBcD'))

    def test_segments(self):
        self.assertEqual(self.backend.segments('http://sprunge.us/a//b/?py#n-3'), ['a', 'b'])
        self.assertEqual(self.backend.segments('http://sprunge.us/'), [])

    def test_raw_url(self):
        self.assertEqual(self.backend.convert_url_to_raw_url('http://sprunge.us/aBcD?py#n-3'),
                         'http://sprunge.us/aBcD')

    def test_upload_one(self):
        url = self.backend.upload_all([PasteFile('hello.txt', u'héllo\n')])
        self.assertEqual(url, 'http://sprunge.us/id1')
        self.assertEqual(self.service.posted, [u'héllo\n'])
        request = self.adapter.requests[0]
        self.assertEqual(request.url, 'http://sprunge.us/')

    def test_round_trip(self):
        url = self.backend.upload_all([PasteFile('a.py', u'print(1)\n'), PasteFile('b.py', u'print(2)\n')])
        self.assertEqual(url, 'http://sprunge.us/id3')
        index = Index.parse(self.service.posted[-1])
        self.assertEqual(index.names(), ['a.py', 'b.py'])

        output = self.backend.produce_raw_contents([url + '?md'], Selection(all=True))
        self.assertEqual(output, u'==> a.py <==\nprint(1)\n\n==> b.py <==\nprint(2)\n')
        output = self.backend.produce_raw_contents([url], Selection(files=['b.py']))
        self.assertEqual(output, u'print(2)\n')

    def test_not_found(self):
        self.assertRaises(HTTPNotFound, self.backend.produce_raw_contents, ['http://sprunge.us/nope'])

    def test_non_ascii_round_trip(self):
        url = self.backend.upload_all([PasteFile(u'café.txt', u'héllo ✓\n'), PasteFile(u'b.txt', u'ok')])
        output = self.backend.produce_raw_contents([url], Selection(files=[u'CAFÉ.txt']))
        self.assertEqual(output, u'héllo ✓\n')
        info = self.backend.produce_info(url)
        self.assertEqual([f.name for f in info], [u'café.txt', u'b.txt'])


class HastebinService(FakeService):
    def __call__(self, request):
        if request.method == 'POST':
            if urlsplit(request.url).path != '/documents':
                return 404, u'Not found'
            return 200, json.dumps({'key': self.store(self.read_body(request))}), \
                {'Content-Type': 'application/json'}
        path = urlsplit(request.url).path
        if path.startswith('/raw/') and path[4:] in self.pastes:
            return 200, self.pastes[path[4:]]
        return 404, u'{"message": "Document not found."}'


class HastebinTest(TestCase):
    def setUp(self):
        self.backend = HastebinBackend()
        self.service = HastebinService('https://hastebin.com/')
        self.adapter = FakeAdapter.mount(self.backend.browser, self.service)

    def test_urls(self):
        self.assertTrue(self.backend.verify_url('https://hastebin.com/abcd.py'))
        self.assertTrue(self.backend.verify_url('https://hastebin.com/raw/abcd'))
        self.assertFalse(self.backend.verify_url('https://hastebin.com/about/abcd'))
        self.assertEqual(self.backend.convert_url_to_raw_url('https://hastebin.com/abcd.py'),
                         'https://hastebin.com/raw/abcd')
        self.assertEqual(self.backend.convert_url_to_raw_url('https://hastebin.com/raw/abcd'),
                         'https://hastebin.com/raw/abcd')
        self.assertRaises(MalformedUrl, self.backend.convert_url_to_raw_url, 'https://hastebin.com/')

    def test_upload(self):
        url = self.backend.upload_all([PasteFile('notes', u'some notes')])
        self.assertEqual(url, 'https://hastebin.com/id1')
        request = self.adapter.requests[0]
        self.assertEqual(request.url, 'https://hastebin.com/documents')
        self.assertEqual(request.headers['Content-Type'], 'text/plain; charset=utf-8')
        self.assertEqual(self.backend.produce_raw_contents([url + '.txt']), u'some notes')

    def test_bad_answer(self):
        FakeAdapter.mount(self.backend.browser, lambda request: (200, u'<html>oops</html>'))
        with self.assertRaises(UploadError) as cm:
            self.backend.upload_all([PasteFile('notes', u'some notes')])
        self.assertEqual(cm.exception.body, u'<html>oops</html>')

    def test_multiple_files(self):
        url = self.backend.upload_all([PasteFile('a', u'A'), PasteFile('b', u'B')])
        self.assertEqual(self.backend.produce_raw_contents([url], Selection(range=[2])), u'B')
        output = self.backend.produce_raw_contents([url], Selection(all=True, raw_urls=True))
        self.assertEqual(output, u'https://hastebin.com/raw/id1\nhttps://hastebin.com/raw/id2')


class PastersTest(TestCase):
    def setUp(self):
        self.backend = PastersBackend()
        self.service = FakeService('https://paste.rs/')
        FakeAdapter.mount(self.backend.browser, self.service)

    def test_raw_url(self):
        self.assertEqual(self.backend.convert_url_to_raw_url('https://paste.rs/abc.rs'), 'https://paste.rs/abc')
        self.assertRaises(MalformedUrl, self.backend.convert_url_to_raw_url, 'https://paste.rs/a/b')

    def test_round_trip(self):
        url = self.backend.upload_all([PasteFile('main.rs', u'fn main() {}\n')])
        self.assertEqual(url, 'https://paste.rs/id1')
        self.assertEqual(self.backend.produce_info(url + '.rs')[0].name, 'id1.rs')
        self.assertEqual(self.backend.produce_raw_contents([url + '.rs']), u'fn main() {}\n')

    def test_truncated(self):
        FakeAdapter.mount(self.backend.browser, lambda request: (206, u'https://paste.rs/big\n'))
        self.assertRaises(UploadError, self.backend.upload_all, [PasteFile('big', u'x' * 100)])


class GistService(object):
    def __init__(self):
        self.gists = {}
        self.posted = []

    def add(self, gist_id, files, truncated=()):
        self.gists[gist_id] = {
            'id': gist_id,
            'html_url': 'https://gist.github.com/%s' % gist_id,
            'files': dict((name, {
                'filename': name,
                'raw_url': 'https://gist.githubusercontent.com/user/%s/raw/rev/%s' % (gist_id, name),
                'truncated': name in truncated,
                'content': contents[:3] if name in truncated else contents,
            }) for name, contents in files.items()),
        }

    def __call__(self, request):
        parts = urlsplit(request.url)
        if parts.hostname == 'api.github.com':
            if request.method == 'POST':
                data = json.loads(request.body.decode('utf-8'))
                self.posted.append((request, data))
                gist_id = 'new%d' % len(self.posted)
                self.add(gist_id, dict((name, f['content']) for name, f in data['files'].items()))
                return 201, json.dumps({'html_url': 'https://gist.github.com/%s' % gist_id})
            gist_id = parts.path.split('/')[-1]
            if gist_id in self.gists:
                return 200, json.dumps(self.gists[gist_id])
            return 404, u'{"message": "Not Found"}'
        if parts.hostname == 'gist.githubusercontent.com':
            gist_id, name = parts.path.split('/')[2], parts.path.split('/')[-1]
            try:
                f = self.gists[gist_id]['files'][name]
            except KeyError:
                return 404, u'404: Not Found'
            contents = f['content']
            if f['truncated']:
                contents = contents * 10
            return 200, contents
        return 404, u''


class GistTest(TestCase):
    def setUp(self):
        self.backend = GistBackend()
        self.service = GistService()
        self.adapter = FakeAdapter.mount(self.backend.browser, self.service)
        self.service.add('abc123', {'a.txt': u'first', 'b.txt': u'second'}, truncated=('b.txt',))
        self.service.add('single', {'only.txt': u'alone'})

    def test_verify_url(self):
        self.assertTrue(self.backend.verify_url('https://gist.github.com/user/abc123'))
        self.assertTrue(self.backend.verify_url('https://gist.github.com/abc123'))
        self.assertTrue(self.backend.verify_url('https://gist.githubusercontent.com/user/abc123/raw/rev/a.txt'))
        self.assertFalse(self.backend.verify_url('https://gist.github.com/'))
        self.assertFalse(self.backend.verify_url('https://sprunge.us/abc123'))

    def test_gist_id(self):
        self.assertEqual(self.backend.get_gist_id('https://gist.github.com/user/abc123/'), 'abc123')
        self.assertEqual(self.backend.get_gist_id('https://gist.githubusercontent.com/user/abc123/raw/rev/a.txt'),
                         'abc123')
        self.assertRaises(MalformedUrl, self.backend.get_gist_id, 'https://gist.github.com/a/b/c')

    def test_info(self):
        info = sorted(self.backend.produce_info('https://gist.github.com/user/abc123'), key=lambda f: f.name)
        self.assertEqual([(f.name, f.contents) for f in info], [('a.txt', u'first'), ('b.txt', None)])

    def test_truncated_file_is_downloaded(self):
        output = self.backend.produce_raw_contents(['https://gist.github.com/user/abc123'],
                                                   Selection(files=['b.txt', 'a.txt']))
        self.assertEqual(output, u'==> b.txt <==\n' + u'sec' * 10 + u'\n==> a.txt <==\nfirst')

    def test_raw_url(self):
        raw = 'https://gist.githubusercontent.com/user/single/raw/rev/only.txt'
        self.assertEqual(self.backend.convert_url_to_raw_url('https://gist.github.com/user/single'), raw)
        self.assertEqual(self.backend.convert_url_to_raw_url(raw), raw)
        self.assertRaises(UnsupportedOperation, self.backend.convert_url_to_raw_url,
                          'https://gist.github.com/user/abc123')

    def test_raw_file(self):
        raw = 'https://gist.githubusercontent.com/user/abc123/raw/rev/a.txt'
        self.assertEqual(self.backend.produce_raw_contents([raw]), u'first')

    def test_upload_one(self):
        url = self.backend.upload_all([PasteFile('x.py', u'pass')], {'public': True, 'title': 'demo'})
        self.assertEqual(url, 'https://gist.github.com/new1')
        request, data = self.service.posted[0]
        self.assertEqual(request.url, 'https://api.github.com/gists')
        self.assertEqual(data, {'description': 'demo', 'public': True, 'files': {'x.py': {'content': u'pass'}}})
        self.assertNotIn('Authorization', request.headers)

    def test_upload_several_in_one_gist(self):
        url = self.backend.upload_all([PasteFile('a', u'A'), PasteFile('b', u'B')])
        self.assertEqual(len(self.service.posted), 1)
        data = self.service.posted[0][1]
        self.assertEqual(data['public'], False)
        self.assertEqual(sorted(data['files']), ['a', 'b'])
        self.assertEqual(self.backend.produce_raw_contents([url], Selection(files=['B'])), u'B')

    def test_duplicate_names(self):
        self.assertRaises(UploadError, self.backend.upload_all, [PasteFile('a', u'A'), PasteFile('a', u'B')])
        self.assertEqual(self.service.posted, [])

    def test_token(self):
        backend = GistBackend({'token': 'secret'})
        service = GistService()
        FakeAdapter.mount(backend.browser, service)
        backend.upload_all([PasteFile('a', u'A')])
        request = service.posted[0][0]
        self.assertEqual(request.headers['Authorization'], 'token secret')
        self.assertEqual(request.headers['Accept'], 'application/vnd.github+json')
