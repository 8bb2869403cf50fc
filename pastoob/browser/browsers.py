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

import mimetypes
import os
import re
import sys
import tempfile
from urllib.parse import urljoin, urlsplit

import requests

from pastoob import __version__
from pastoob.tools.log import getLogger

from .exceptions import ClientError, HTTPNotFound, ServerError


__all__ = ['Browser', 'DomainBrowser']


class Browser(object):
    """
    Thin layer over a python-requests session: one session per bin, HTTP
    errors turned into exceptions, optional dumps of every response.

    :param logger: parent logger
    :param proxy: ``{scheme: proxy_url}``
    :param responses_dirname: where responses are dumped when the
                              ``save_responses`` log setting is on
    """

    USER_AGENT = 'pastoob/%s' % __version__

    TIMEOUT = 10.0
    """
    Default timeout of requests, in seconds.
    """

    VERIFY = True
    """
    Check SSL certificates (unless the ``ssl_insecure`` log setting is on).
    """

    MAX_RETRIES = 0
    """
    Failed requests are never retried.
    """

    def __init__(self, logger=None, proxy=None, responses_dirname=None):
        self.logger = getLogger('browser', logger)
        self.proxies = proxy or {}
        self.responses_dirname = responses_dirname
        self.responses_count = 0
        self.session = self._setup_session()

    def _setup_session(self):
        session = requests.Session()
        adapter = requests.adapters.HTTPAdapter(max_retries=self.MAX_RETRIES)
        session.mount('http://', adapter)
        session.mount('https://', adapter)

        # environment proxies are already in self.proxies, see Module.create_browser
        session.trust_env = False
        session.proxies = self.proxies
        session.verify = self.VERIFY and not self.logger.settings['ssl_insecure']
        session.headers['User-Agent'] = self.USER_AGENT

        if self.logger.settings['save_responses']:
            session.hooks['response'].append(self.save_response)
        return session

    def save_response(self, response, **kwargs):
        """
        Dump a response, and the request which led to it, in
        :attr:`responses_dirname`.
        """
        if self.responses_dirname is None:
            self.responses_dirname = tempfile.mkdtemp(prefix='pastoob_session_')
            print('Debug data will be saved in this directory: %s' % self.responses_dirname, file=sys.stderr)
        elif not os.path.isdir(self.responses_dirname):
            os.makedirs(self.responses_dirname)

        self.responses_count += 1
        mimetype = response.headers.get('Content-Type', '').split(';')[0].strip()
        ext = '.txt' if mimetype == 'text/plain' else (mimetypes.guess_extension(mimetype) or '')
        slug = re.sub(r'[^A-Za-z0-9\.\-_]+', '_', urlsplit(response.url).path.rpartition('/')[2])[-10:]
        if slug.endswith(ext):
            ext = ''
        filename = '%02d-%d%s%s%s' % (self.responses_count, response.status_code,
                                      '-' if slug else '', slug, ext)
        path = os.path.join(self.responses_dirname, filename)

        with open(path, 'wb') as f:
            f.write(response.content)

        request = response.request
        with open(path + '-request.txt', 'w') as f:
            f.write('%s %s\n\n\n' % (request.method, request.url))
            f.writelines('%s: %s\n' % item for item in request.headers.items())
            if request.body is not None:
                body = request.body
                if isinstance(body, bytes):
                    body = body.decode('utf-8', 'replace')
                f.write('\n\n\n%s' % body)

        with open(path + '-response.txt', 'w') as f:
            f.write('Time: %3.3fs\n' % response.elapsed.total_seconds())
            f.write('%s %s\n\n\n' % (response.status_code, response.reason))
            f.writelines('%s: %s\n' % item for item in response.headers.items())

        with open(os.path.join(self.responses_dirname, 'url_response_match.txt'), 'a') as f:
            f.write('# %d %s %s\n' % (response.status_code, response.reason, mimetype))
            f.write('%s\t%s\n' % (response.url, filename))

        self.logger.info(u'Response saved to %s', path)

    def open(self, url, data=None, json=None, method=None, timeout=None, **kwargs):
        """
        Make an HTTP request, a POST when there is a body, else a GET.

        Other keyword arguments go to :meth:`requests.Session.request`.

        :param data: form fields or raw body
        :type data: dict or bytes or None
        :param json: object sent as a JSON body
        :rtype: :class:`requests.Response`
        :raises: :class:`ClientError`, :class:`HTTPNotFound`, :class:`ServerError`
        """
        if method is None:
            method = 'GET' if data is None and json is None else 'POST'

        self.logger.debug(u'%s %s', method, url)
        response = self.session.request(method, url, data=data, json=json,
                                        timeout=self.TIMEOUT if timeout is None else timeout,
                                        **kwargs)
        if 'charset' not in response.headers.get('Content-Type', '').lower():
            # pastes are posted as UTF-8, requests would guess ISO-8859-1
            response.encoding = 'utf-8'
        self.raise_for_status(response)
        return response

    def raise_for_status(self, response):
        """
        Like :meth:`requests.Response.raise_for_status`, with the response
        body in the message and the exception classes of
        :mod:`pastoob.browser.exceptions`.
        """
        status = response.status_code
        if 400 <= status < 500:
            cls = HTTPNotFound if status == 404 else ClientError
            msg = '%s Client Error: %s' % (status, response.reason)
        elif 500 <= status < 600:
            cls = ServerError
            msg = '%s Server Error: %s' % (status, response.reason)
        else:
            return

        body = response.text.strip()
        if body:
            msg += '\n%s' % body
        raise cls(msg, response=response)


class DomainBrowser(Browser):
    """
    A browser resolving relative URLs against :attr:`BASEURL`.

    With ``BASEURL = 'https://paste.rs/'``, ``self.open('abcd')`` gets
    ``https://paste.rs/abcd``.

    :param baseurl: overrides :attr:`BASEURL`
    """

    BASEURL = None

    def __init__(self, baseurl=None, *args, **kwargs):
        super(DomainBrowser, self).__init__(*args, **kwargs)
        if baseurl is not None:
            self.BASEURL = baseurl

    def absurl(self, uri):
        """
        Make ``uri`` absolute. Absolute URIs are returned unchanged.
        """
        if self.BASEURL is None:
            return uri
        return urljoin(self.BASEURL, uri)

    def open(self, url, *args, **kwargs):
        return super(DomainBrowser, self).open(self.absurl(url), *args, **kwargs)

    def get_contents(self, url):
        """
        Text of the page at ``url``.
        """
        return self.open(url).text
