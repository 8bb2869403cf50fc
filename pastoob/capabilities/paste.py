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


from pastoob.tools.url import path_segments

from .base import Capability


__all__ = ['PasteFile', 'RemotePasteFile',
           'CapRawUrl', 'CapDownload', 'CapUpload', 'CapUploadUrl',
           'CapVerifyUrl', 'CapIndex']


class PasteFile(object):
    """
    A local file: the name and the whole text.
    """

    def __init__(self, name, contents):
        self.name = name
        self.contents = contents

    def __eq__(self, other):
        if not isinstance(other, PasteFile):
            return NotImplemented
        return (self.name, self.contents) == (other.name, other.contents)

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __repr__(self):
        return '<PasteFile %r>' % self.name


class RemotePasteFile(object):
    """
    A file found while resolving a remote paste.

    :param name: file name
    :param url: where the file can be fetched
    :param contents: text already fetched while resolving, if any
    """

    def __init__(self, name, url, contents=None):
        self.name = name
        self.url = url
        self.contents = contents

    def __repr__(self):
        return '<RemotePasteFile %r %s>' % (self.name, self.url)


class CapRawUrl(Capability):
    def convert_url_to_raw_url(self, url):
        """
        Get the URL serving the raw text of a paste.

        It must return ``url`` unchanged if it is already a raw URL.

        :param url: any URL of a paste
        :type url: str
        :rtype: str
        """
        raise NotImplementedError()

    def convert_urls_to_raw_urls(self, urls):
        return [self.convert_url_to_raw_url(url) for url in urls]


class CapDownload(Capability):
    def download(self, url):
        """
        GET an URL and return the text of the response.

        HTTP errors are raised (see :mod:`pastoob.browser.exceptions`),
        and never retried.

        :type url: str
        :rtype: str
        """
        raise NotImplementedError()


class CapUpload(Capability):
    def upload(self, url, params, paste):
        """
        Post a file to the service.

        :param url: upload endpoint, see :func:`CapUploadUrl.get_upload_url`
        :type url: str
        :param params: options of the paste (``public``, ...)
        :type params: dict
        :param paste: the file to post
        :type paste: :class:`PasteFile`
        :returns: text of the response, expected to be the paste URL
        :rtype: str
        """
        raise NotImplementedError()


class CapUploadUrl(Capability):
    def get_upload_url(self):
        """
        :returns: the fixed upload endpoint of the service
        :rtype: str
        """
        raise NotImplementedError()


class CapVerifyUrl(Capability):
    def segments(self, url):
        return path_segments(url)

    def verify_url(self, url):
        """
        Tell if an URL plausibly points to a paste of this service.

        :rtype: bool
        """
        raise NotImplementedError()


class CapIndex(Capability):
    """
    Services declaring this capability store multi-file pastes as an index
    of single-file pastes.
    """
