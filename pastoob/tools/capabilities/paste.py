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

import os

from pastoob.capabilities.paste import (
    CapDownload, CapIndex, CapRawUrl, CapUpload, CapUploadUrl, CapVerifyUrl,
    PasteFile, RemotePasteFile,
)
from pastoob.exceptions import (
    AmbiguousSelection, FileNotFound, InvalidOutputDirectory, MalformedUrl,
    UnsupportedOperation, UploadError,
)
from pastoob.tools.index import Index, check_name, parse_document
from pastoob.tools.log import getLogger
from pastoob.tools.path import get_free_path, sanitize_path
from pastoob.tools.url import last_segment, parse_url


__all__ = ['Selection', 'InfoProducer', 'IndexedInfoProducer', 'RawInfoProducer',
           'ContentProducer', 'PasteUploader', 'IndexedUploader',
           'BasePasteBin', 'IndexedPasteBin',
           'select_files', 'number_lines', 'join_files', 'write_files']


INDEX_NAME = 'index.md'

logger = getLogger('pastoob.paste')


class Selection(object):
    """
    What to do with the files of the pastes being got.

    :param files: names of the wanted files (case insensitive)
    :type files: list[str]
    :param range: 1-based positions of the wanted files
    :type range: list[int]
    :param all: take every file
    :param urls: only return the URLs of the files
    :param raw_urls: only return the raw URLs of the files
    :param number_lines: prefix each line with its number
    :param write: write the files instead of returning their contents
    :param output: directory where to write, defaults to the current one
    """

    def __init__(self, files=None, range=None, all=False, urls=False,
                 raw_urls=False, number_lines=False, write=False, output=None):
        self.files = list(files or [])
        self.range = list(range or [])
        self.all = all
        self.urls = urls
        self.raw_urls = raw_urls
        self.number_lines = number_lines
        self.write = write
        self.output = output


def select_files(files, selection):
    """
    Pick the wanted files among the resolved ones.

    :type files: list[:class:`RemotePasteFile`]
    :type selection: :class:`Selection`
    :rtype: list[:class:`RemotePasteFile`]
    :raises: :class:`FileNotFound`, :class:`AmbiguousSelection`
    """
    if selection.files:
        by_name = {}
        for f in files:
            by_name.setdefault(f.name.lower(), f)
        selected = []
        for name in selection.files:
            try:
                selected.append(by_name[name.lower()])
            except KeyError:
                raise FileNotFound(name)
        return selected

    if selection.range:
        selected = []
        for number in selection.range:
            if not 1 <= number <= len(files):
                raise FileNotFound(number)
            selected.append(files[number - 1])
        return selected

    if selection.all or len(files) == 1:
        return list(files)

    raise AmbiguousSelection([f.name for f in files])


def number_lines(text):
    """
    >>> print(number_lines('a\\nb'))
    1  a
    2  b
    """
    lines = text.split('\n')
    width = len(str(len(lines)))
    return '\n'.join('%*d  %s' % (width, number, line)
                     for number, line in enumerate(lines, 1))


def join_files(pastes):
    """
    Format files for the terminal, with a header for each one when there
    are several.
    """
    if len(pastes) == 1:
        return pastes[0].contents
    return '\n'.join('==> %s <==\n%s' % (p.name, p.contents) for p in pastes)


def write_files(pastes, output=None):
    """
    Write files in a directory, never overwriting existing files.

    :param output: destination directory, current one if None
    :returns: a summary line for each written file
    :rtype: str
    :raises: :class:`InvalidOutputDirectory`, :class:`InvalidPath`
    """
    if output is None:
        output = os.getcwd()
    if not os.path.exists(output):
        raise InvalidOutputDirectory(output)
    if not os.path.isdir(output):
        raise InvalidOutputDirectory(output, 'output is not a directory')

    # check every name before writing anything
    paths = [os.path.join(output, sanitize_path(p.name)) for p in pastes]

    summary = []
    for paste, wanted in zip(pastes, paths):
        dirname = os.path.dirname(wanted)
        if not os.path.isdir(dirname):
            os.makedirs(dirname)
        while True:
            path = get_free_path(wanted)
            try:
                f = open(path, 'x', encoding='utf-8')
            except FileExistsError:
                # created since get_free_path looked, try the next number
                continue
            break
        with f:
            f.write(paste.contents)
        logger.debug(u'Wrote %d characters to %s', len(paste.contents), path)
        summary.append('Wrote %s -> %s\n' % (paste.name, path))
    return ''.join(summary)


class InfoProducer(CapRawUrl, CapDownload):
    """
    Get the files of a paste, for services only able to fetch raw URLs.

    Every paste is seen as a single file.
    """

    def produce_info(self, url):
        """
        :param url: any URL of a paste
        :rtype: list[:class:`RemotePasteFile`]
        """
        raw_url = self.convert_url_to_raw_url(url)
        return [self._single_file(url, self.download(raw_url))]

    def produce_info_all(self, urls):
        info = []
        for url in urls:
            info.extend(self.produce_info(url))
        return info

    def _single_file(self, url, contents):
        return RemotePasteFile(last_segment(url), url, contents)


class IndexedInfoProducer(InfoProducer, CapIndex):
    """
    Get the files of a paste which may be an index of other pastes.
    """

    def produce_info(self, url):
        raw_url = self.convert_url_to_raw_url(url)
        contents = self.download(raw_url)
        document = parse_document(contents)
        if isinstance(document, Index):
            logger.debug(u'%s is an index of %d files', url, len(document))
            return [RemotePasteFile(name, file_url) for name, file_url in document.items()]
        logger.debug(u'%s is a single file', url)
        return [self._single_file(url, document.contents)]


class RawInfoProducer(InfoProducer):
    def produce_raw_info(self, url):
        """
        Like :func:`produce_info`, with every URL converted to a raw URL.
        """
        info = self.produce_info(url)
        for f in info:
            f.url = self.convert_url_to_raw_url(f.url)
        return info

    def produce_raw_info_all(self, urls):
        info = []
        for url in urls:
            info.extend(self.produce_raw_info(url))
        return info


class ContentProducer(RawInfoProducer):
    def produce_raw_contents(self, urls, selection=None):
        """
        Get the wanted files of one or several pastes.

        :param urls: URLs of pastes
        :type urls: list[str]
        :type selection: :class:`Selection`
        :returns: the URLs of the files, their contents, or a summary of
                  the written files, depending on ``selection``
        :rtype: str
        """
        if selection is None:
            selection = Selection()

        if selection.urls:
            info = self.produce_info_all(urls)
        else:
            info = self.produce_raw_info_all(urls)

        selected = select_files(info, selection)
        if selection.urls or selection.raw_urls:
            return '\n'.join(f.url for f in selected)

        pastes = []
        for f in selected:
            if f.contents is None:
                contents = self.download(f.url)
            else:
                contents = f.contents
            if selection.number_lines:
                contents = number_lines(contents)
            pastes.append(PasteFile(f.name, contents))

        if selection.write:
            return write_files(pastes, selection.output)
        return join_files(pastes)


class PasteUploader(CapUploadUrl, CapUpload):
    def upload_paste(self, paste, params=None):
        """
        Post a single file.

        :type paste: :class:`PasteFile`
        :returns: URL of the new paste
        :rtype: str
        :raises: :class:`UploadError` if the service did not answer with an URL
        """
        if params is None:
            params = {}
        url = parse_url(self.get_upload_url())
        response = self.upload(url, params, paste)
        try:
            return parse_url(response)
        except MalformedUrl:
            raise UploadError('service did not answer with an url', body=response)

    def upload_all(self, pastes, params=None):
        """
        Post files as one paste.

        :type pastes: list[:class:`PasteFile`]
        :returns: URL of the new paste
        :rtype: str
        """
        if not pastes:
            raise UploadError('no files to upload')
        if len(pastes) > 1:
            raise UnsupportedOperation('this service can only post a single file')
        return self.upload_paste(pastes[0], params)


class IndexedUploader(PasteUploader, CapIndex):
    def generate_index(self, pastes, params=None):
        """
        Post each file on its own and return the :class:`Index` of them.
        """
        names = [p.name for p in pastes]
        for name in names:
            check_name(name)
        if len(set(names)) != len(names):
            raise UploadError('file names must be unique: %s' % ', '.join(names))

        urls = []
        for paste in pastes:
            urls.append(self.upload_paste(paste, params))
            logger.debug(u'Posted %s to %s', paste.name, urls[-1])
        return Index(zip(names, urls))

    def upload_all(self, pastes, params=None):
        if len(pastes) <= 1:
            return super(IndexedUploader, self).upload_all(pastes, params)
        index = self.generate_index(pastes, params)
        return self.upload_paste(PasteFile(INDEX_NAME, index.render()), params)


class BasePasteBin(ContentProducer, PasteUploader, CapVerifyUrl):
    """
    A bin posting and getting single-file pastes.
    """


class IndexedPasteBin(IndexedInfoProducer, BasePasteBin, IndexedUploader):
    """
    A bin storing multi-file pastes as indexes.
    """
