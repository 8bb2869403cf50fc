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


__all__ = ['BrowserUnavailable', 'BrowserHTTPError', 'BrowserHTTPNotFound',
           'PasteError', 'InvalidIndex', 'MalformedUrl', 'FileNotFound',
           'AmbiguousSelection', 'InvalidOutputDirectory', 'InvalidPath',
           'UploadError', 'UnsupportedOperation', 'BinNotFound']


class BrowserUnavailable(Exception):
    pass


class BrowserHTTPNotFound(BrowserUnavailable):
    pass


class BrowserHTTPError(BrowserUnavailable):
    pass


class PasteError(Exception):
    """
    Base class of every error raised while getting or posting pastes.
    """


class InvalidIndex(PasteError):
    def __init__(self, reason='invalid index'):
        super(InvalidIndex, self).__init__(reason)
        self.reason = reason


class MalformedUrl(PasteError):
    def __init__(self, url, reason='malformed url'):
        super(MalformedUrl, self).__init__('%s: %s' % (reason, url))
        self.url = url
        self.reason = reason


class FileNotFound(PasteError):
    """
    A requested file is not part of the paste.

    :param identifier: the requested name, or the requested 1-based number
    """
    def __init__(self, identifier):
        super(FileNotFound, self).__init__('file %s not found' % identifier)
        self.identifier = identifier


class AmbiguousSelection(PasteError):
    """
    The paste has several files and nothing tells which ones are wanted.
    """
    def __init__(self, names):
        self.names = list(names)
        msg = 'paste had multiple files, but no behavior was specified\n\navailable files:\n'
        msg += '\n'.join('  %s' % name for name in self.names)
        super(AmbiguousSelection, self).__init__(msg)


class InvalidOutputDirectory(PasteError):
    def __init__(self, path, reason='output directory does not exist'):
        super(InvalidOutputDirectory, self).__init__('%s: %s' % (reason, path))
        self.path = path


class InvalidPath(PasteError):
    def __init__(self, name):
        super(InvalidPath, self).__init__('unsafe file name: %r' % name)
        self.name = name


class UploadError(PasteError):
    def __init__(self, message, body=None):
        super(UploadError, self).__init__(message)
        self.body = body


class UnsupportedOperation(PasteError):
    pass


class BinNotFound(PasteError):
    def __init__(self, what):
        super(BinNotFound, self).__init__('no bin found for %s' % what)
        self.what = what
