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
import posixpath

from pastoob.exceptions import InvalidPath


__all__ = ['sanitize_path', 'add_number_to_path', 'get_free_path']


def sanitize_path(name):
    """
    Turn a remote file name into a relative path which can not escape the
    directory it is joined to.

    >>> sanitize_path('/etc/passwd')
    'etc/passwd'
    >>> sanitize_path('./src/main.py')
    'src/main.py'

    :raises: :class:`InvalidPath` if the name has parent components or is empty
    """
    parts = []
    for part in name.replace('\\', '/').split('/'):
        if part in ('', '.'):
            continue
        if part == '..':
            raise InvalidPath(name)
        parts.append(part)
    if not parts or '\x00' in name:
        raise InvalidPath(name)
    return os.path.join(*parts)


def add_number_to_path(path, number):
    """
    >>> add_number_to_path('out/hello.tar.gz', 2)
    'out/hello.tar_2.gz'
    >>> add_number_to_path('out/README', 1)
    'out/README_1'
    """
    dirname, basename = os.path.split(path)
    root, ext = posixpath.splitext(basename)
    return os.path.join(dirname, '%s_%d%s' % (root, number, ext))


def get_free_path(path):
    """
    Return ``path`` if nothing exists there, else the first numbered
    alternative which does not exist yet.
    """
    candidate = path
    number = 0
    while os.path.lexists(candidate):
        number += 1
        candidate = add_number_to_path(path, number)
    return candidate
