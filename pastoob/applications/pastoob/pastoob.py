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
import sys

from requests.exceptions import RequestException

from pastoob import __version__
from pastoob.capabilities.paste import PasteFile
from pastoob.core import Bins
from pastoob.exceptions import (
    AmbiguousSelection, BrowserHTTPNotFound, BrowserUnavailable, FileNotFound, PasteError,
)
from pastoob.tools.application import BaseApplication
from pastoob.tools.backend import Module
from pastoob.tools.capabilities.paste import Selection


__all__ = ['Pastoob', 'parse_range']


def parse_range(text):
    """
    Parse a list of 1-based file numbers.

    >>> parse_range('1-3,5')
    [1, 2, 3, 5]

    :raises: ValueError
    """
    numbers = []
    for part in text.split(','):
        part = part.strip()
        if not part:
            continue
        start, sep, end = part.partition('-')
        start = int(start)
        end = int(end) if sep else start
        if start < 1 or end < start:
            raise ValueError('invalid range "%s"' % part)
        numbers.extend(range(start, end + 1))
    if not numbers:
        raise ValueError('empty range')
    return numbers


class Pastoob(BaseApplication):
    APPNAME = 'pastoob'
    VERSION = __version__
    COPYRIGHT = 'Copyright(C) 2026 pastoob contributors'
    DESCRIPTION = "Console application allowing to post and get pastes from pastebins."
    SHORT_DESCRIPTION = "post and get pastes from pastebins"
    SYNOPSIS = 'Usage: %prog [options] post [FILE ...]\n'
    SYNOPSIS += '       %prog [options] get URL [URL ...]\n'
    SYNOPSIS += '       %prog [options] list'
    CONFIG = {'service': 'sprunge',
              'public': False,
              'backends': {}}

    def __init__(self, *args, **kwargs):
        super(Pastoob, self).__init__(*args, **kwargs)
        self.bins = None
        self.range = None

    def add_application_options(self, group):
        group.add_option('-s', '--service', action='store',
                         help='bin to use (default: from the URL, or configured service)')
        group.add_option('-p', '--public', action='store_true', dest='public',
                         help='make paste public')
        group.add_option('-P', '--private', action='store_false', dest='public',
                         help='make paste private')
        group.add_option('-t', '--title', action='store',
                         help='paste title, when the bin supports it')
        group.add_option('-f', '--files', action='store',
                         help='get only these files (comma separated names)')
        group.add_option('-r', '--range', action='store',
                         help='get only these files (numbers, e.g. "1-3,5")')
        group.add_option('-A', '--all', action='store_true',
                         help='get every file of the paste')
        group.add_option('-u', '--urls', action='store_true',
                         help='print the URLs of the files instead of their contents')
        group.add_option('-R', '--raw-urls', action='store_true',
                         help='print the raw URLs of the files instead of their contents')
        group.add_option('-n', '--number-lines', action='store_true',
                         help='number the lines of the files')
        group.add_option('-w', '--write', action='store_true',
                         help='write the files instead of printing them')
        group.add_option('-o', '--output', action='store',
                         help='directory where to write the files (default: current directory)')

    def handle_application_options(self):
        if self.options.range:
            try:
                self.range = parse_range(self.options.range)
            except ValueError as e:
                self._parser.error(str(e))

    def create_bins(self):
        return Bins(self.config.get('backends', default={}) or {})

    def main(self, argv):
        self.load_config()
        try:
            self.bins = self.create_bins()
        except Module.ConfigError as e:
            print('Configuration error: %s' % e, file=sys.stderr)
            return 1

        if len(argv) < 2:
            self._parser.print_usage(sys.stderr)
            return 2

        commands = {'get': self.do_get,
                    'post': self.do_post,
                    'list': self.do_list}
        command, args = argv[1], argv[2:]
        if command not in commands:
            print('Unknown command: "%s"' % command, file=sys.stderr)
            self._parser.print_usage(sys.stderr)
            return 2

        try:
            return commands[command](args)
        except (FileNotFound, AmbiguousSelection, BrowserHTTPNotFound) as e:
            self.print_error(e)
            return 3
        except (PasteError, BrowserUnavailable, RequestException, OSError) as e:
            self.print_error(e)
            return 1

    def get_selection(self):
        return Selection(files=[f.strip() for f in (self.options.files or '').split(',') if f.strip()],
                         range=self.range,
                         all=self.options.all,
                         urls=self.options.urls,
                         raw_urls=self.options.raw_urls,
                         number_lines=self.options.number_lines,
                         write=self.options.write,
                         output=self.options.output)

    def do_get(self, urls):
        """
        get URL [URL ...]

        Get the contents of pastes.
        """
        if not urls:
            print('This command takes at least an argument: get URL [URL ...]', file=sys.stderr)
            return 2

        if self.options.service:
            backend = self.bins.get_bin_by_name(self.options.service)
        else:
            backend = self.bins.get_bin_for_url(urls[0])
        self.logger.debug(u'Using bin %s', backend.name)

        output = backend.produce_raw_contents(urls, self.get_selection())
        sys.stdout.write(output)
        # add a newline unless we are writing
        # in a file or in a pipe
        if sys.stdout.isatty() and not output.endswith('\n'):
            sys.stdout.write('\n')
        return 0

    def read_files(self, filenames):
        if not filenames or filenames == ['-']:
            return [PasteFile('stdin', sys.stdin.read())]

        pastes = []
        for filename in filenames:
            with open(filename, encoding='utf-8') as fp:
                pastes.append(PasteFile(os.path.basename(filename), fp.read()))
        return pastes

    def do_post(self, filenames):
        """
        post [FILE ...]

        Submit a new paste.
        The filename can be '-' for reading standard input (pipe).
        """
        try:
            pastes = self.read_files(filenames)
        except IOError as e:
            print('Unable to open file "%s": %s' % (e.filename, e.strerror), file=sys.stderr)
            return 1
        if not any(len(p.contents) for p in pastes):
            print('Empty paste, aborting.', file=sys.stderr)
            return 1

        backend = self.bins.get_bin_by_name(self.options.service or self.config.get('service'))
        self.logger.debug(u'Using bin %s', backend.name)
        url = backend.upload_all(pastes, self.get_params())
        print(url)
        return 0

    def get_params(self):
        public = self.options.public
        if public is None:
            public = bool(self.config.get('public'))
        return {'public': public,
                'title': self.options.title}

    def do_list(self, args):
        """
        list

        List available bins.
        """
        for backend in self.bins:
            caps = ', '.join(cap.__name__ for cap in backend.iter_caps())
            print('%-10s %-20s %s [%s]' % (backend.name, backend.DOMAIN, backend.DESCRIPTION, caps))
        return 0
