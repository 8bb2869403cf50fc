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

import logging
import os
import sys
import tempfile
import traceback
from optparse import OptionGroup, OptionParser

from pastoob.tools.config.iconfig import ConfigError
from pastoob.tools.log import createColoredFormatter, getLogger, settings as log_settings


__all__ = ['BaseApplication']


LOG_FORMAT = '%(asctime)s:%(levelname)s:%(name)s:%(version)s:%(filename)s:%(lineno)d:%(funcName)s %(message)s'


class BaseApplication(object):
    """
    Base of pastoob console applications: option parsing, logging and
    configuration file.

    Subclasses implement :func:`main` and start with :func:`run`.
    """

    # Application name, also the name of its configuration file.
    APPNAME = ''
    # Configuration directory, $PASTOOB_WORKDIR or ~/.config/pastoob if None.
    CONFDIR = None
    # Default values of the configuration.
    CONFIG = {}
    SYNOPSIS = 'Usage: %prog [-h] [-dqv] ...\n'
    SYNOPSIS += '       %prog [--help] [--version]'
    DESCRIPTION = None
    VERSION = None
    COPYRIGHT = None

    def add_application_options(self, group):
        """
        Add the options of the application to ``group``.
        """

    def handle_application_options(self):
        """
        Called once :attr:`options` are parsed.
        """

    def main(self, argv):
        """
        :param argv: positional arguments, program name first
        :returns: exit code
        """
        raise NotImplementedError()

    def __init__(self, option_parser=None):
        self.logger = getLogger(self.APPNAME)
        if self.CONFDIR is None:
            self.CONFDIR = self.get_workdir()
        self.config = None
        self.options = None
        self._logging_files = []

        self._parser = option_parser or OptionParser(self.SYNOPSIS, version=self._get_optparse_version())
        if self.DESCRIPTION:
            self._parser.description = self.DESCRIPTION

        app_options = OptionGroup(self._parser, '%s Options' % self.APPNAME.capitalize())
        self.add_application_options(app_options)
        if app_options.option_list:
            self._parser.add_option_group(app_options)
        self._parser.add_option('-I', '--insecure', action='store_true', help='do not validate SSL certificates')

        logging_options = OptionGroup(self._parser, 'Logging Options')
        logging_options.add_option('-d', '--debug', action='store_true', help='display debug messages')
        logging_options.add_option('-q', '--quiet', action='store_true', help='display only error messages')
        logging_options.add_option('-v', '--verbose', action='store_true', help='display info messages')
        logging_options.add_option('--logging-file', action='store', dest='logging_file',
                                   help='file to save logs')
        logging_options.add_option('-a', '--save-responses', action='store_true',
                                   help='save every HTTP response in a temporary directory')
        self._parser.add_option_group(logging_options)

    @staticmethod
    def get_workdir():
        workdir = os.getenv('PASTOOB_WORKDIR')
        if workdir:
            return workdir
        config_home = os.getenv('XDG_CONFIG_HOME') or os.path.join(os.path.expanduser('~'), '.config')
        return os.path.join(config_home, 'pastoob')

    def deinit(self):
        for handler in self._logging_files:
            logging.root.removeHandler(handler)
            handler.close()
            handler.stream.close()
        self._logging_files = []

    def load_config(self, path=None, klass=None):
        """
        Load the configuration file, with :attr:`CONFIG` as defaults.

        :param path: file name in :attr:`CONFDIR`, or a path; defaults to
                     ``APPNAME.yaml``
        :param klass: :class:`pastoob.tools.config.iconfig.IConfig` implementation
        :raises: :class:`ConfigError`
        """
        if klass is None:
            from pastoob.tools.config.yamlconfig import YamlConfig
            klass = YamlConfig

        if path is None:
            path = '%s.yaml' % self.APPNAME
        if os.path.sep not in path:
            path = os.path.join(self.CONFDIR, path)

        self.config = klass(path)
        self.config.load(self.CONFIG)
        return self.config

    def _get_optparse_version(self):
        if not self.VERSION:
            return None
        return ' '.join(s for s in ('%s v%s' % (self.APPNAME, self.VERSION), self.COPYRIGHT) if s)

    def get_log_level(self):
        if self.options.debug or self.options.save_responses:
            return logging.DEBUG
        if self.options.verbose:
            return logging.INFO
        if self.options.quiet:
            return logging.ERROR
        return logging.WARNING

    def parse_args(self, args):
        """
        Parse the command line, set up logging and the browser settings.

        :returns: positional arguments, program name first
        """
        self.options, args = self._parser.parse_args(args)

        if self.options.insecure:
            log_settings['ssl_insecure'] = True

        handlers = []
        if self.options.save_responses:
            responses_dirname = tempfile.mkdtemp(prefix='pastoob_session_')
            print('Debug data will be saved in this directory: %s' % responses_dirname, file=sys.stderr)
            log_settings['save_responses'] = True
            log_settings['responses_dirname'] = responses_dirname
            handlers.append(self.create_logging_file_handler(os.path.join(responses_dirname, 'debug.log')))

        if self.options.logging_file:
            handlers.append(self.create_logging_file_handler(self.options.logging_file))
        else:
            handlers.append(self.create_default_logger())

        self.setup_logging(self.get_log_level(), handlers)
        self.handle_application_options()
        return args

    @classmethod
    def get_log_format(cls):
        return LOG_FORMAT.replace('%(version)s', cls.VERSION or '')

    @classmethod
    def create_default_logger(cls):
        # stdout holds pastes, logs go to stderr
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(createColoredFormatter(sys.stderr, cls.get_log_format()))
        return handler

    @classmethod
    def setup_logging(cls, level, handlers):
        logging.root.handlers = []
        logging.root.setLevel(level)
        for handler in handlers:
            logging.root.addHandler(handler)

    def create_logging_file_handler(self, filename):
        try:
            stream = open(filename, 'w')
        except IOError as e:
            self.logger.error('Unable to create the logging file: %s', e)
            sys.exit(1)
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(self.get_log_format()))
        self._logging_files.append(handler)
        return handler

    def print_error(self, error):
        """
        Print an error message, and the backtrace in debug mode. Must be
        called while handling ``error``.
        """
        print(u'Error: %s' % error, file=sys.stderr)
        if logging.root.level == logging.DEBUG:
            print(traceback.format_exc(), file=sys.stderr)

    @classmethod
    def run(cls, args=None):
        """
        Create the application, parse ``args`` (``sys.argv`` by default),
        call :func:`main` and exit with its return value.

        Never returns: it always ends with :func:`sys.exit`::

            from pastoob.applications.pastoob import Pastoob
            Pastoob.run()
        """
        cls.setup_logging(logging.INFO, [cls.create_default_logger()])

        if args is None:
            args = sys.argv

        app = cls()
        try:
            args = app.parse_args(args)
            sys.exit(app.main(args))
        except KeyboardInterrupt:
            print('Program killed by SIGINT', file=sys.stderr)
            sys.exit(0)
        except EOFError:
            sys.exit(0)
        except ConfigError as e:
            print('Configuration error: %s' % e, file=sys.stderr)
            sys.exit(1)
        finally:
            app.deinit()
