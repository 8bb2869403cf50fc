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
from collections import defaultdict


__all__ = ['getLogger', 'createColoredFormatter', 'settings']


# Escape sequences by level name, INFO is left untouched.
LEVEL_COLORS = {
    'DEBUG': '\033[36m',
    'WARNING': '\033[1;1m',
    'ERROR': '\033[1;31m',
    'CRITICAL': '\033[1;33m\033[1;41m',
}
RESET = '\033[0m'


# Shared by every pastoob logger: ssl_insecure, save_responses, responses_dirname.
settings = defaultdict(lambda: None)


def getLogger(name, parent=None):
    """
    Get a logger named after its parent, carrying the shared :data:`settings`.
    """
    if parent is not None:
        name = '%s.%s' % (parent.name, name)
    logger = logging.getLogger(name)
    logger.settings = settings
    return logger


class ColoredFormatter(logging.Formatter):
    def format(self, record):
        msg = super(ColoredFormatter, self).format(record)
        color = LEVEL_COLORS.get(record.levelname)
        if color is None:
            return msg
        return '%s%s%s' % (color, msg, RESET)


def createColoredFormatter(stream, format):
    """
    Colors are only used when ``stream`` is a terminal.
    """
    if stream.isatty():
        return ColoredFormatter(format)
    return logging.Formatter(format)
