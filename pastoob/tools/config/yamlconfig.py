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
import tempfile
from copy import deepcopy

import yaml

from pastoob.tools.log import getLogger

from .iconfig import ConfigError, IConfig


__all__ = ['YamlConfig']


class YamlConfig(IConfig):
    """
    Configuration stored as a YAML mapping.

    A missing file is created with the default values.
    """

    def __init__(self, path):
        self.path = path
        self.values = {}
        self.logger = getLogger('config')

    def load(self, default={}):
        self.values = deepcopy(default)

        try:
            with open(self.path, 'r') as f:
                loaded = yaml.safe_load(f)
        except FileNotFoundError:
            self.save()
            self.logger.debug(u'Configuration file created with default values: %s', self.path)
            return
        except yaml.YAMLError as e:
            raise ConfigError('%s: %s' % (self.path, e))

        self.logger.debug(u'Configuration file loaded: %s', self.path)
        if loaded is None:
            return
        if not isinstance(loaded, dict):
            raise ConfigError('%s: configuration must be a mapping' % self.path)
        self.values.update(loaded)

    def save(self):
        dirname = os.path.dirname(self.path) or '.'
        if not os.path.isdir(dirname):
            os.makedirs(dirname)
        # a crash while writing must not leave a truncated file
        fd, tmppath = tempfile.mkstemp(dir=dirname, prefix='.pastoob_', suffix='.yaml')
        with os.fdopen(fd, 'w') as f:
            yaml.safe_dump(self.values, f, default_flow_style=False)
        os.replace(tmppath, self.path)

    def _walk(self, keys, create=False):
        node = self.values
        for key in keys:
            if not isinstance(node, dict):
                raise ConfigError('%s: "%s" is not a section' % (self.path, key))
            if key not in node:
                if not create:
                    return None
                node[key] = {}
            node = node[key]
        if not isinstance(node, dict):
            raise ConfigError('%s: "%s" is not a section' % (self.path, '.'.join(keys)))
        return node

    def get(self, *args, **kwargs):
        default = kwargs.get('default')
        section = self._walk(args[:-1])
        if section is None:
            return default
        return section.get(args[-1], default)

    def set(self, *args):
        section = self._walk(args[:-2], create=True)
        section[args[-2]] = args[-1]
