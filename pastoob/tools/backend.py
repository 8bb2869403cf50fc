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
from copy import copy

from pastoob.capabilities.base import Capability
from pastoob.tools.log import getLogger
from pastoob.tools.value import ValuesDict


__all__ = ['BackendConfig', 'Module']


class BackendConfig(ValuesDict):
    """
    Settings declared by a bin.

    The class attribute ``CONFIG`` of a bin is a template of
    :class:`pastoob.tools.value.Value` objects; :func:`load` returns a copy
    holding the values read from the configuration file.
    """
    instname = None

    def load(self, instname, config):
        """
        :param instname: name of the bin
        :param config: ``{key: value}`` read from the configuration file
        :type config: dict
        :rtype: :class:`BackendConfig`
        :raises: :class:`Module.ConfigError`
        """
        cfg = BackendConfig()
        cfg.instname = instname
        for name, template in self.items():
            raw = config.get(name)
            if raw is None:
                if template.required:
                    raise Module.ConfigError('Backend(%s): missing parameter "%s" (%s)'
                                             % (instname, name, template.description))
                raw = template.default

            field = copy(template)
            try:
                field.load(raw)
            except ValueError as e:
                raise Module.ConfigError('Backend(%s): invalid value for "%s": %s' % (instname, name, e))
            cfg[name] = field
        return cfg


class Module(object):
    """
    Base class of bins, to be combined with the capabilities the service
    supports (see :mod:`pastoob.tools.capabilities.paste`).

    :param config: settings of this bin, as found in the configuration file;
                   keys starting with ``_`` are private (``_proxy``,
                   ``_proxy_ssl``, ``_debug_dir``)
    :type config: dict
    :param logger: parent logger
    """
    # Name of the bin, used by --service.
    NAME = None
    # Host of the HTML URLs, used to find the bin of an URL.
    DOMAIN = None
    MAINTAINER = u'<unspecified>'
    VERSION = '<unspecified>'
    DESCRIPTION = '<unspecified>'
    LICENSE = '<unspecified>'
    # Settings, as pastoob.tools.value.Value objects.
    CONFIG = BackendConfig()
    # Browser class, instanciated on first use.
    BROWSER = None

    class ConfigError(Exception):
        pass

    def __init__(self, config=None, logger=None):
        self.name = self.NAME
        self.logger = getLogger(self.name, parent=logger)
        config = config or {}
        self._private_config = dict((k, v) for k, v in config.items() if k.startswith('_'))
        self.config = self.CONFIG.load(self.name, config)

    def __repr__(self):
        return '<Backend %r>' % self.name

    _browser = None

    @property
    def browser(self):
        """
        The browser, created by :func:`create_default_browser` the first
        time it is needed.
        """
        if self._browser is None:
            self._browser = self.create_default_browser()
        return self._browser

    def create_default_browser(self):
        return self.create_browser()

    def get_proxies(self):
        """
        Proxies from the private config, else from the environment.
        """
        proxies = {}
        for scheme, key in (('http', '_proxy'), ('https', '_proxy_ssl')):
            proxy = (self._private_config.get(key) or os.environ.get('%s_proxy' % scheme)
                     or os.environ.get('%s_PROXY' % scheme.upper()))
            if proxy:
                proxies[scheme] = proxy
        return proxies

    def create_browser(self, *args, **kwargs):
        """
        Instanciate :attr:`BROWSER` with the proxies, the logger and the
        dump directory of this bin.
        """
        if not self.BROWSER:
            return None

        proxies = self.get_proxies()
        if proxies:
            kwargs['proxy'] = proxies
        kwargs['logger'] = self.logger
        if self.logger.settings['responses_dirname']:
            kwargs.setdefault('responses_dirname',
                              os.path.join(self.logger.settings['responses_dirname'],
                                           self._private_config.get('_debug_dir', self.name)))
        return self.BROWSER(*args, **kwargs)

    @classmethod
    def iter_caps(klass):
        """
        Paste capabilities implemented by this bin, most specific first.
        """
        for base in klass.__mro__:
            if issubclass(base, Capability) and base.__module__ == 'pastoob.capabilities.paste':
                yield base
