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

from collections import OrderedDict


__all__ = ['ValuesDict', 'Value', 'ValueBackendPassword']


class ValuesDict(OrderedDict):
    """
    Values keyed by their id, in declaration order::

        ValuesDict(Value('lang', label='Language'), ValueBackendPassword('token'))
    """

    def __init__(self, *values):
        super(ValuesDict, self).__init__()
        for value in values:
            self[value.id] = value


class Value(object):
    """
    A text setting of a bin.

    :param id: key of the setting in the ``backends`` section of the config
    :param label: human readable description
    :param default: used when the key is missing; without a default the
                    setting is required
    :param masked: hide the value in messages (passwords, tokens)
    """

    def __init__(self, id='', label=None, default=None, masked=False):
        self.id = id
        self.label = label
        self.default = default
        self.required = default is None
        self.masked = masked
        self._value = None

    @property
    def description(self):
        return self.label or self.id

    def show_value(self, v):
        return u'' if self.masked else v

    def check_valid(self, v):
        """
        :raises: ValueError
        """
        if v is None:
            if self.required:
                raise ValueError('Value is required and thus must be set')
            return
        # YAML reads unquoted numbers and lists as such
        if not isinstance(v, str):
            raise ValueError('Value "%s" must be a string, quote it' % self.show_value(v))

    def load(self, v):
        self.set(v)

    def set(self, v):
        self.check_valid(v)
        self._value = v

    def get(self):
        return self._value


class ValueBackendPassword(Value):
    """
    A secret, masked and optional: an empty string means "not set".
    """

    def __init__(self, id='', **kwargs):
        kwargs.setdefault('masked', True)
        kwargs.setdefault('default', '')
        super(ValueBackendPassword, self).__init__(id, **kwargs)
