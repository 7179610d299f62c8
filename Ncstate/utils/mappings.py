# -*- coding: utf-8 -*-
#
# Copyright 2011-2024 North Carolina State University
#
# This file is part of Ncstate.
#
# Ncstate is free software; you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# Ncstate is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with Ncstate; if not, write to the Free Software Foundation,
# Inc., 59 Temple Place, Suite 330, Boston, MA 02111-1307, USA.
"""
This module contains common implementations of the collections.mapping API.
"""
from collections.abc import Mapping as _Mapping


class SimpleMap(_Mapping):
    """
    A simple mapping base class.

    This is a default implementation of ``collections.abc.Mapping``, for
    use with specialized dict-like objects.  These are typically mappings that
    needs to be *immutable* (but init-able) or have special methods for
    implementing mutability (e.g. register decorators for functions).
    """

    def __init__(self, *args, **kwargs):
        self._data = {}
        for k, v in dict(*args, **kwargs).items():
            self.set(k, v)

    def transform_key(self, key):
        """
        Transform a key.

        This method can be overloaded to normalize and/or validate keys.
        """
        return key

    def transform_value(self, value):
        """
        Transform a value.

        This method can be overloaded to normalize and/or validate values.
        """
        return value

    def set(self, key, value):
        # We don't add a __setitem__ as this is not really intended to be a
        # MutableMapping.
        nkey = self.transform_key(key)
        nvalue = self.transform_value(value)
        self._data[nkey] = nvalue

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __getitem__(self, key):
        nkey = self.transform_key(key)
        return self._data[nkey]

    def __repr__(self):
        return '<{cls.__name__} at 0x{id:02x}>'.format(
            cls=type(self),
            id=id(self),
        )


class DecoratorMap(SimpleMap):
    """
    A mapping that adds a class/function register decorator.

    >>> filters = DecoratorMap()
    >>> @filters.register('upper')
    ... def upper(s):
    ...     return s.upper()
    >>> filters['upper']('foo')
    'FOO'
    """

    def register(self, item):
        def wrapper(fn):
            self.set(item, fn)
            return fn
        return wrapper


class CaseInsensitiveMap(SimpleMap):
    """
    A mapping with case-insensitive string keys.

    >>> diets = CaseInsensitiveMap({'weightGain': 'weightGain'})
    >>> diets['WEIGHTGAIN']
    'weightGain'
    """

    def transform_key(self, key):
        return key.lower()
