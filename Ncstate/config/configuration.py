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
Ncstate configuration module.

This module contains the core of the Ncstate configuration framework. It
consists of:

Configuration
    The Configuration class is an config schema framework. Actual configuration
    implementations consists of Configuration-subclasses with ConfigDescriptor
    attributes.

    Instances of Configuration-subclasses functions as a data containers for
    settings.

    Multiple configuration classes can be combined by inheritance:

    >>> class MyConfiguration(CommonConfiguration, SomeOddConfiguration):
    >>>    pass

ConfigDescriptor
    The ConfigDescriptor object wraps Settings as class descriptors. This is
    how a Setting gets assigned to (implemented in) a Configuration-subclass.

    >>> class MyConfiguration(Configuration):
    >>>     a_setting = ConfigDescriptor(Setting, default='foo')
    >>>     another_setting = ConfigDescriptor(Setting)
"""
from . import settings
from .errors import ConfigurationError


class Configuration(object):
    """ An abstract configuration. """

    def __init__(self, init=None):
        """ Initialize a new configuration container.

        :param dict init:
            Initialize config with settings from dictionary.
        """
        self.load_dict(init or {})

    @classmethod
    def list_settings(cls):
        """ Lists all settings in this class. """
        return [attr for attr in dir(cls)
                if isinstance(getattr(cls, attr), settings.Setting)]

    @classmethod
    def get_setting(cls, item):
        """ Gets a setting instance. """
        if item not in cls.list_settings():
            raise KeyError('No setting {!r} in config'.format(item))
        return getattr(cls, item)

    def __getitem__(self, item):
        self.get_setting(item)
        return getattr(self, item)

    def __setitem__(self, item, newval):
        self.get_setting(item)
        setattr(self, item, newval)

    def validate(self):
        """ Validate the settings in this configuration.

        :raises ConfigurationError:
            If validation of any settings fails.
        """
        errors = ConfigurationError()
        for name in self.list_settings():
            try:
                setting = self.get_setting(name)
                value = self[name]
                if value is settings.NotSet:
                    raise ValueError('Missing value')
                setting.validate(value)
            except Exception as e:
                errors.set_error(name, e)
        if errors:
            raise errors

    def load_dict(self, d):
        """ Read in config values from a dictionary structure.

        :param dict d:
            A dictionary with setting values.

        :raises ConfigurationError:
            If a dict contains keys that are not settings, or values that
            doesn't pass validation for a given setting.
        """
        errors = ConfigurationError()
        for name in sorted(d):
            if name not in self:
                errors.set_error(
                    name,
                    Exception('No setting for key {!r}'.format(name)))
                continue
            try:
                self[name] = d[name]
            except Exception as e:
                errors.set_error(name, e)
        if errors:
            raise errors

    def __iter__(self):
        for name in self.list_settings():
            yield name

    def __contains__(self, item):
        return item in self.list_settings()

    def __str__(self):
        return '{}({})'.format(
            self.__class__.__name__,
            ', '.join((key for key in self)))


class ConfigDescriptor(object):
    """ Wrap a Setting as a data descriptor. """

    def __init__(self, cls, **kwargs):
        """ Wraps a Setting as a data descriptor.

        :param Setting cls:
            The setting class of this descriptor.

        :param **dict kwargs:
            Init-arguments for `cls`.
        """
        if not issubclass(cls, settings.Setting):
            raise TypeError('Expected {}, got {}'.format(
                settings.Setting, cls))
        self.factory = lambda: cls(**kwargs)
        # Test that 'kwargs' are valid arguments for the class 'cls', and set
        # __doc__ to the description of the attribute
        self.__doc__ = self.factory().doc

    @property
    def attr(self):
        """ Name of the attribute that stores the actual setting. """
        return '_ConfigDescriptor_setting_{:x}'.format(id(self))

    def get_instance(self, parent):
        """ Get an instance of this setting from the `parent' object .

        The actual Setting instance is lazily instantiated, and stored in a
        unique attribute in the `parent' object, so that two instances of the
        same Configuration can hold different values.

        :param object parent:
            An object whose type is using this object as a Descriptor.

        :return Setting:
            Fetches a `Setting' from `parent'. If no `Setting' exists for this
            Descriptor in `parent', one will get created.
        """
        if parent is None:
            return parent

        if self.attr not in vars(parent):
            setattr(parent, self.attr, self.factory())

        return getattr(parent, self.attr)

    def __get__(self, parent, parent_type=None):
        # Static call, get a _new_ instance of this Setting.
        if parent is None:
            return self.factory()

        setting = self.get_instance(parent)
        return setting.get_value()

    def __set__(self, parent, value):
        if parent is None:
            raise RuntimeError('{} is read-only'.format(
                self.__class__.__name__))
        setting = self.get_instance(parent)
        setting.set_value(value)
