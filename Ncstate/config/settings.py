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
Ncstate setting module.

Settings are validators and containers for individual configuration values.

They can have default values and validation rules.

In addition, all settings contains a `doc` attribute that should contain a
string that describes the behavior of the setting and its uses.
"""
import re


class NotSetType(object):
    """A NotSet type that indicates that nothing has been set."""

    def __bool__(self):
        return False

    def __str__(self):
        return 'NotSet'

    def __repr__(self):
        return str(self)


NotSet = NotSetType()
"""Singleton that indicates that a setting has not been set."""


class Setting(object):
    """Generic setting."""

    _valid_types = None
    """The valid value class or classes that this setting accepts.

    Either None (accept all classes), a type or a tuple of types."""

    def __init__(self, default=NotSet, doc=""):
        """Configure a new Setting.

        :param default:
            Default value to return if no value has been set.
            If set to None, this setting will be considered an 'optional'
            setting.

        :param str doc:
            A short text that explains the usage for this setting.
        """
        self.default = default
        self._doc = doc
        self._value = NotSet
        if default is not NotSet and default is not None:
            self.validate(default)

    @property
    def is_set(self):
        """If the setting has been set."""
        if self._value is NotSet:
            return False
        return True

    @property
    def doc(self):
        """Documentation string for this setting."""
        return self._doc

    def get_value(self):
        """Gets the value of this setting, or its default."""
        if self.is_set:
            return self._value
        return self.default

    def set_value(self, value):
        """Validates and sets the value of this setting.

        :param value:
            The value to set.
        """
        self.validate(value)
        self._value = value

    def validate(self, value):
        """Validates a value.

        This check ensures that the value is of a valid type.

        :param value:
            The value to validate.

        :return bool:
            Returns True if the value does not need further validation.

        :raises TypeError:
            If value is not an instance of the valid types for this setting.
        """
        if self.default is None and value is None:
            return True
        if self._valid_types is None:
            return False
        if isinstance(value, self._valid_types):
            return False

        raise TypeError(
            'Invalid type {} for setting {}, must be (one of): {}'.format(
                type(value), self.__class__, repr(self._valid_types)))


class Numeric(Setting):
    """Numerical setting."""

    _valid_types = (int, float)

    def __init__(self, minval=None, maxval=None, **kw):
        """Configure a numeric setting.

        :param numeric minval:
            Specify a lower limit for values.
        :param numeric maxval:
            Specify an upper limit for values.
        :param **dict kw:
            See `Setting` for additional keyword arguments.
        """
        self._minval = minval
        self._maxval = maxval
        super(Numeric, self).__init__(**kw)

    def validate(self, value):
        """Validates a value.

        :see: Setting.validate

        :raises ValueError:
            If value is not within the bounds of minval and maxval
        """
        if super(Numeric, self).validate(value):
            return True
        if self._minval is not None and self._minval > value:
            raise ValueError(
                'Invalid value {}, must not be less than {}'.format(
                    value, self._minval))
        if self._maxval is not None and self._maxval < value:
            raise ValueError(
                'Invalid value {}, must not be greater than {}'.format(
                    value, self._maxval))
        return False


class Integer(Numeric):
    """A whole number setting."""

    _valid_types = (int, )


class String(Setting):
    """A String setting."""

    _valid_types = (str, )

    def __init__(self, regex=None, minlen=None, maxlen=None, **kw):
        """Configure a string setting.

        :param string regex:
            A regex rule for this setting.
        :param int minlen:
            Specify a minimum string length for values.
        :param int maxlen:
            Specify a maximum string length for values.
        :param **dict kw:
            See `Setting` for additional keyword arguments.
        """
        if regex:
            self._regex = re.compile(regex)
        else:
            self._regex = None
        self._minlen = minlen
        self._maxlen = maxlen
        super(String, self).__init__(**kw)

    def validate(self, value):
        """Validates a value.

        :see: Setting.validate

        :raises ValueError:
            If the string value does not pass the configured regex, or is
            shorter or longer than the specified limits.
        """
        if super(String, self).validate(value):
            return True
        if self._minlen and self._minlen > len(value):
            raise ValueError(
                'Invalid value {!r} of length {}, must be at least {}'.format(
                    value, len(value), self._minlen))
        if self._maxlen and self._maxlen < len(value):
            raise ValueError(
                'Invalid value {!r} of length {}, must be at most {}'.format(
                    value, len(value), self._maxlen))
        if self._regex and not self._regex.match(value):
            raise ValueError(
                'Invalid value {!r}, must pass regex {!r}'.format(
                    value, self._regex.pattern))
        return False


class Choice(Setting):
    """Choice setting with limited options."""

    def __init__(self, choices=set(), **kw):
        """Configure a choice setting.

        :param set choices:
            A set of valid values.
        :param **dict kw:
            See `Setting` for additional keyword arguments.
        """
        if not isinstance(choices, set):
            raise TypeError(
                "Invalid argument 'choices' ({}) must be {}".format(
                    type(choices), set))
        self._choices = choices
        super(Choice, self).__init__(**kw)

    def validate(self, value):
        """Validates a value.

        :see: Setting.validate

        :raises ValueError:
            If the value is not one of the pre-configured choices.
        """
        if super(Choice, self).validate(value):
            return True
        if value not in self._choices:
            raise ValueError(
                'Invalid value {!r}, must be one of {!r}'.format(
                    value, sorted(self._choices)))
        return False


class Boolean(Setting):
    """Boolean setting."""

    _valid_types = (bool, )
