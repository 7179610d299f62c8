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
Utilities for fetching passwords and other secrets.

This module contains *handlers* for various sources of secret/protected
information, like passwords or api keys.  Each *handler* takes a single
argument.


Sources
-------
file
    Specify the full path to a file with secret data. Trailing newlines are
    removed.  Example argument: ``/path/to/file``

env
    Read the secret from an environment variable.  Example argument:
    ``REMEDY_PASSWORD``

plaintext
    Provide a plaintext secret, as is.  Useful in configuration files where
    providing the plaintext secret is OK (e.g. mock values for tests).  Example
    argument: ``hunter2``.


To look up a given secret using a given source:

>>> get_secret('plaintext', 'hunter2')
'hunter2'


Secret strings
--------------
Secret strings makes it possible to encode *source* and a *source-argument* as
a single string value, with format ``<source>:<source-argument>``.

This is typically used in config files to allow multiple types of lookup of
secrets.  Example:

>>> config = {"user": "AzureDiamond", "pass": "plaintext:hunter2"}
>>> get_secret_from_string(config["pass"])
'hunter2'

Note that the *source-argument* may contain ``:`` characters:

>>> get_secret_from_string("plaintext::foo:bar:")
':foo:bar:'
"""
import io
import os

from Ncstate.utils.mappings import DecoratorMap


sources = DecoratorMap()


@sources.register('file')
def _read_secret_file(value):
    """
    Read secret from file.

    This assumes that the file is an utf-8 encoded file on disk.

    :param str value:
        Filename for fetching a secret.
    """
    with io.open(value, mode='r', encoding='utf8') as f:
        return f.read().rstrip('\n')


@sources.register('env')
def _read_secret_env(value):
    """
    Read secret from an environment variable.

    :param str value:
        Name of the environment variable.
    """
    try:
        return os.environ[value]
    except KeyError:
        raise ValueError("No environment variable %s" % repr(value))


sources.register('plaintext')(lambda s: s)


def get_handler(source):
    """
    Fetch a given source handler.

    :param source:
        One of the methods for fetching a secret (as provided by ``sources``).

    :rtype: callable
    """
    if source not in sources:
        raise ValueError("Invalid source %s, must be one of %s"
                         % (repr(source), repr(tuple(sorted(sources)))))
    return sources[source]


def get_secret(source, value):
    """
    Fetch a secret from a given source.

    :param source:
        One of the methods for fetching a secret (as provided by ``sources``).

    :param value:
        A string argument to pass to the given ``source``.

    :rtype: str
    :returns: Returns a matching secret
    """
    handler = get_handler(source)
    return handler(value)


def split_secret_string(raw_value):
    """
    Split raw secrets string value into (source, args) tuple.

    :param raw_value: A text string with format "<source>:<value>".

    :rtype: tuple
    :returns: Returns a pair with "<source>" and "<value>"
    """
    source, sep, source_arg = raw_value.partition(':')
    if not sep:
        # Missing mandatory ':' separator
        raise ValueError("Invalid format, must be '<source>:<secret>'")
    return source, source_arg


def get_secret_from_string(raw_value):
    """
    Lookup secret from "<source>:<args>" string.

    :rtype: str
    :returns: The secret from the given source
    """
    source, arg = split_secret_string(raw_value)
    return get_secret(source, arg)
