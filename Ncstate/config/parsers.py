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
Common API for reading config files.

This module contains classes that wraps libraries for reading
serialization formats with a common API.

The API (_AbstractConfigParser) consists of two methods:

loads(string)
    Convert a serialized string into a basic data structure.

read(filename)
    Read a serialized file and unserialize.
"""
import io
import json
import os

import yaml

_parsers = {}


class _AbstractConfigParser(object):
    """ Abstract config parser. """

    @classmethod
    def loads(cls, data):
        """ Loads a string

        :param str data:
            A serialized string to parse.

        :returns:
            Unserialized data.
        """
        raise NotImplementedError("Abstract class method")

    @classmethod
    def read(cls, filename):
        """ Reads data from a file.

        :param str filename:
            The file to read.

        :returns:
            Unserialized data.
        """
        with io.open(filename, 'r', encoding='utf-8') as f:
            return cls.loads(f.read())


def set_parser(extension, parser):
    """ Registers a new parser for a file format.

    :param str extension:
        The file extension to use this parser for.
    :param type parser:
        An _AbstractConfigParser-like type.

    :raises ValueError:
        If `parser` does not implement the methods of _AbstractConfigParser.
    """
    for attr in ('loads', 'read'):
        if not callable(getattr(parser, attr, None)):
            raise ValueError("Invalid parser {!r}, does not implement"
                             " {!r}".format(parser, attr))
    _parsers[extension] = parser


def get_parser(filename):
    """ Gets file parser for a given filename

    :param str filename:
        Path to, or filename of the file to parse.

    :return type:
        A _AbstractConfigParser-like parser type.

    :raises NotImplementedError:
        If no parser exists for the given filename.
    """
    ext = os.path.splitext(filename)[1].lstrip('.')
    if ext not in _parsers:
        raise NotImplementedError(
            "No parser for filetype {!r} (file={})".format(ext, filename))
    return _parsers[ext]


def register_extension(*extensions):
    """ Register class as parser for file extensions.

    Usage:

      @register_extension('txt', 'dat')
      class TxtAndDatParser(_AbstractConfigParser):
          ...
    """
    def _set_parser_and_return_class(cls):
        for ext in extensions:
            set_parser(ext, cls)
        return cls
    return _set_parser_and_return_class


@register_extension('json')
class JsonParser(_AbstractConfigParser):
    """ JSON Parser API.

    Wraps the json module with a common API.
    """

    @classmethod
    def loads(cls, data):
        return json.loads(data)


@register_extension('yml', 'yaml')
class YamlParser(_AbstractConfigParser):
    """ YAML Parser API.

    Wraps the PyYaml module with a common API.
    """

    @classmethod
    def loads(cls, data):
        return yaml.safe_load(data)
