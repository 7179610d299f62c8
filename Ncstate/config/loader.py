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
Module for loading configuration files.

It is a bridge between the `parsers` module and the `configuration` module.
"""
import logging

from . import parsers as _parsers

logger = logging.getLogger(__name__)


def read_config(filename):
    """ Read a config file.

    :param str filename:
        The config filename.

    :return:
        The structured data from `filename`.
    """
    parser = _parsers.get_parser(filename)
    logger.debug("read_config parser=%r filename=%r", parser, filename)
    return parser.read(filename)


def read(config, filename):
    """ Update `config` with data from a config file.

    :param Configuration config:
        The configuration to update.

    :param str filename:
        The config file to read.

    :return Configuration:
        Returns the updated `config`.
    """
    logger.debug("read cls=%r filename=%r", type(config), filename)
    config.load_dict(read_config(filename))
    return config
