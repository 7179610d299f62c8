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
Log configuration.

The logging environment is described by a :class:`LoggingConfig`.  It either
points to a *preset* (a file with a :func:`logging.config.dictConfig`
dictionary, in any format supported by :mod:`Ncstate.config.parsers`), or
falls back to a basic stderr handler with the given *level* and *format*.
"""
import logging
import logging.config

from Ncstate.config import loader
from Ncstate.config.configuration import ConfigDescriptor, Configuration
from Ncstate.config.settings import Boolean, Choice, String

DEFAULT_LEVEL = 'WARNING'
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

LOGLEVELS = {'CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET'}

logger = logging.getLogger(__name__)


class LoggingConfig(Configuration):
    """ Configuration of the logging environment. """

    level = ConfigDescriptor(
        Choice,
        choices=LOGLEVELS,
        default=DEFAULT_LEVEL,
        doc="Log level for the root logger")

    format = ConfigDescriptor(
        String,
        default=DEFAULT_FORMAT,
        doc="Log format for the default stderr handler")

    preset = ConfigDescriptor(
        String,
        default=None,
        doc="A logging dictConfig file to apply")

    capture_warnings = ConfigDescriptor(
        Boolean,
        default=True,
        doc="If warnings should be logged")


def get_config(config_file=None):
    """ Get a LoggingConfig, optionally read from `config_file`. """
    config = LoggingConfig()
    if config_file:
        loader.read(config, config_file)
    return config


def configure_preset(filename, disable_existing_loggers=False):
    """ Apply a logging dictConfig file.

    :param str filename:
        A logger configuration file to apply.

    :param bool disable_existing_loggers:
        Default for `disable_existing_loggers`, if not given in the file.
    """
    conf_dict = loader.read_config(filename)
    conf_dict.setdefault('version', 1)
    conf_dict.setdefault('disable_existing_loggers',
                         bool(disable_existing_loggers))
    logging.config.dictConfig(conf_dict)


def configure(config):
    """ (re)configures logging.

    :param LoggingConfig config:
        The logging environment to set up.
    """
    if config.preset:
        configure_preset(config.preset)
    else:
        # if no other root handlers have been set up...
        logging.basicConfig(level=config.level, format=config.format)
        logging.getLogger().setLevel(config.level)
    logging.captureWarnings(config.capture_warnings)

    logger.debug("Logging config level=%s preset=%r",
                 config.level, config.preset)
