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
""" Configure logging for Ncstate scripts.

Library modules only ever use module loggers
(``logger = logging.getLogger(__name__)``).  Command line entry points call
:func:`autoconf` to set up handlers.
"""
import logging
import threading

from . import config

_configured = False
_configure_lock = threading.Lock()


def autoconf(level=None, preset=None, force=False):
    """ Set up logging with default settings.

    :param str level:
        Log level for the root logger (default from LoggingConfig).
    :param str preset:
        A logging dictConfig file (json or yaml) to apply.
    :param bool force:
        Re-configure even if logging has already been set up.

    :return LoggingConfig:
        The applied configuration.
    """
    global _configured

    c = config.LoggingConfig()
    if level:
        c.level = level.upper()
    if preset:
        c.preset = preset

    with _configure_lock:
        if _configured and not force:
            return c
        config.configure(c)
        _configured = True
    return c
