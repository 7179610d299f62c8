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
Configuration framework for Ncstate clients.

This package contains an abstract configuration module. It consists of:

Ncstate.config.settings
    The settings module contains Settings. Settings implement validation rules
    and default values.

    Settings-instances choose which rules to implement, specifies default
    values and acts as a container for setting values.


Ncstate.config.configuration
    The configuration module contains Configuration and ConfigDescriptor.

    Configurations are configuration schemas and data containers.  Each
    setting is declared as a ConfigDescriptor that wraps a Setting type.


Ncstate.config.parsers
    The parsers module contains functionality for using data serialization
    formats with a common API.


Ncstate.config.loader
    The loader module contains functionality for reading configuration files.


Ncstate.config.secrets
    A Secret setting for passwords and api keys.
"""
