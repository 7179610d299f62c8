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
Ncstate - NC State University brand helpers and campus service clients.

Ncstate.brand
    Helpers for the approved web brand: brand bar, colours, quicklinks and
    logo/text images.

Ncstate.service
    Clients for campus services: LDAP directory, Dining, OUC and Remedy.
"""
from .version import VERSION as __version__  # noqa: F401
