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
Helpers for the approved web brand of NC State University.

See http://ncsu.edu/brand

Ncstate.brand.bar
    HTML for the required brand bar.

Ncstate.brand.color
    Official brand colours, and WCAG contrast checks.

Ncstate.brand.quicklinks
    Common links found in NC State templates.

Ncstate.brand.logo / Ncstate.brand.text
    On-brand logo and text images.
"""
