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
Common http and url utils.
"""
import re
from urllib.parse import (
    urlencode as _urlencode,
    urljoin as _urljoin,
)

_scheme_regex = re.compile(r'^https?://', re.IGNORECASE)


def strip_scheme(url):
    """ Remove a leading http:// or https:// from an url.

    >>> strip_scheme('HTTPS://www.ncsu.edu/brand')
    'www.ncsu.edu/brand'
    >>> strip_scheme('ftp://example.org')
    'ftp://example.org'
    """
    return _scheme_regex.sub('', url)


def clean_params(params):
    """
    Remove empty query parameters, so that the remote end uses its defaults.

    >>> clean_params({'a': 1, 'b': None, 'c': '', 'd': 0})
    {'a': 1, 'd': 0}
    """
    return {k: v for k, v in params.items()
            if v is not None and v != ''}


def build_url(url, params):
    """
    Append a query string to an url.

    >>> build_url('http://localhost/api/', [('a', 'x y'), ('b', 2)])
    'http://localhost/api/?a=x+y&b=2'
    """
    query = _urlencode(params)
    if not query:
        return url
    return url + '?' + query


def urljoin(url, *path_components):
    """
    A sane urljoin.

    >>> _urljoin('https://localhost/foo', 'bar')
    'https://localhost/bar'

    >>> urljoin('https://localhost/foo', 'bar')
    'https://localhost/foo/bar'
    """
    for path in path_components:
        url = _urljoin(url.rstrip('/') + '/', path)
    return url
