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
Version of the Ncstate library.

>>> compare_version('1.0.9')
0
>>> compare_version('1.0.8')
-1
>>> compare_version('1.1.0pr1')
1

Comparison follows the rules of the PHP ``version_compare`` function, which
the version strings of this library have always been written for: a version is
canonicalised (``_``, ``-`` and ``+`` become ``.``, and a ``.`` is inserted
between digits and letters), then compared part by part.  Known special forms
are ordered::

    dev < alpha = a < beta = b < RC = rc < # < pl = p

Any other string sorts before all of them.
"""
import re

VERSION = '1.0.9'

# weights of non-numeric version parts
_special_forms = {
    'dev': 0,
    'alpha': 1,
    'a': 1,
    'beta': 2,
    'b': 2,
    'rc': 3,
    '#': 4,
    'pl': 5,
    'p': 5,
}

_unknown_form = -1


def canonicalize(version):
    """
    Split a version string into a list of parts.

    >>> canonicalize('1.0rc1')
    ['1', '0', 'rc', '1']
    >>> canonicalize('5.2-dev')
    ['5', '2', 'dev']
    """
    version = re.sub(r'[-_+]', '.', version)
    version = re.sub(r'(?<=\d)(?=[^\d.])|(?<=[^\d.])(?=\d)', '.', version)
    return [part for part in version.split('.') if part]


def _form_weight(part):
    return _special_forms.get(part.lower(), _unknown_form)


def _compare_part(a, b):
    a_num, b_num = a.isdigit(), b.isdigit()
    if a_num and b_num:
        a, b = int(a), int(b)
    elif a_num:
        # number vs special form: numbers rank between 'rc' and 'pl'
        a, b = _form_weight('#'), _form_weight(b)
    elif b_num:
        a, b = _form_weight(a), _form_weight('#')
    else:
        a, b = _form_weight(a), _form_weight(b)
    return (a > b) - (a < b)


def version_compare(version1, version2):
    """
    Compare two version strings.

    :return int:
        -1 if version1 is older than version2, 0 if they are equal and 1 if
        version1 is newer.
    """
    parts1 = canonicalize(version1)
    parts2 = canonicalize(version2)

    for a, b in zip(parts1, parts2):
        result = _compare_part(a, b)
        if result:
            return result

    # the longer version wins if the extra part is a number or 'p'/'pl',
    # otherwise it is a pre-release of the shorter one
    if len(parts1) > len(parts2):
        return 1 if _compare_part(parts1[len(parts2)], '#') >= 0 else -1
    if len(parts2) > len(parts1):
        return -1 if _compare_part(parts2[len(parts1)], '#') >= 0 else 1
    return 0


def compare_version(version):
    """
    Compare a version string with the current VERSION.

    Pre-release suffixes written as ``pr`` (e.g. ``1.1pr2``) are treated as
    alpha releases.

    :param str version: a version string, e.g. "0.7.1"

    :return int:
        -1 if *version* is older, 0 if they are the same, and 1 if *version*
        is newer.
    """
    version = version.lower()
    version = re.sub(r'(\d)pr(\d?)', r'\1a\2', version)
    return version_compare(version, VERSION.lower())
