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
Official brand colours.

Colours are grouped in three levels (primary, secondary and support), and are
referred to by a *brand key* ``<level>-<name>``:

>>> BrandColor().get_color('primary-red')
'#CC0000'
>>> BrandColor().get_color('primary-red', rgb=True)
{'red': 204, 'green': 0, 'blue': 0}

This module also implements the WCAG 2 contrast calculation, so that colour
combinations can be checked for accessibility:

>>> evaluate_contrast('primary-white', 'primary-red').aa
True
"""
import collections
import re

# level -> name -> hex
COLORS = collections.OrderedDict((
    ('primary', collections.OrderedDict((
        ('red', 'CC0000'),
        ('black', '000000'),
        ('white', 'FFFFFF'),
    ))),
    ('secondary', collections.OrderedDict((
        ('grey1', '383838'),
        ('grey2', '666666'),
        ('grey3', 'CCCCCC'),
        ('grey4', 'E1E1E1'),
        ('green1', '5C5541'),
        ('green2', '666633'),
        ('blue', '556677'),
        ('red', 'A20000'),
    ))),
    ('support', collections.OrderedDict((
        ('brown1', 'A79574'),
        ('brown2', 'C5BD9D'),
        ('brown3', 'E5E1D0'),
        ('green1', '778855'),
        ('green2', '99AA77'),
        ('green3', 'CCDDAA'),
        ('blue', '67849C'),
        ('yellow', 'CC9900'),
    ))),
))

# WCAG 2 contrast thresholds
AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

# Large text is at least 18pt, or 14pt bold
LARGE_TEXT_SIZE = 18
LARGE_BOLD_TEXT_SIZE = 14

_hex_regex = re.compile(r'^#?([0-9a-f]{3}|[0-9a-f]{6})$', re.IGNORECASE)


def hex_to_rgb(value):
    """
    Convert a hex colour to an rgb dict.

    >>> hex_to_rgb('#c90')
    {'red': 204, 'green': 153, 'blue': 0}

    :raises ValueError: if value is not a hex colour
    """
    match = _hex_regex.match(value.strip())
    if not match:
        raise ValueError('Invalid hex colour: {!r}'.format(value))
    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return {
        'red': int(digits[0:2], 16),
        'green': int(digits[2:4], 16),
        'blue': int(digits[4:6], 16),
    }


def rgb_to_hex(rgb):
    """
    >>> rgb_to_hex({'red': 204, 'green': 0, 'blue': 0})
    '#CC0000'
    """
    return '#{red:02X}{green:02X}{blue:02X}'.format(**rgb)


class BrandColor(object):
    """ Lookup of official brand colours. """

    def __init__(self, colors=COLORS):
        self._colors = colors

    def get_color(self, color, rgb=False):
        """
        Get a brand colour by its brand key.

        :param str color: brand key, e.g. 'primary-red'
        :param bool rgb: return an rgb dict rather than a hex string

        :return: '#RRGGBB', an rgb dict, or None if the key is unknown.
        """
        level, sep, name = color.partition('-')
        if not sep or name not in self._colors.get(level, {}):
            return None
        value = self._colors[level][name]
        return hex_to_rgb(value) if rgb else '#' + value

    def get_colors(self, level=None, rgb=False):
        """
        Get brand colours.

        :param str level:
            Only get colours from this level, as a name -> hex dict.
            Returns None if the level is unknown.

        :param bool rgb:
            Use rgb dicts as values (only for the flattened list).

        :return dict:
            A flattened '<level>-<name>' -> hex dict of all colours, if no
            level is given.
        """
        if level is not None:
            if level not in self._colors:
                return None
            return collections.OrderedDict(self._colors[level])

        colors = collections.OrderedDict()
        for level, items in self._colors.items():
            for name, value in items.items():
                colors[level + '-' + name] = (
                    hex_to_rgb(value) if rgb else value)
        return colors

    def to_rgb(self, color):
        """
        Get an rgb dict from a brand key, hex colour or rgb dict.

        :raises ValueError: if color cannot be interpreted.
        """
        if isinstance(color, dict):
            return {k: int(color[k]) for k in ('red', 'green', 'blue')}
        value = self.get_color(color, rgb=True)
        if value is None:
            value = hex_to_rgb(color)
        return value


def _linearize(channel):
    c = channel / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color):
    """
    WCAG 2 relative luminance of a colour.

    >>> round(relative_luminance('#FFFFFF'), 4)
    1.0

    :param color: brand key, hex colour or rgb dict
    """
    rgb = BrandColor().to_rgb(color)
    return (0.2126 * _linearize(rgb['red']) +
            0.7152 * _linearize(rgb['green']) +
            0.0722 * _linearize(rgb['blue']))


def contrast_ratio(foreground, background):
    """
    WCAG 2 contrast ratio of two colours (1 - 21).

    >>> round(contrast_ratio('primary-black', 'primary-white'), 2)
    21.0
    """
    l1 = relative_luminance(foreground)
    l2 = relative_luminance(background)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def is_large_text(font_size, bold=False):
    """ If text of the given size (in points) counts as large text. """
    if bold:
        return font_size >= LARGE_BOLD_TEXT_SIZE
    return font_size >= LARGE_TEXT_SIZE


ContrastResult = collections.namedtuple(
    'ContrastResult', ('ratio', 'large_text', 'aa', 'aaa'))


def evaluate_contrast(foreground, background, font_size=12, bold=False):
    """
    Check a colour combination against the WCAG 2 contrast requirements.

    :param foreground: text colour (brand key, hex colour or rgb dict)
    :param background: background colour
    :param font_size: text size in points
    :param bold: if the text is bold

    :rtype: ContrastResult
    :returns:
        The contrast ratio, if the text is large text, and if the combination
        passes level AA and AAA.
    """
    ratio = contrast_ratio(foreground, background)
    large = is_large_text(font_size, bold=bold)
    if large:
        aa, aaa = ratio >= AA_LARGE, ratio >= AAA_LARGE
    else:
        aa, aaa = ratio >= AA_NORMAL, ratio >= AAA_NORMAL
    return ContrastResult(ratio, large, aa, aaa)
