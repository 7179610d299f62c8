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
On-brand text images.

Text may span multiple lines, and parts of a line can be set in bold by
wrapping them in asterisks:

>>> parse_line('*TEXT* UTILITY')
[('TEXT', True), (' UTILITY', False)]

The full university name must not be rendered this way, the official logo
should be used instead (see :mod:`Ncstate.brand.logo`).
"""
import logging
import re

from PIL import Image, ImageDraw

from .image import BrandImage

logger = logging.getLogger(__name__)

GENERATOR_SERVICE_URL = 'http://webapps.ncsu.edu/textapi/'

# Local renders are drawn this many times larger, and then downsampled
OVERSAMPLE_FACTOR = 5

BOLD_MARKER = '*'

_segment_pattern = re.compile(r'(\*[^*]*\*)')
_forbidden_pattern = re.compile(r'NC\s*STATE\s*UNIVERSITY', re.IGNORECASE)


def parse_line(line):
    """
    Split a line of text into bold and normal segments.

    A segment is bold if it is wrapped in a pair of markers.  Stray markers
    are removed.

    >>> parse_line('a *b* c*d')
    [('a ', False), ('b', True), (' cd', False)]

    :return list: (text, is_bold) tuples
    """
    segments = []
    for part in _segment_pattern.split(line):
        if not part:
            continue
        is_bold = part.count(BOLD_MARKER) == 2
        segments.append((part.replace(BOLD_MARKER, ''), is_bold))
    return segments


def is_valid_text(text):
    """
    Check that a text is allowed in a text image.

    Rendering does not enforce this, callers should check before generating
    an image.

    >>> is_valid_text('*NC* State University')
    False
    >>> is_valid_text('*TEXT* UTILITY')
    True
    """
    return not _forbidden_pattern.search(text.replace(BOLD_MARKER, ''))


class BrandText(BrandImage):
    """ Text image with optional bold segments. """

    generator_url = GENERATOR_SERVICE_URL

    default_options = dict(
        BrandImage.default_options,
        width=275,
        height=50,
        left_text_offset=8,
        baseline_text_offset=8,
        line_spacing=10,
        normal_font='UVC_____.TTF',
        bold_font='UVCB____.TTF',
    )

    def __init__(self, text='*TEXT* UTILITY', **options):
        super(BrandText, self).__init__(**options)
        self.text = text

    def get_text_params(self):
        return {'text': self.text}

    def get_lines(self):
        """ Non-empty lines, as parsed segments. """
        return [parse_line(line) for line in self.text.split('\n') if line]

    def create_image(self, factor=OVERSAMPLE_FACTOR):
        """
        Render the text with Pillow.

        The image is rendered `factor` times larger than the requested size,
        and downsampled for smoother edges.
        """

        image = self.new_canvas(self.width * factor, self.height * factor)
        draw = ImageDraw.Draw(image)
        fill = tuple(self.get_rgb('font_color')[c]
                     for c in ('red', 'green', 'blue'))
        fonts = {
            True: self.load_font('bold_font', self.font_size * factor),
            False: self.load_font('normal_font', self.font_size * factor),
        }
        _, top, _, bottom = draw.textbbox((0, 0), 'A', font=fonts[False],
                                          anchor='ls')
        line_height = (bottom - top
                       + int(self._options['line_spacing']) * factor)
        start_x = int(self._options['left_text_offset']) * factor
        pos_y = (self.height
                 - int(self._options['baseline_text_offset'])) * factor

        # last line goes at the bottom
        for segments in reversed(self.get_lines()):
            pos_x = start_x
            for text, is_bold in segments:
                font = fonts[is_bold]
                draw.text((pos_x, pos_y), text, font=font, fill=fill,
                          anchor='ls')
                pos_x = draw.textbbox((pos_x, pos_y), text, font=font,
                                      anchor='ls')[2]
            pos_y -= line_height

        logger.debug('downsampling text image by %d', factor)
        image = image.resize((self.width, self.height),
                             Image.Resampling.LANCZOS)
        return self.finalize(image)
