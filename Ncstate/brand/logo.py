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
The NC State wordmark logo.

>>> logo = BrandLogo(bold_text='nc state ', normal_text='university')
>>> logo.bold_text
'NC STATE '
"""
import logging
import math

from PIL import ImageDraw

from .image import BrandImage

logger = logging.getLogger(__name__)

GENERATOR_SERVICE_URL = 'http://webapps.ncsu.edu/logoapi/'

VERTICAL_ALIGNMENTS = ('top', 'center', 'bottom')


class BrandLogo(BrandImage):
    """ Logo image with a bold and a normal text part. """

    generator_url = GENERATOR_SERVICE_URL

    default_options = dict(
        BrandImage.default_options,
        width=470,
        height=60,
        left_text_offset=10,
        # one of VERTICAL_ALIGNMENTS
        vertical_align='center',
    )

    def __init__(self, bold_text='NC STATE ', normal_text='UNIVERSITY',
                 **options):
        super(BrandLogo, self).__init__(**options)
        self.bold_text = bold_text
        self.normal_text = normal_text

    @property
    def bold_text(self):
        return self._bold_text

    @bold_text.setter
    def bold_text(self, value):
        self._bold_text = value.upper()

    @property
    def normal_text(self):
        return self._normal_text

    @normal_text.setter
    def normal_text(self, value):
        self._normal_text = value.upper()

    def get_text_params(self):
        return {
            'normalText': self.normal_text,
            'boldText': self.bold_text,
        }

    def get_baseline(self, text_height):
        """ Vertical position of the text baseline. """
        align = self._options['vertical_align']
        if align == 'top':
            return text_height
        if align == 'center':
            return int(math.ceil((self.height + text_height) / 2))
        return self.height

    def create_image(self):
        """
        Render the logo with Pillow.

        The fonts given by the `path_to_fonts`, `bold_font` and `normal_font`
        options must be available.
        """
        image = self.new_canvas(self.width, self.height)
        draw = ImageDraw.Draw(image)
        fill = tuple(self.get_rgb('font_color')[c]
                     for c in ('red', 'green', 'blue'))
        bold_font = self.load_font('bold_font', self.font_size)
        normal_font = self.load_font('normal_font', self.font_size)
        offset = int(self._options['left_text_offset'])

        # box relative to the left end of the baseline
        left, top, right, bottom = draw.textbbox(
            (0, 0), self.bold_text, font=bold_font, anchor='ls')
        baseline = self.get_baseline(bottom - top)
        logger.debug('rendering logo %r%r, baseline=%d',
                     self.bold_text, self.normal_text, baseline)

        draw.text((left + offset, baseline), self.bold_text,
                  font=bold_font, fill=fill, anchor='ls')
        draw.text((right + offset, baseline), self.normal_text,
                  font=normal_font, fill=fill, anchor='ls')
        return self.finalize(image)
