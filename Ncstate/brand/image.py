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
Common functionality for on-brand images.

Images can be fetched from a public generator service run by OIT, which has
the licensed Univers fonts, or be rendered locally with Pillow, given a path
to the font files.

Options are given as keyword arguments, using either the python names
(``font_size``) or the legacy names used by the generator service
(``fontSize``).  Unknown options are ignored.
"""
import io
import logging
import os

import requests
from PIL import Image, ImageChops, ImageFont, UnidentifiedImageError

from Ncstate.Errors import BrandError
from Ncstate.config import loader
from Ncstate.utils import http as http_utils

from .color import BrandColor

logger = logging.getLogger(__name__)

# image_type -> Pillow format
IMAGE_FORMATS = {
    'png': 'PNG',
    'gif': 'GIF',
    'jpeg': 'JPEG',
}

DEFAULT_IMAGE_TYPE = 'png'

# options that only make sense locally, and are never sent to the generator
LOCAL_OPTIONS = ('path_to_fonts', 'save_path')


def to_camel_case(name):
    """
    >>> to_camel_case('left_text_offset')
    'leftTextOffset'
    """
    first, *rest = name.split('_')
    return first + ''.join(word.capitalize() for word in rest)


def to_snake_case(name):
    """
    >>> to_snake_case('leftTextOffset')
    'left_text_offset'
    """
    return ''.join('_' + c.lower() if c.isupper() else c for c in name)


def make_transparent(image, rgb):
    """
    Make all pixels of a given colour transparent.

    :param image: a Pillow image
    :param dict rgb: the colour to remove

    :return: a new RGBA image
    """
    image = image.convert('RGB')
    masks = [
        band.point(lambda v, c=rgb[name]: 255 if v == c else 0)
        for band, name in zip(image.split(), ('red', 'green', 'blue'))
    ]
    # 255 where all bands match the colour
    match = ImageChops.multiply(ImageChops.multiply(masks[0], masks[1]),
                                masks[2])
    image = image.convert('RGBA')
    image.putalpha(ImageChops.invert(match))
    return image


class BrandImage(object):
    """ Abstract on-brand image. """

    generator_url = None

    default_options = {
        'width': 0,
        'height': 0,
        # brand key for the background color
        'background_color': 'primary-red',
        # font size in points
        'font_size': 36,
        # brand key for the text color
        'font_color': 'primary-white',
        'transparent': False,
        # directory with the font files (local rendering only)
        'path_to_fonts': '',
        'normal_font': 'UVC_____.ttf',
        'bold_font': 'UVCB____.ttf',
        # one of IMAGE_FORMATS
        'image_type': DEFAULT_IMAGE_TYPE,
        # where to save generated images
        'save_path': None,
    }

    def __init__(self, **options):
        self._options = dict(self.default_options)
        self.set_options(**options)

    @classmethod
    def from_file(cls, filename):
        """ Create an image from text and options in a config file. """
        return cls(**loader.read_config(filename))

    def set_options(self, **options):
        """
        Update options.  Unknown options are ignored.

        :return: self
        """
        for key, value in options.items():
            key = to_snake_case(key)
            if key in self._options:
                self._options[key] = value
            else:
                logger.debug('ignoring unknown option %r', key)
        return self

    def get_options(self):
        return dict(self._options)

    def _int_option(self, name):
        return int(self._options[name])

    @property
    def width(self):
        return self._int_option('width')

    @property
    def height(self):
        return self._int_option('height')

    @property
    def font_size(self):
        return self._int_option('font_size')

    def get_text_params(self):
        """ Text parameters for the generator service. """
        raise NotImplementedError('Abstract method')

    def get_generator_params(self):
        """ Query parameters for the generator service. """
        params = {}
        for key, value in self._options.items():
            if key in LOCAL_OPTIONS or value is None:
                continue
            if isinstance(value, bool):
                value = int(value)
            params[to_camel_case(key)] = value
        params.update(self.get_text_params())
        return params

    def get_generator_url(self):
        """ Full url to this image on the generator service. """
        params = sorted(self.get_generator_params().items())
        return http_utils.build_url(self.generator_url, params)

    def get_image(self, timeout=30):
        """
        Get the image from the remote generator service.

        :raises BrandError: if the image cannot be fetched

        :return: a Pillow image
        """
        params = self.get_generator_params()
        logger.debug('fetching image from %s', self.generator_url)
        try:
            response = requests.get(self.generator_url,
                                    params=params,
                                    timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning('unable to fetch image from %s: %s',
                           self.generator_url, e)
            raise BrandError('Image generator error: {}'.format(e)) from e

        try:
            image = Image.open(io.BytesIO(response.content))
            image.load()
        except (UnidentifiedImageError, OSError) as e:
            raise BrandError(
                'Invalid image from generator: {}'.format(e)) from e
        return self.store(image)

    def create_image(self):
        """ Render the image locally. """
        raise NotImplementedError('Abstract method')

    def get_rgb(self, option):
        """
        Get the rgb value of a color option.

        :raises BrandError: if the option is not a brand color key
        """
        rgb = BrandColor().get_color(self._options[option], rgb=True)
        if rgb is None:
            raise BrandError(
                'Proper branding color not found for {}'.format(
                    to_camel_case(option)))
        return rgb

    def load_font(self, option, size):
        """ Load one of the font options in a given size. """
        filename = os.path.join(self._options['path_to_fonts'] or '',
                                self._options[option])
        try:
            return ImageFont.truetype(filename, size)
        except OSError as e:
            raise BrandError(
                'Unable to load font {!r}: {}'.format(filename, e)) from e

    def new_canvas(self, width, height):
        """ A new image filled with the background color. """
        rgb = self.get_rgb('background_color')
        return Image.new('RGB', (width, height),
                         (rgb['red'], rgb['green'], rgb['blue']))

    def finalize(self, image):
        """ Apply transparency, and store the image. """
        if self._options['transparent']:
            image = make_transparent(image, self.get_rgb('background_color'))
        return self.store(image)

    def store(self, image):
        """
        Save the image to the `save_path` option, if set.

        :return: the image
        """
        path = self._options['save_path']
        if path is None:
            return image
        image_type = self._options['image_type']
        if image_type not in IMAGE_FORMATS:
            image_type = DEFAULT_IMAGE_TYPE
        image_format = IMAGE_FORMATS[image_type]
        to_save = image
        if image_format == 'JPEG' and image.mode not in ('RGB', 'L'):
            to_save = image.convert('RGB')
        logger.debug('saving %s image to %s', image_type, path)
        to_save.save(path, format=image_format)
        return image
