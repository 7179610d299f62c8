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
The NC State brand bar.

The brand bar is required on all NC State public web pages.  It is an iframe
served from www.ncsu.edu, injected at the top of the page together with its
stylesheet:

>>> bar = BrandBar(site_url='https://www.example.ncsu.edu', color='black')
>>> bar.get_iframe_url()
'http://www.ncsu.edu/brand/utility-bar/iframe/index.php?color=black&inurl=www.example.ncsu.edu&center=yes'
"""
import html
import logging
from urllib.parse import quote_plus

from Ncstate.utils import http as http_utils

logger = logging.getLogger(__name__)

STYLESHEET_URL = ('http://www.ncsu.edu/brand/utility-bar/iframe/css/'
                  'utility_bar_iframe.css')

IFRAME_URL = 'http://www.ncsu.edu/brand/utility-bar/iframe/index.php'

COLOR_OPTIONS = ('red', 'black', 'red_on_white', 'black_on_white')

DEFAULT_COLOR = 'red'

NO_IFRAME_PROMPT = (
    'Your browser does not support inline frames or is currently configured '
    ' not to display inline frames.<br /> Visit '
    '<a href="http://ncsu.edu/">http://www.ncsu.edu</a>.')

# legacy option names
OPTION_ALIASES = {
    'siteUrl': 'site_url',
    'noIframePrompt': 'no_iframe_prompt',
    'iframeId': 'iframe_id',
}


class BrandBar(object):
    """ HTML generator for the brand bar. """

    default_options = {
        # url of the website the bar lives on, used in the site search
        'site_url': '',
        # one of COLOR_OPTIONS
        'color': DEFAULT_COLOR,
        'centered': True,
        # shown to browsers without iframe support
        'no_iframe_prompt': NO_IFRAME_PROMPT,
        'iframe_id': 'ncsu_branding_bar',
    }

    def __init__(self, **options):
        self._options = dict(self.default_options)
        self.set_options(**options)

    def __repr__(self):
        return '<{cls.__name__} {url}>'.format(cls=type(self),
                                              url=self.get_iframe_url())

    def set_options(self, **options):
        """
        Update options.  Unknown options are ignored.

        :return: self
        """
        for key, value in options.items():
            key = OPTION_ALIASES.get(key, key)
            if key in self._options:
                self._options[key] = value
            else:
                logger.debug('ignoring unknown option %r', key)
        return self

    @property
    def options(self):
        return dict(self._options)

    @property
    def color(self):
        """ The configured bar colour, or the default if invalid. """
        if self._options['color'] in COLOR_OPTIONS:
            return self._options['color']
        return DEFAULT_COLOR

    @property
    def site_url(self):
        """ The configured site url, without http(s) scheme. """
        return http_utils.strip_scheme(self._options['site_url'] or '')

    def get_stylesheet_url(self):
        return STYLESHEET_URL

    def get_stylesheet_html(self):
        return ('<link rel="stylesheet" type="text/css" href="{}"'
                ' media="screen" />').format(self.get_stylesheet_url())

    def get_iframe_url(self):
        """ Url of the brand bar iframe, as configured by the options. """
        return '{base}?color={color}&inurl={site}&center={center}'.format(
            base=IFRAME_URL,
            color=quote_plus(self.color),
            site=quote_plus(self.site_url),
            center='yes' if self._options['centered'] else 'no',
        )

    def get_iframe_html(self):
        iframe_id = html.escape(self._options['iframe_id'])
        return ('<iframe name="{id}" id="{id}" frameborder="0" src="{src}"'
                ' scrolling="no">{prompt}</iframe>').format(
                    id=iframe_id,
                    src=html.escape(self.get_iframe_url()),
                    prompt=self._options['no_iframe_prompt'])

    def get_bar_html(self):
        """ Full brand bar html, with stylesheet and iframe. """
        return "\n{}\n{}\n".format(self.get_stylesheet_html(),
                                   self.get_iframe_html())
