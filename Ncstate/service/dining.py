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
Client for the NC State Dining API.

Use py:func:`.get_client` to get a client object from config:

::

    client = get_client({
        'url': 'http://www.ncsudining.com/diningapi/',
        'format': 'json',
    })
    # or
    client = get_client('my-config-file.yml')

    for location_type in client.get_location_types()['response']:
        ...

"""
import logging

import Ncstate.logutils
from Ncstate.Errors import DiningError, ValidationError
from Ncstate.config import loader
from Ncstate.config.configuration import Configuration, ConfigDescriptor
from Ncstate.config.settings import Boolean, Choice, Integer, Numeric, String
from Ncstate.utils.mappings import CaseInsensitiveMap

from .api import DEFAULT_FORMAT, FORMATS, _ApiClient

logger = logging.getLogger(__name__)

BASE_URL = 'http://www.ncsudining.com/diningapi/'

DEFAULT_VERSION = 2

MEAL_TYPES = ('all', 'breakfast', 'lunch', 'brunch', 'dinner')

DIET_TYPES = ('iron', 'weightGain', 'loseBodyFat', 'calcium', 'vegetarian',
              'inactiveDay')


def _lookup(types, label, value):
    """ Get the canonical spelling of a meal or diet type. """
    valid = CaseInsensitiveMap((t, t) for t in types)
    try:
        return valid[value]
    except KeyError:
        raise ValidationError('{} type must be one of "{}"'.format(
            label, ', '.join(types)))


class DiningClient(_ApiClient):
    """ Dining API client. """

    error_class = DiningError

    default_url = BASE_URL

    def __init__(self, url=None, version=DEFAULT_VERSION, **kwargs):
        """
        :param str url: baseurl to the Dining API
        :param int version: API version

        See :class:`Ncstate.service.api._ApiClient` for other arguments.
        """
        super(DiningClient, self).__init__(url=url, **kwargs)
        self.version = version

    @property
    def version(self):
        return self._version

    @version.setter
    def version(self, value):
        self._version = int(value)

    def get_params(self, method, args):
        params = super(DiningClient, self).get_params(method, args)
        params['v'] = self.version
        return params

    def get_menu(self, location, meal=None, date=None, diet=None):
        """
        Get the menu of a dining location.

        :param str location: location key
        :param str meal: one of MEAL_TYPES (default: all)
        :param str date: date of the menu (default: today)
        :param str diet: one of DIET_TYPES

        :raises ValidationError: if meal or diet is invalid
        """
        if meal is not None:
            meal = _lookup(MEAL_TYPES, 'Meal', meal)
        if diet is not None:
            diet = _lookup(DIET_TYPES, 'Diet', diet)
        args = {
            'location': location,
            'meal': meal,
            'date': date,
            'diet': diet,
        }
        return self._request('getMenu', args)

    def get_hours(self, location, date=None):
        """ Get the opening hours of a dining location. """
        return self._request('getHours', {'location': location, 'date': date})

    def get_locations(self, type=None):
        """ List dining locations, optionally of a given type. """
        return self._request('getLocations', {'type': type})

    def get_location_types(self):
        """ List types of dining locations. """
        return self._request('getLocationTypes', {})


class DiningClientConfig(Configuration):
    """ Dining API client config. """

    url = ConfigDescriptor(
        String,
        default=BASE_URL,
        doc='URL to the Dining API',
    )

    version = ConfigDescriptor(
        Integer,
        default=DEFAULT_VERSION,
        minval=1,
        doc='Dining API version',
    )

    format = ConfigDescriptor(
        Choice,
        choices=set(FORMATS),
        default=DEFAULT_FORMAT,
        doc='Response format',
    )

    verify = ConfigDescriptor(
        Boolean,
        default=False,
        doc='Verify TLS certificates',
    )

    timeout = ConfigDescriptor(
        Numeric,
        default=30,
        minval=0,
        doc='Request timeout, in seconds',
    )


def get_client(config):
    """
    Get a DiningClient from config.

    :type config: str, dict, DiningClientConfig
    :param config: Client config (filename, config dict, config object)

    :rtype: DiningClient
    """
    if isinstance(config, str):
        config = DiningClientConfig(loader.read_config(config))
    elif isinstance(config, dict):
        config = DiningClientConfig(config)
    elif not isinstance(config, DiningClientConfig):
        raise ValueError('invalid config: ' + repr(config))

    config.validate()

    return DiningClient(
        url=config.url,
        version=config.version,
        format=config.format,
        verify=config.verify,
        timeout=config.timeout,
    )


def main():
    """
    A very basic cli client.

    python -m Ncstate.service.dining <config>
        list location types

    python -m Ncstate.service.dining <config> <location> [meal]
        show the menu of a location
    """
    import json
    import sys

    def cli_error(*msg):
        print("Usage:",
              "python -m Ncstate.service.dining <config> [location [meal]]",
              file=sys.stderr)
        print("", file=sys.stderr)
        print("Error:", *msg, file=sys.stderr)
        raise SystemExit(1)

    try:
        config_file = sys.argv[1]
    except IndexError:
        cli_error("missing mandatory argument: config")

    location = sys.argv[2] if len(sys.argv) > 2 else None
    meal = sys.argv[3] if len(sys.argv) > 3 else None

    Ncstate.logutils.autoconf()
    client = get_client(config_file)
    try:
        if location:
            result = client.get_menu(location, meal=meal)
        else:
            result = client.get_location_types()
    except ValidationError as e:
        cli_error(str(e))

    print(json.dumps(result, sort_keys=True, indent=2))


if __name__ == '__main__':
    main()
