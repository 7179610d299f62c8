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
Client for the NC State Organizational Unit Code (OUC) API.

::

    client = get_client({'format': 'xml'})
    client.search('computer science')
"""
import logging

import Ncstate.logutils
from Ncstate.config import loader
from Ncstate.config.configuration import Configuration, ConfigDescriptor
from Ncstate.config.settings import Boolean, Choice, Numeric, String

from .api import DEFAULT_FORMAT, FORMATS, _ApiClient

logger = logging.getLogger(__name__)

BASE_URL = 'http://webapps.ncsu.edu/ouc/'


class OucClient(_ApiClient):
    """ OUC API client. """

    default_url = BASE_URL

    def get_ouc(self, ouc):
        """ Look up a single organizational unit code. """
        return self._request('getOuc', {'ouc': ouc})

    def get_all(self, order='ouc'):
        """ List all organizational units, sorted by `order`. """
        return self._request('getAll', {'order': order})

    def search(self, term):
        """ Search for organizational units. """
        return self._request('searchOuc', {'term': term})


class OucClientConfig(Configuration):
    """ OUC API client config. """

    url = ConfigDescriptor(
        String,
        default=BASE_URL,
        doc='URL to the OUC API',
    )

    format = ConfigDescriptor(
        Choice,
        choices=set(FORMATS),
        default=DEFAULT_FORMAT,
        doc='Response format',
    )

    verify = ConfigDescriptor(
        Boolean,
        default=True,
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
    Get an OucClient from config.

    :type config: str, dict, OucClientConfig
    :param config: Client config (filename, config dict, config object)

    :rtype: OucClient
    """
    if isinstance(config, str):
        config = OucClientConfig(loader.read_config(config))
    elif isinstance(config, dict):
        config = OucClientConfig(config)
    elif not isinstance(config, OucClientConfig):
        raise ValueError('invalid config: ' + repr(config))

    config.validate()

    return OucClient(
        url=config.url,
        format=config.format,
        verify=config.verify,
        timeout=config.timeout,
    )


def main():
    """
    A very basic cli client.

    python -m Ncstate.service.ouc <config>
        list all units

    python -m Ncstate.service.ouc <config> <term>
        search for units
    """
    import json
    import sys

    def cli_error(*msg):
        print("Usage:",
              "python -m Ncstate.service.ouc <config> [term]",
              file=sys.stderr)
        print("", file=sys.stderr)
        print("Error:", *msg, file=sys.stderr)
        raise SystemExit(1)

    try:
        config_file = sys.argv[1]
    except IndexError:
        cli_error("missing mandatory argument: config")

    Ncstate.logutils.autoconf()
    client = get_client(config_file)
    if len(sys.argv) > 2:
        result = client.search(sys.argv[2])
    else:
        result = client.get_all()

    print(json.dumps(result, sort_keys=True, indent=2))


if __name__ == '__main__':
    main()
