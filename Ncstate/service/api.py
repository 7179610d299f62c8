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
Common client for the query-string APIs of NC State web services.

These APIs take all arguments, including the name of the remote method, as
query parameters, and respond with either JSON or XML.  The response is
always wrapped in a single top level element, which is stripped off:

::

    {"v2": {"getLocationTypes": {"status": "success"}, "response": ...}}

becomes

::

    {"getLocationTypes": {"status": "success"}, "response": ...}

The status of the call is reported in ``<method>.status``, and any error
message in ``response.message``.
"""
import logging

import requests

from Ncstate.Errors import ServiceError
from Ncstate.utils import http as http_utils
from Ncstate.utils.xmlutils import ATTRIBUTES_KEY, xml_to_dict

logger = logging.getLogger(__name__)

FORMATS = ('json', 'xml')
DEFAULT_FORMAT = 'json'

STATUS_FAILURE = 'failure'


class _ApiClient(object):
    """ Abstract query-string API client. """

    # Exception type for failure responses
    error_class = ServiceError

    default_url = None

    def __init__(self,
                 url=None,
                 format=DEFAULT_FORMAT,
                 verify=True,
                 timeout=None,
                 use_sessions=True):
        """
        :param str url: baseurl to the API
        :param str format: response format, 'json' or 'xml'
        :param bool verify: verify TLS certificates
        :param float timeout: request timeout, in seconds
        :param bool use_sessions: Keep HTTP connections alive (default True)
        """
        self.url = url or self.default_url
        self.format = format
        self.verify = verify
        self.timeout = timeout
        if use_sessions:
            self._session = requests.Session()
        else:
            self._session = requests
        self._reset()

    def __repr__(self):
        return ('<{cls.__name__} {obj.url}>').format(cls=type(self),
                                                     obj=self)

    @property
    def use_sessions(self):
        return self._session is not requests

    @property
    def format(self):
        """ Response format ('json' or 'xml'). """
        return self._format

    @format.setter
    def format(self, value):
        value = str(value).lower()
        if value not in FORMATS:
            value = DEFAULT_FORMAT
        self._format = value

    def _reset(self):
        self.last_request_uri = None
        self.last_raw_response = None
        self.last_parsed_response = None

    def get_params(self, method, args):
        """ Get query parameters for a given method call. """
        params = dict(args)
        params['method'] = method
        params['format'] = self.format
        # let the API use its defaults for empty args
        return http_utils.clean_params(params)

    def _req(self, params):
        """ Send a GET request to the API. """
        return self._session.request('GET',
                                     self.url,
                                     params=params,
                                     verify=self.verify,
                                     timeout=self.timeout)

    def _decode(self, response):
        """ Decode the response body into a dict. """
        if self.format == 'xml':
            parsed = xml_to_dict(response.content)
        else:
            try:
                parsed = response.json()
            except ValueError as e:
                logger.debug('invalid json from %s: %s', self.url, e)
                parsed = None
        if not isinstance(parsed, dict) or not parsed:
            raise ServiceError('Invalid {} response from {}'.format(
                self.format, self.url))
        return parsed

    def _request(self, method, args):
        """
        Call a remote method.

        :param str method: name of the remote method
        :param dict args: method arguments

        :return dict: the unwrapped response
        """
        self._reset()
        params = self.get_params(method, args)
        self.last_request_uri = http_utils.build_url(self.url,
                                                     list(params.items()))
        logger.debug('calling %s', self.last_request_uri)

        try:
            response = self._req(params)
            response.raise_for_status()
        except requests.RequestException as e:
            self.last_raw_response = str(e)
            logger.warning('request to %s failed: %s', self.url, e)
            raise ServiceError('HTTP error: {}'.format(e)) from e

        self.last_raw_response = response.text

        # strip the version wrapper
        parsed = list(self._decode(response).values())[-1]
        if not isinstance(parsed, dict):
            raise ServiceError('Unexpected response from {}'.format(self.url))
        if self.format == 'xml':
            # attributes of the wrapper element carry no information
            parsed.pop(ATTRIBUTES_KEY, None)
        self.last_parsed_response = parsed

        status = parsed.get(method)
        status = status.get('status') if isinstance(status, dict) else None
        if str(status or '').lower() == STATUS_FAILURE:
            message = parsed.get('response') or ''
            if isinstance(message, dict):
                message = message.get('message', '')
            raise self.error_class(message)
        return parsed
