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
Fake HTTP objects for testing API clients.

The fakes mimic the parts of the *requests* API that our clients use, so that
a client can be tested without network access:

::

    session = FakeSession([FakeResponse(b'{"v2": {}}')])
    client._session = session
"""
import json

import requests


class FakeResponse(object):
    """ A canned response. """

    def __init__(self, content=b'', status_code=200, headers=None,
                 url='http://localhost/'):
        if isinstance(content, str):
            content = content.encode('utf-8')
        self.content = content
        self.status_code = status_code
        self.headers = dict(headers or {})
        self.url = url

    @property
    def text(self):
        return self.content.decode('utf-8')

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(
                '{} Error for url: {}'.format(self.status_code, self.url),
                response=self)


class FakeSession(object):
    """
    A session that returns canned responses.

    Each request pops the next item of *responses*.  Exceptions in
    *responses* are raised rather than returned.  All requests are recorded in
    *requests*, as (method, url, kwargs) tuples.
    """

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.requests = []

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        if not self.responses:
            raise AssertionError('unexpected request: {} {}'.format(method,
                                                                    url))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        response.url = url
        return response

    def get(self, url, **kwargs):
        return self.request('GET', url, **kwargs)

    @property
    def last_params(self):
        return self.requests[-1][2].get('params')
