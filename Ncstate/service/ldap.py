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
Connections to the NC State campus LDAP directory.

Anonymous connections use plain LDAP, while authenticated connections always
use LDAPS:

::

    with LdapConnector() as conn:
        conn.search('uid=jdoe', 'ou=people,dc=ncsu,dc=edu', ['cn'])

    conn = get_client({
        'bind_dn': 'uid=me,ou=accounts,dc=ncsu,dc=edu',
        'password': 'file:/etc/ncstate/ldap.secret',
    })
"""
import logging
import re

import ldap

from Ncstate.Errors import ServiceError
from Ncstate.config import loader
from Ncstate.config.configuration import Configuration, ConfigDescriptor
from Ncstate.config.secrets import Secret, get_secret_from_string
from Ncstate.config.settings import Integer, String
from Ncstate.utils.ldaputils import decode_attrs, flatten_attrs

logger = logging.getLogger(__name__)

LDAP_SERVER = 'ldap://ldap.ncsu.edu'
SECURE_LDAP_SERVER = 'ldaps://ldap.ncsu.edu'

ALL_FIELDS = ['*', '+']

SORT_DESC = 'desc'

_digits = re.compile(r'(\d+)')


def natural_key(value):
    """
    Sort key for natural, case-insensitive ordering.

    >>> sorted(['b10', 'B2', 'a1'], key=natural_key)
    ['a1', 'B2', 'b10']
    """
    parts = _digits.split(str(value or '').lower())
    return [(0, int(p), '') if p.isdigit() else (1, 0, p)
            for p in parts if p]


def to_service_error(exc):
    """ Convert an LDAPError to a ServiceError. """
    info = exc.args[0] if exc.args and isinstance(exc.args[0], dict) else {}
    message = info.get('desc') or str(exc)
    if info.get('info'):
        message = '{} ({})'.format(message, info['info'])
    return ServiceError(message, code=info.get('result'))


class LdapConnector(object):
    """ A bound connection to the campus directory. """

    def __init__(self,
                 bind_dn='',
                 password='',
                 server=LDAP_SERVER,
                 secure_server=SECURE_LDAP_SERVER,
                 max_results=0):
        """
        :param str bind_dn: dn to bind as (anonymous if empty)
        :param str password: bind password (anonymous if empty)
        :param str server: server for anonymous connections
        :param str secure_server: server for authenticated connections
        :param int max_results: max number of search results (0: no limit)

        :raises ServiceError: if the server is unavailable, or bind fails
        """
        self._anonymous = not bind_dn or not password
        if self._anonymous:
            bind_dn = password = ''
            self.server = server
        else:
            self.server = secure_server
        self.max_results = max_results

        logger.debug('connecting to %s as %s', self.server,
                     'anonymous' if self._anonymous else repr(bind_dn))
        try:
            link = ldap.initialize(self.server)
            link.set_option(ldap.OPT_PROTOCOL_VERSION, ldap.VERSION3)
            link.simple_bind_s(bind_dn, password)
        except ldap.LDAPError as e:
            logger.warning('unable to bind to %s: %s', self.server, e)
            raise to_service_error(e) from e
        self._link = link

    def __repr__(self):
        return ('<{cls.__name__} {obj.server}>').format(cls=type(self),
                                                        obj=self)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    @property
    def is_anonymous(self):
        return self._anonymous

    @property
    def link(self):
        """ The underlying LDAPObject, or None if closed. """
        return self._link

    def close(self):
        """ Unbind from the server. """
        if self._link is None:
            return
        try:
            self._link.unbind_s()
        except ldap.LDAPError as e:
            logger.debug('unbind from %s failed: %s', self.server, e)
        self._link = None

    def _search(self, query, context, return_fields):
        """ Run a subtree search, and collect entries. """
        if self._link is None:
            raise ServiceError('Connection is closed')
        msgid = self._link.search_ext(context,
                                      ldap.SCOPE_SUBTREE,
                                      query,
                                      attrlist=return_fields,
                                      sizelimit=self.max_results)
        entries = []
        try:
            while True:
                rtype, rdata = self._link.result(msgid, all=0)
                if rtype == ldap.RES_SEARCH_RESULT:
                    break
                if rtype == ldap.RES_SEARCH_ENTRY:
                    entries.extend(rdata)
        except ldap.SIZELIMIT_EXCEEDED:
            logger.warning('search %r in %r exceeded size limit, got %d',
                           query, context, len(entries))
        return entries

    def search(self, query, context, return_fields=None, sort_key=None,
               sort_order=None):
        """
        Search the directory.

        :param str query: ldap filter
        :param str context: search base
        :param list return_fields: attributes to fetch (default: all)
        :param str sort_key: attribute to sort by
        :param str sort_order: 'desc' to sort in descending order

        :return list:
            A list of dicts with attribute names in lower case.  Multi-valued
            attributes are reduced to their first value.
        """
        return_fields = list(return_fields or ALL_FIELDS)
        try:
            entries = self._search(query, context, return_fields)
        except ldap.LDAPError as e:
            logger.warning('search %r in %r failed: %s', query, context, e)
            raise to_service_error(e) from e

        results = [{attr.lower(): value for attr, value in entry.items()}
                   for entry in flatten_attrs(decode_attrs(entries))]
        logger.debug('search %r in %r: %d results', query, context,
                     len(results))

        if sort_key is not None:
            sort_key = sort_key.lower()
            results.sort(key=lambda entry: natural_key(entry.get(sort_key)))
            if sort_order == SORT_DESC:
                results.reverse()
        return results


class LdapClientConfig(Configuration):
    """ Campus LDAP config. """

    bind_dn = ConfigDescriptor(
        String,
        default='',
        doc='DN to bind as, leave empty for anonymous access',
    )

    password = ConfigDescriptor(
        Secret,
        default=None,
        doc='Bind password, leave empty for anonymous access',
    )

    server = ConfigDescriptor(
        String,
        default=LDAP_SERVER,
        doc='LDAP server for anonymous access',
    )

    secure_server = ConfigDescriptor(
        String,
        default=SECURE_LDAP_SERVER,
        doc='LDAP server for authenticated access',
    )

    max_results = ConfigDescriptor(
        Integer,
        default=0,
        minval=0,
        doc='Max number of search results, 0 means no limit',
    )


def get_client(config, cls=LdapConnector):
    """
    Get an LdapConnector from config.

    :type config: str, dict, LdapClientConfig
    :param config: Client config (filename, config dict, config object)

    :param type cls: LdapConnector or a subclass

    :rtype: LdapConnector
    """
    if isinstance(config, str):
        config = LdapClientConfig(loader.read_config(config))
    elif isinstance(config, dict):
        config = LdapClientConfig(config)
    elif not isinstance(config, LdapClientConfig):
        raise ValueError('invalid config: ' + repr(config))

    config.validate()

    password = ''
    if config.password:
        password = get_secret_from_string(config.password)

    return cls(
        bind_dn=config.bind_dn,
        password=password,
        server=config.server,
        secure_server=config.secure_server,
        max_results=config.max_results,
    )
