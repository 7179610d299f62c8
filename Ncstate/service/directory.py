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
Lookups of buildings, units and people in the campus directory.

::

    with get_client('ldap.yml', cls=UserDirectory) as users:
        users.find_by_unity_id('jdoe', context=STUDENT_CONTEXT)
"""
import logging

from ldap.filter import escape_filter_chars

from Ncstate.Errors import ValidationError

from .ldap import LdapConnector, get_client  # noqa: F401

logger = logging.getLogger(__name__)

BUILDING_CONTEXT = 'ou=buildings,dc=ncsu,dc=edu'
UNIT_CONTEXT = 'ou=units,dc=ncsu,dc=edu'

PEOPLE_CONTEXT = 'ou=people,dc=ncsu,dc=edu'
STUDENT_CONTEXT = 'ou=students,ou=people,dc=ncsu,dc=edu'
EMPLOYEE_CONTEXT = 'ou=employees,ou=people,dc=ncsu,dc=edu'
ACCOUNT_CONTEXT = 'ou=accounts,dc=ncsu,dc=edu'


def _by_description(entries):
    return sorted(entries, key=lambda e: e.get('description') or '')


class BuildingDirectory(LdapConnector):
    """ Campus buildings. """

    def get_buildings(self, return_fields=None):
        """ List all buildings, ordered by description. """
        return _by_description(
            self.search('ncsuBldgAbbrev=*', BUILDING_CONTEXT, return_fields))


class UnitDirectory(LdapConnector):
    """ Campus units. """

    def get_units(self, return_fields=None):
        """ List all units, ordered by description. """
        return _by_description(
            self.search('ou=*', UNIT_CONTEXT, return_fields))


class UserDirectory(LdapConnector):
    """ People and accounts. """

    unity_id_contexts = (PEOPLE_CONTEXT, STUDENT_CONTEXT, EMPLOYEE_CONTEXT,
                         ACCOUNT_CONTEXT)

    campus_id_contexts = (PEOPLE_CONTEXT, STUDENT_CONTEXT, EMPLOYEE_CONTEXT)

    def find_by_unity_id(self, unity_id, context=PEOPLE_CONTEXT,
                         return_fields=None):
        """
        Look up a user by unity id.

        :raises ValidationError: if context is not a people or account context
        """
        if context not in self.unity_id_contexts:
            raise ValidationError('Invalid context for this method passed')
        query = 'uid={}'.format(escape_filter_chars(unity_id))
        return self.search(query, context, return_fields)

    def find_by_campus_id(self, campus_id, context=PEOPLE_CONTEXT,
                          return_fields=None):
        """
        Look up a user by campus id.

        Campus ids are only searchable with an authenticated connection.

        :raises ValidationError:
            if the connection is anonymous, or context is not a people context
        """
        if self.is_anonymous:
            raise ValidationError(
                'Can not search on campus ID using anonymous LDAP access')
        if context not in self.campus_id_contexts:
            raise ValidationError('Invalid context for this method passed')
        query = 'ncsucampusID={}'.format(escape_filter_chars(str(campus_id)))
        return self.search(query, context, return_fields)
