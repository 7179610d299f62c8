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
Client for the OIT Remedy help desk web services.

Each group of Remedy operations (calls, users, solutions, ...) is published
as a separate SOAP service with its own WSDL, below a common base url.  All
requests are authenticated with an ``AuthenticationInfo`` SOAP header.

::

    client = get_client({
        'username': 'remedy-bot',
        'password': 'file:/etc/ncstate/remedy.secret',
    })
    call = client.call_get(1234)
    for diary_entry in call['problem_text']:
        print(diary_entry['timestamp'], diary_entry['entry'])

Results are converted to plain dicts and lists.
"""
import logging

import requests
import zeep
import zeep.exceptions
import zeep.helpers

import Ncstate.logutils
from Ncstate.Errors import ServiceError, ValidationError
from Ncstate.config import loader
from Ncstate.config.configuration import Configuration, ConfigDescriptor
from Ncstate.config.secrets import Secret, get_secret_from_string
from Ncstate.config.settings import Numeric, String
from Ncstate.utils import http as http_utils

logger = logging.getLogger(__name__)

URI_BASE = 'https://remedyservice.oit.ncsu.edu/arsys/WSDL/public/ars00srv'

AUTH_HEADER = 'AuthenticationInfo'

LIST_VALUES = 'getListValues'

CALL_ID_LENGTH = 8

# diary digests are separated by private use characters
DIGEST_ENTRY_SEPARATOR = '\uf8e2'
DIGEST_FIELD_SEPARATOR = '\uf8e3'

DEFAULT_TOP_SOLUTION_QUALIFICATION = '\'Status\' <= "Published"'

# Known fields for updates and new entries.  Fields with a non-None default
# are always sent.
CALL_UPDATE_FIELDS = (
    'action',
    'call_id',
    'customer_id',
    'date_nextcontact',
    'impact',
    # Yes/No
    'on_site_visit',
    'origin',
    'owner_id',
    # remedy login
    'owner',
    'priority',
    # a single diary entry
    'problem_text',
    'problem',
    'product_id',
    'product',
    'solution_id',
    'status',
    # seconds
    'time_spent',
    'workgroup_id',
    'workgroup',
    'email_to',
    'email_text',
    'email_cc',
    'email_bcc',
    'email_subject',
)

EMAIL_FIELDS = tuple(f for f in CALL_UPDATE_FIELDS if f.startswith('email_'))

CALL_CREATE_FIELDS = (
    'action',
    'agent',
    'comments',
    'customer_id',
    'date_nextcontact',
    'impact',
    'on_site_visit',
    'origin',
    'owner_id',
    'owner',
    'priority',
    'problem_text',
    'problem',
    'product_id',
    'product',
    'solution_id',
    'status',
    'time_spent',
    'workgroup_id',
    'workgroup',
)

CALL_CREATE_REQUIRED = ('impact', 'origin', 'priority', 'problem', 'status')

CALL_ATTACHMENT_FIELDS = (
    # base64 encoded
    'attachment_data',
    'attachment_name',
    # bytes
    'attachment_size',
    'call_id',
    # Email/Solution
    'type',
    # Received/Outgoing/Sent/Hold/Solution
    'status',
)

USER_UPDATE_FIELDS = (
    'availability',
    'default_notify_mechanism',
    'email_address',
    'email_signature',
    'initial_query',
    'pager_address',
    'pager_template',
    'password',
    'products_count',
    'solutions_count',
    'user_id',
)


def pad_call_id(call_id):
    """
    >>> pad_call_id(1234)
    '00001234'
    """
    return str(call_id).rjust(CALL_ID_LENGTH, '0')


def merge_fields(fields, data, defaults=None):
    """
    Pick known fields from data, falling back to defaults.

    >>> merge_fields(('a', 'b', 'c'), {'a': 1, 'x': 2}, {'b': 3, 'c': None})
    {'a': 1, 'b': 3}
    """
    defaults = defaults or {}
    args = {}
    for field in fields:
        if data.get(field) is not None:
            args[field] = data[field]
        elif defaults.get(field) is not None:
            args[field] = defaults[field]
    return args


def require_fields(args, *fields):
    """
    :raises ValidationError: if any of the fields are unset
    """
    for field in fields:
        if args.get(field) is None:
            raise ValidationError(
                'Field for "{}" is required and not set'.format(field))


def parse_digest(digest):
    """
    Parse a call diary digest.

    >>> parse_digest('t1\\uf8e3jdoe\\uf8e3hello\\uf8e2 ')
    [{'timestamp': 't1', 'user_name': 'jdoe', 'entry': 'hello'}]

    :return list: dicts with timestamp, user_name and entry
    """
    parsed = []
    for entry in (digest or '').split(DIGEST_ENTRY_SEPARATOR):
        if not entry.strip():
            continue
        fields = entry.split(DIGEST_FIELD_SEPARATOR) + [None, None]
        parsed.append({
            'timestamp': fields[0],
            'user_name': fields[1],
            'entry': fields[2],
        })
    return parsed


def _parse_problem_text(record):
    if isinstance(record, dict) and 'problem_text' in record:
        record['problem_text'] = parse_digest(record['problem_text'])
    return record


def _parse_list_problem_text(result):
    """
    Parse the diaries of a list result.

    A response with a single repeated child is unwrapped by zeep, so the
    records come either as a bare list, or wrapped in a getListValues dict.
    Either may hold a single record.
    """
    if isinstance(result, dict) and LIST_VALUES in result:
        result[LIST_VALUES] = _parse_list_problem_text(result[LIST_VALUES])
    elif isinstance(result, list):
        for record in result:
            _parse_problem_text(record)
    else:
        _parse_problem_text(result)
    return result


class RemedyEndpoints(object):
    """ Remedy WSDL urls. """

    def __init__(self, url):
        """
        :param url: base url of the Remedy WSDLs
        """
        self.baseurl = url

    def __repr__(self):
        return ('{cls.__name__}({obj.baseurl!r})').format(cls=type(self),
                                                          obj=self)

    def get_wsdl(self, endpoint):
        return http_utils.urljoin(self.baseurl, endpoint)


class RemedyClient(object):
    """ Remedy web service client. """

    def __init__(self, username, password, url=URI_BASE, timeout=None,
                 client_factory=zeep.Client):
        """
        :param str username: Remedy login
        :param str password: Remedy password
        :param str url: base url of the Remedy WSDLs
        :param float timeout: request timeout, in seconds
        :param callable client_factory: creates SOAP clients from a wsdl url
        """
        self.urls = RemedyEndpoints(url)
        self.username = username
        self._password = password
        self.timeout = timeout
        self._client_factory = client_factory
        self.soap_client = None

    def __repr__(self):
        return ('<{cls.__name__} {obj.username}@{obj.urls.baseurl}>').format(
            cls=type(self), obj=self)

    def _make_client(self, wsdl, session):
        transport = zeep.Transport(session=session,
                                   timeout=self.timeout,
                                   operation_timeout=self.timeout)
        client = self._client_factory(wsdl, transport=transport)
        client.set_default_soapheaders([self._make_auth_header(client)])
        return client

    def _make_auth_header(self, client):
        for element in client.wsdl.types.elements:
            if element.qname.localname == AUTH_HEADER:
                return element(userName=self.username,
                               password=self._password)
        raise ServiceError('SOAP Error: no {} element in {}'.format(
            AUTH_HEADER, client.wsdl.location))

    def _request(self, endpoint, method, args):
        """
        Call a Remedy operation.

        :param str endpoint: name of the Remedy service
        :param str method: name of the operation
        :param dict args: operation arguments, None is sent as ''

        :return: the result, as plain dicts and lists
        """
        soap_args = {k: ('' if v is None else v) for k, v in args.items()}
        wsdl = self.urls.get_wsdl(endpoint)
        logger.debug('calling %s on %s', method, wsdl)
        # one connection per call
        session = requests.Session()
        try:
            self.soap_client = self._make_client(wsdl, session)
            operation = getattr(self.soap_client.service, method)
            result = operation(**soap_args)
            return zeep.helpers.serialize_object(result, target_cls=dict)
        except (zeep.exceptions.Error, requests.RequestException) as e:
            logger.warning('%s on %s failed: %s', method, wsdl, e)
            raise ServiceError('SOAP Error: {}'.format(e)) from e
        finally:
            session.close()

    # Calls

    def call_get(self, call_id):
        """ Get a call, with its diary parsed into entries. """
        result = self._request('calls', 'get-entry',
                               {'call_id': pad_call_id(call_id)})
        return _parse_problem_text(result)

    def call_list(self, qualification, start_record='', max_limit=''):
        """ List calls matching a Remedy qualification. """
        args = {
            'qualification': qualification,
            'start_record': start_record,
            'max_limit': max_limit,
        }
        return self._request('calls', 'get-list', args)

    def call_update(self, call_id, data):
        """
        Update a call.

        An email is sent from the call if `email_to` and `email_text` are
        given.

        :param dict data: fields to update, see CALL_UPDATE_FIELDS

        :raises ValidationError: if only one of email_to and email_text is set
        """
        args = merge_fields(CALL_UPDATE_FIELDS, data,
                            {'call_id': pad_call_id(call_id)})
        if 'email_to' in args or 'email_text' in args:
            if 'email_text' not in args:
                raise ValidationError(
                    'If email_to field is set, email_text must also be set')
            if 'email_to' not in args:
                raise ValidationError(
                    'If email_text field is set, email_to must also be set')
            args['send_email'] = 'Pending'
        else:
            for field in EMAIL_FIELDS:
                args.pop(field, None)
        return self._request('calls', 'update-entry', args)

    def call_create(self, data):
        """
        Create a new call.

        :param dict data: call fields, see CALL_CREATE_FIELDS

        :raises ValidationError: if a required field is missing
        """
        args = merge_fields(CALL_CREATE_FIELDS, data,
                            {'agent': self.username})
        require_fields(args, *CALL_CREATE_REQUIRED)
        if args.get('workgroup_id') is None and args.get('workgroup') is None:
            raise ValidationError('Field for "workgroup" or "workgroup_id" '
                                  'is required and not set')
        return self._request('calls', 'create-entry', args)

    def call_attachment_get(self, entry_id):
        return self._request('calls-attachments', 'get-entry',
                             {'entry_id': entry_id})

    def call_attachment_list(self, call_id):
        args = {
            'call_id': pad_call_id(call_id),
            'start_record': None,
            'max_limit': None,
        }
        return self._request('calls-attachments', 'get-list-entry', args)

    def call_attachment_create(self, call_id, data):
        """
        Attach a file to a call.

        All of CALL_ATTACHMENT_FIELDS are required.
        """
        args = merge_fields(CALL_ATTACHMENT_FIELDS, data,
                            {'call_id': pad_call_id(call_id)})
        require_fields(args, *CALL_ATTACHMENT_FIELDS)
        return self._request('calls-attachments', 'create-entry', args)

    def call_history_get(self, entry_id):
        return self._request('calls-history', 'get-entry',
                             {'entry_id': entry_id})

    def call_history_list(self, call_id, max_limit=None, start_record=None):
        args = {
            'call_id': pad_call_id(call_id),
            'max_limit': max_limit,
            'start_record': start_record,
        }
        return self._request('calls-history', 'get-list-entry', args)

    # Customers and workgroups

    def customer_get_by_cid(self, cid):
        return self._request('customers', 'get-entry',
                             {'cid': cid, 'login': None})

    def customer_get_by_login(self, login):
        return self._request('customers', 'get-entry',
                             {'login': login, 'cid': None})

    def workgroup_get_by_id(self, workgroup_id):
        return self._request('workgroups', 'get-entry',
                             {'group_id': workgroup_id, 'group_name': None})

    def workgroup_get_by_name(self, workgroup_name):
        # the id must be set to an invalid value to search by name
        return self._request('workgroups', 'get-entry',
                             {'group_name': workgroup_name, 'group_id': '-1'})

    def _list_args(self, qualification, start_record, max_limit):
        args = {'qualification': qualification}
        if start_record is not None:
            args['start_record'] = start_record
        if max_limit is not None:
            args['max_limit'] = max_limit
        return args

    def workgroup_list(self, qualification, start_record=None,
                       max_limit=None):
        return self._request(
            'workgroups', 'get-list-entry',
            self._list_args(qualification, start_record, max_limit))

    # Users

    def user_get_by_user_id(self, user_id):
        return self._request('users', 'get-entry', {'user_id': user_id})

    def user_get_by_login(self, login):
        return self._request('users', 'get-entry', {'login_name': login})

    def validate_credentials(self, username, password):
        """ Check a Remedy username and password. """
        args = {
            'login_name': username,
            'password': password,
        }
        return self._request('users', 'validate-credentials', args)

    def user_list(self, qualification, start_record=None, max_limit=None):
        args = {
            'qualification': qualification,
            'start_record': start_record,
            'max_limit': max_limit,
        }
        return self._request('users', 'get-list-entry', args)

    def user_update(self, user_id, data):
        """
        Update a Remedy user.

        :param dict data: fields to update, see USER_UPDATE_FIELDS
        """
        args = merge_fields(USER_UPDATE_FIELDS, data, {'user_id': user_id})
        require_fields(args, 'user_id')
        return self._request('users', 'update-entry', args)

    # Solutions

    def solution_get(self, solution_id):
        return self._request('solutions', 'get-entry',
                             {'solution_id': solution_id})

    def solution_list(self, qualification, start_record=None, max_limit=None,
                      with_keywords=True):
        """ List solutions, with or without their keywords. """
        method = 'get-list-entry' if with_keywords else 'get-listNoKWDS'
        return self._request(
            'solutions', method,
            self._list_args(qualification, start_record, max_limit))

    def top_solution_list(self,
                          qualification=DEFAULT_TOP_SOLUTION_QUALIFICATION,
                          start_record=0,
                          max_limit=10):
        """ List the most viewed solutions. """
        args = self._list_args(qualification, start_record, max_limit)
        if qualification is None:
            del args['qualification']
        return self._request('solutions-by-wwwused', 'get-list', args)

    def solution_increment(self, field_name, service, solution_id):
        """ Increment a usage counter of a solution. """
        args = {
            'field_name': field_name,
            'service': service,
            'solutionid': solution_id,
        }
        return self._request('solutions-inc-counter', 'increment', args)

    def keyword_list(self, solution_id, start_record=None, max_limit=None):
        args = {
            'solution_id': solution_id,
            'startRecord': start_record,
            'maxLimit': max_limit,
        }
        return self._request('keywords', 'get-list', args)

    # Surveys and customer views of calls

    def survey_list(self, qualification, start_record=None, max_limit=None):
        return self._request(
            'surveys', 'get-list-entry',
            self._list_args(qualification, start_record, max_limit))

    def call_cust_list(self, qualification, start_record='', max_limit=''):
        """ List calls as seen by customers, with parsed diaries. """
        args = {
            'qualification': qualification,
            'start_record': start_record,
            'max_limit': max_limit,
        }
        result = self._request('calls-cust', 'get-list-entry', args)
        return _parse_list_problem_text(result)

    def call_cust_get(self, call_id):
        result = self._request('calls-cust', 'get-entry',
                               {'call_id': pad_call_id(call_id)})
        return _parse_problem_text(result)


class RemedyClientConfig(Configuration):
    """ Remedy client config. """

    url = ConfigDescriptor(
        String,
        default=URI_BASE,
        doc='Base URL of the Remedy WSDLs',
    )

    username = ConfigDescriptor(
        String,
        doc='Remedy login',
    )

    password = ConfigDescriptor(
        Secret,
        doc='Remedy password',
    )

    timeout = ConfigDescriptor(
        Numeric,
        default=30,
        minval=0,
        doc='Request timeout, in seconds',
    )


def get_client(config):
    """
    Get a RemedyClient from config.

    :type config: str, dict, RemedyClientConfig
    :param config: Client config (filename, config dict, config object)

    :rtype: RemedyClient
    """
    if isinstance(config, str):
        config = RemedyClientConfig(loader.read_config(config))
    elif isinstance(config, dict):
        config = RemedyClientConfig(config)
    elif not isinstance(config, RemedyClientConfig):
        raise ValueError('invalid config: ' + repr(config))

    config.validate()

    return RemedyClient(
        username=config.username,
        password=get_secret_from_string(config.password),
        url=config.url,
        timeout=config.timeout,
    )


def main():
    """
    A very basic cli client.

    python -m Ncstate.service.remedy <config> <call-id>
        show a call
    """
    import json
    import sys

    def cli_error(*msg):
        print("Usage:",
              "python -m Ncstate.service.remedy <config> <call-id>",
              file=sys.stderr)
        print("", file=sys.stderr)
        print("Error:", *msg, file=sys.stderr)
        raise SystemExit(1)

    try:
        config_file = sys.argv[1]
        call_id = int(sys.argv[2])
    except IndexError:
        cli_error("missing mandatory arguments")
    except ValueError:
        cli_error("invalid call-id:", repr(sys.argv[2]))

    Ncstate.logutils.autoconf()
    client = get_client(config_file)
    result = client.call_get(call_id)
    print(json.dumps(result, sort_keys=True, indent=2, default=str))


if __name__ == '__main__':
    main()
