# encoding: utf-8
""" Tests for Ncstate.service.remedy """
import pytest
import requests
import zeep
import zeep.exceptions

from Ncstate.Errors import ServiceError, ValidationError
from Ncstate.config.errors import ConfigurationError
from Ncstate.service import remedy

DIGEST = ('2011-01-01 10:00\uf8e3jdoe\uf8e3First entry\uf8e2'
          '2011-01-02 11:00\uf8e3jane\uf8e3Second entry\uf8e2')


class FakeElement(object):

    def __init__(self, localname):
        self.qname = type('QName', (object, ), {'localname': localname})()

    def __call__(self, **kwargs):
        return dict(kwargs, element=self.qname.localname)


class FakeSoapClient(object):
    """ Just enough of a zeep.Client. """

    def __init__(self, factory, wsdl, transport):
        self.wsdl = type('Wsdl', (object, ), {
            'location': wsdl,
            'types': type('Types', (object, ), {
                'elements': [FakeElement(name) for name in factory.elements],
            })(),
        })()
        self.transport = transport
        self.headers = None
        self.service = FakeService(factory)

    def set_default_soapheaders(self, headers):
        self.headers = headers


class FakeService(object):

    def __init__(self, factory):
        self._factory = factory

    def __getattr__(self, method):
        def operation(**kwargs):
            self._factory.calls.append((method, kwargs))
            result = self._factory.results.pop(0)
            if isinstance(result, Exception):
                raise result
            return result
        return operation


class FakeClientFactory(object):
    """ Creates fake soap clients, and records their calls. """

    def __init__(self):
        self.elements = ['AuthenticationInfo']
        self.clients = []
        self.calls = []
        self.results = []

    def __call__(self, wsdl, transport=None):
        client = FakeSoapClient(self, wsdl, transport)
        self.clients.append(client)
        return client

    @property
    def wsdl(self):
        return self.clients[-1].wsdl.location

    @property
    def last_call(self):
        return self.calls[-1]


@pytest.fixture
def factory():
    return FakeClientFactory()


@pytest.fixture
def client(factory):
    return remedy.RemedyClient('bot', 'hunter2', timeout=10,
                               client_factory=factory)


def test_pad_call_id():
    assert remedy.pad_call_id(42) == '00000042'
    assert remedy.pad_call_id('123456789') == '123456789'


def test_parse_digest():
    assert remedy.parse_digest(DIGEST) == [
        {'timestamp': '2011-01-01 10:00', 'user_name': 'jdoe',
         'entry': 'First entry'},
        {'timestamp': '2011-01-02 11:00', 'user_name': 'jane',
         'entry': 'Second entry'},
    ]


def test_parse_digest_empty():
    assert remedy.parse_digest('') == []
    assert remedy.parse_digest(None) == []
    assert remedy.parse_digest(' \uf8e2\n') == []


def test_parse_digest_short_entry():
    assert remedy.parse_digest('now\uf8e3jdoe') == [
        {'timestamp': 'now', 'user_name': 'jdoe', 'entry': None},
    ]


def test_request(client, factory):
    factory.results.append({'status': 'ok'})
    result = client.customer_get_by_cid('123')

    assert result == {'status': 'ok'}
    assert factory.wsdl == remedy.URI_BASE + '/customers'
    assert factory.last_call == ('get-entry', {'cid': '123', 'login': ''})
    assert client.soap_client is factory.clients[-1]


def test_auth_header(client, factory):
    factory.results.append(None)
    client.solution_get(1)
    soap_client = factory.clients[-1]
    assert soap_client.headers == [{
        'element': 'AuthenticationInfo',
        'userName': 'bot',
        'password': 'hunter2',
    }]
    assert isinstance(soap_client.transport, zeep.Transport)


def test_missing_auth_header(client, factory):
    factory.elements = ['Foo']
    with pytest.raises(ServiceError):
        client.solution_get(1)
    assert factory.calls == []


class TrackingSession(requests.Session):

    instances = []

    def __init__(self):
        super(TrackingSession, self).__init__()
        self.closed = False
        self.instances.append(self)

    def close(self):
        self.closed = True
        super(TrackingSession, self).close()


def test_session_closed_after_call(client, factory, monkeypatch):
    monkeypatch.setattr(TrackingSession, 'instances', [])
    monkeypatch.setattr(remedy.requests, 'Session', TrackingSession)
    factory.results.extend([None, None, None])
    for solution_id in (1, 2, 3):
        client.solution_get(solution_id)

    assert len(TrackingSession.instances) == 3
    assert all(session.closed for session in TrackingSession.instances)
    transport = factory.clients[-1].transport
    assert transport.session is TrackingSession.instances[-1]


def test_session_closed_after_error(client, factory, monkeypatch):
    monkeypatch.setattr(TrackingSession, 'instances', [])
    monkeypatch.setattr(remedy.requests, 'Session', TrackingSession)
    factory.results.append(zeep.exceptions.Fault('boom'))
    with pytest.raises(ServiceError):
        client.solution_get(1)
    assert TrackingSession.instances[0].closed


def test_soap_fault(client, factory):
    factory.results.append(zeep.exceptions.Fault('ERROR (302): Entry does '
                                                 'not exist in database'))
    with pytest.raises(ServiceError) as exc_info:
        client.call_get(1)
    assert 'SOAP Error: ERROR (302)' in str(exc_info.value)


def test_transport_error(factory):
    def broken_factory(wsdl, transport=None):
        raise zeep.exceptions.TransportError('404 Not Found')

    client = remedy.RemedyClient('bot', 'hunter2',
                                 client_factory=broken_factory)
    with pytest.raises(ServiceError):
        client.user_get_by_login('jdoe')


def test_serializes_result(client, factory):
    factory.results.append([{'a': 1}, {'a': 2}])
    assert client.workgroup_list("'Status' = \"Active\"") == [{'a': 1},
                                                              {'a': 2}]


# Calls


def test_call_get(client, factory):
    factory.results.append({'call_id': '00001234', 'problem_text': DIGEST})
    result = client.call_get(1234)

    assert factory.wsdl == remedy.URI_BASE + '/calls'
    assert factory.last_call == ('get-entry', {'call_id': '00001234'})
    assert result['problem_text'][1]['user_name'] == 'jane'


def test_call_list(client, factory):
    factory.results.append([])
    client.call_list("'Status' = \"Open\"", max_limit=10)
    assert factory.last_call == ('get-list', {
        'qualification': "'Status' = \"Open\"",
        'start_record': '',
        'max_limit': 10,
    })


def test_call_update(client, factory):
    factory.results.append(None)
    client.call_update(55, {
        'status': 'Closed',
        'email_subject': 'ignored',
        'unknown': 'ignored',
    })
    method, args = factory.last_call
    assert method == 'update-entry'
    assert args == {'call_id': '00000055', 'status': 'Closed'}


def test_call_update_email(client, factory):
    factory.results.append(None)
    client.call_update(55, {
        'email_to': 'jdoe@ncsu.edu',
        'email_text': 'Fixed',
        'email_subject': 'Your call',
    })
    args = factory.last_call[1]
    assert args['send_email'] == 'Pending'
    assert args['email_subject'] == 'Your call'


@pytest.mark.parametrize('data', [
    {'email_to': 'jdoe@ncsu.edu'},
    {'email_text': 'Fixed'},
])
def test_call_update_email_incomplete(client, factory, data):
    with pytest.raises(ValidationError):
        client.call_update(55, data)
    assert factory.clients == []


CALL = {
    'impact': 'Low',
    'origin': 'Web',
    'priority': 'Low',
    'problem': 'Printer on fire',
    'status': 'Open',
    'workgroup': 'Help Desk',
}


def test_call_create(client, factory):
    factory.results.append({'call_id': '00000001'})
    client.call_create(CALL)
    method, args = factory.last_call
    assert method == 'create-entry'
    assert args == dict(CALL, agent='bot')


def test_call_create_agent(client, factory):
    factory.results.append(None)
    client.call_create(dict(CALL, agent='jdoe'))
    assert factory.last_call[1]['agent'] == 'jdoe'


@pytest.mark.parametrize('field', ['impact', 'origin', 'priority',
                                   'problem', 'status'])
def test_call_create_required(client, factory, field):
    data = dict(CALL)
    del data[field]
    with pytest.raises(ValidationError) as exc_info:
        client.call_create(data)
    assert field in str(exc_info.value)
    assert factory.clients == []


def test_call_create_workgroup_required(client, factory):
    data = dict(CALL)
    del data['workgroup']
    with pytest.raises(ValidationError):
        client.call_create(data)

    factory.results.append(None)
    client.call_create(dict(data, workgroup_id='42'))
    assert factory.last_call[1]['workgroup_id'] == '42'


ATTACHMENT = {
    'attachment_data': 'aGVsbG8=',
    'attachment_name': 'hello.txt',
    'attachment_size': 5,
    'type': 'Email',
    'status': 'Received',
}


def test_call_attachment_create(client, factory):
    factory.results.append(None)
    client.call_attachment_create(7, ATTACHMENT)
    assert factory.wsdl == remedy.URI_BASE + '/calls-attachments'
    assert factory.last_call == ('create-entry',
                                 dict(ATTACHMENT, call_id='00000007'))


def test_call_attachment_create_required(client, factory):
    data = dict(ATTACHMENT)
    del data['attachment_size']
    with pytest.raises(ValidationError):
        client.call_attachment_create(7, data)
    assert factory.clients == []


def test_call_attachments(client, factory):
    factory.results.extend([None, None])
    client.call_attachment_get('A1')
    assert factory.last_call == ('get-entry', {'entry_id': 'A1'})
    client.call_attachment_list(7)
    assert factory.last_call == ('get-list-entry', {
        'call_id': '00000007', 'start_record': '', 'max_limit': ''})


def test_call_history(client, factory):
    factory.results.extend([None, None])
    client.call_history_get('H1')
    assert factory.wsdl == remedy.URI_BASE + '/calls-history'
    assert factory.last_call == ('get-entry', {'entry_id': 'H1'})
    client.call_history_list(7, max_limit=5)
    assert factory.last_call == ('get-list-entry', {
        'call_id': '00000007', 'max_limit': 5, 'start_record': ''})


# Customers, workgroups and users


def test_customer_get_by_login(client, factory):
    factory.results.append(None)
    client.customer_get_by_login('jdoe')
    assert factory.last_call == ('get-entry', {'login': 'jdoe', 'cid': ''})


def test_workgroups(client, factory):
    factory.results.extend([None, None])
    client.workgroup_get_by_id('42')
    assert factory.wsdl == remedy.URI_BASE + '/workgroups'
    assert factory.last_call == ('get-entry',
                                 {'group_id': '42', 'group_name': ''})
    client.workgroup_get_by_name('Help Desk')
    assert factory.last_call == ('get-entry',
                                 {'group_name': 'Help Desk', 'group_id': '-1'})


def test_workgroup_list_limits(client, factory):
    factory.results.append(None)
    client.workgroup_list('1=1', start_record=0, max_limit=10)
    assert factory.last_call == ('get-list-entry', {
        'qualification': '1=1', 'start_record': 0, 'max_limit': 10})


def test_users(client, factory):
    factory.results.extend([None, None, None, None])
    client.user_get_by_user_id('U1')
    assert factory.last_call == ('get-entry', {'user_id': 'U1'})
    client.user_get_by_login('jdoe')
    assert factory.last_call == ('get-entry', {'login_name': 'jdoe'})
    client.validate_credentials('jdoe', 'secret')
    assert factory.last_call == ('validate-credentials', {
        'login_name': 'jdoe', 'password': 'secret'})
    client.user_list('1=1')
    assert factory.last_call == ('get-list-entry', {
        'qualification': '1=1', 'start_record': '', 'max_limit': ''})


def test_user_update(client, factory):
    factory.results.append(None)
    client.user_update('U1', {'email_address': 'jdoe@ncsu.edu',
                              'login_name': 'ignored'})
    assert factory.wsdl == remedy.URI_BASE + '/users'
    assert factory.last_call == ('update-entry', {
        'email_address': 'jdoe@ncsu.edu', 'user_id': 'U1'})


def test_user_update_required(client, factory):
    with pytest.raises(ValidationError):
        client.user_update(None, {'email_address': 'jdoe@ncsu.edu'})
    assert factory.clients == []


# Solutions and friends


def test_solution_list(client, factory):
    factory.results.extend([None, None])
    client.solution_list('1=1')
    assert factory.last_call == ('get-list-entry', {'qualification': '1=1'})
    client.solution_list('1=1', with_keywords=False)
    assert factory.last_call == ('get-listNoKWDS', {'qualification': '1=1'})


def test_top_solution_list(client, factory):
    factory.results.extend([None, None])
    client.top_solution_list()
    assert factory.wsdl == remedy.URI_BASE + '/solutions-by-wwwused'
    assert factory.last_call == ('get-list', {
        'qualification': '\'Status\' <= "Published"',
        'start_record': 0,
        'max_limit': 10,
    })
    client.top_solution_list(qualification=None, start_record=None)
    assert factory.last_call == ('get-list', {'max_limit': 10})


def test_solution_increment(client, factory):
    factory.results.append(None)
    client.solution_increment('views', 'www', 'S1')
    assert factory.wsdl == remedy.URI_BASE + '/solutions-inc-counter'
    assert factory.last_call == ('increment', {
        'field_name': 'views', 'service': 'www', 'solutionid': 'S1'})


def test_keyword_list(client, factory):
    factory.results.append(None)
    client.keyword_list('S1', max_limit=3)
    assert factory.wsdl == remedy.URI_BASE + '/keywords'
    assert factory.last_call == ('get-list', {
        'solution_id': 'S1', 'startRecord': '', 'maxLimit': 3})


def test_survey_list(client, factory):
    factory.results.append(None)
    client.survey_list('1=1')
    assert factory.wsdl == remedy.URI_BASE + '/surveys'
    assert factory.last_call == ('get-list-entry', {'qualification': '1=1'})


def test_call_cust_get(client, factory):
    factory.results.append({'problem_text': DIGEST})
    result = client.call_cust_get(9)
    assert factory.wsdl == remedy.URI_BASE + '/calls-cust'
    assert factory.last_call == ('get-entry', {'call_id': '00000009'})
    assert len(result['problem_text']) == 2


def test_call_cust_list(client, factory):
    factory.results.append({'getListValues': [
        {'call_id': '1', 'problem_text': DIGEST},
        {'call_id': '2'},
    ]})
    result = client.call_cust_list('1=1')
    values = result['getListValues']
    assert values[0]['problem_text'][0]['entry'] == 'First entry'
    assert 'problem_text' not in values[1]


def test_call_cust_list_single(client, factory):
    factory.results.append({'getListValues': {'problem_text': DIGEST}})
    result = client.call_cust_list('1=1')
    assert len(result['getListValues']['problem_text']) == 2


def test_call_cust_list_unwrapped(client, factory):
    factory.results.append([
        {'call_id': '1', 'problem_text': DIGEST},
        {'call_id': '2', 'problem_text': ''},
    ])
    result = client.call_cust_list('1=1')
    assert result[0]['problem_text'][1]['entry'] == 'Second entry'
    assert result[1]['problem_text'] == []


def test_call_cust_list_unwrapped_single(client, factory):
    factory.results.append({'call_id': '1', 'problem_text': DIGEST})
    result = client.call_cust_list('1=1')
    assert len(result['problem_text']) == 2


def test_call_cust_list_empty(client, factory):
    factory.results.append(None)
    assert client.call_cust_list('1=1') is None


# Config


def test_get_client(monkeypatch):
    monkeypatch.setenv('REMEDY_PASSWORD', 'hunter2')
    client = remedy.get_client({
        'username': 'bot',
        'password': 'env:REMEDY_PASSWORD',
    })
    assert client.username == 'bot'
    assert client._password == 'hunter2'
    assert client.urls.baseurl == remedy.URI_BASE
    assert client.timeout == 30
    assert 'hunter2' not in repr(client)


def test_get_client_missing_password():
    with pytest.raises(ConfigurationError):
        remedy.get_client({'username': 'bot'})
