# encoding: utf-8
""" Tests for Ncstate.service.ldap and Ncstate.service.directory """
import ldap
import pytest

from Ncstate.Errors import ServiceError, ValidationError
from Ncstate.service import directory
from Ncstate.service.ldap import (
    LDAP_SERVER,
    SECURE_LDAP_SERVER,
    LdapConnector,
    get_client,
    natural_key,
)


class FakeLdapObject(object):
    """ Just enough of a LDAPObject. """

    def __init__(self, uri):
        self.uri = uri
        self.options = {}
        self.bound_as = None
        self.unbound = False
        self.searches = []
        self.entries = []
        self.bind_error = None
        self.search_error = None
        self.size_limit = None

    def set_option(self, option, value):
        self.options[option] = value

    def simple_bind_s(self, who, cred):
        if self.bind_error:
            raise self.bind_error
        self.bound_as = (who, cred)

    def search_ext(self, base, scope, filterstr, attrlist=None, sizelimit=0):
        if self.search_error:
            raise self.search_error
        self.searches.append((base, scope, filterstr, attrlist, sizelimit))
        self._pending = list(self.entries)
        return 1

    def result(self, msgid, all=1):
        if self._pending:
            if self.size_limit is not None and self.size_limit <= 0:
                raise ldap.SIZELIMIT_EXCEEDED({'desc': 'Size limit exceeded'})
            if self.size_limit is not None:
                self.size_limit -= 1
            return ldap.RES_SEARCH_ENTRY, [self._pending.pop(0)]
        return ldap.RES_SEARCH_RESULT, []

    def unbind_s(self):
        self.unbound = True


@pytest.fixture
def links(monkeypatch):
    """ All fake ldap objects that have been created. """
    created = []

    def initialize(uri):
        link = FakeLdapObject(uri)
        created.append(link)
        return link

    monkeypatch.setattr(ldap, 'initialize', initialize)
    return created


def entry(uid, description):
    return (
        'uid={},ou=people,dc=ncsu,dc=edu'.format(uid),
        {
            'uid': [uid.encode('utf-8')],
            'description': [description.encode('utf-8')],
            'objectClass': [b'top', b'person'],
        },
    )


def test_anonymous(links):
    conn = LdapConnector()
    link = links[0]
    assert conn.is_anonymous
    assert conn.server == LDAP_SERVER
    assert link.uri == LDAP_SERVER
    assert link.bound_as == ('', '')
    assert link.options[ldap.OPT_PROTOCOL_VERSION] == ldap.VERSION3
    assert conn.link is link


@pytest.mark.parametrize('bind_dn, password', [
    ('uid=foo,ou=accounts,dc=ncsu,dc=edu', ''),
    ('', 'hunter2'),
])
def test_anonymous_if_missing_credentials(links, bind_dn, password):
    conn = LdapConnector(bind_dn, password)
    assert conn.is_anonymous
    assert links[0].bound_as == ('', '')


def test_authenticated(links):
    conn = LdapConnector('uid=foo,ou=accounts,dc=ncsu,dc=edu', 'hunter2')
    assert not conn.is_anonymous
    assert conn.server == SECURE_LDAP_SERVER
    assert links[0].bound_as == ('uid=foo,ou=accounts,dc=ncsu,dc=edu',
                                 'hunter2')


def test_bind_error(monkeypatch):
    def initialize(uri):
        link = FakeLdapObject(uri)
        link.bind_error = ldap.INVALID_CREDENTIALS({
            'desc': 'Invalid credentials',
            'result': 49,
        })
        return link

    monkeypatch.setattr(ldap, 'initialize', initialize)
    with pytest.raises(ServiceError) as exc_info:
        LdapConnector('uid=foo', 'wrong')
    assert exc_info.value.code == 49
    assert 'Invalid credentials' in str(exc_info.value)


def test_search(links):
    conn = LdapConnector()
    links[0].entries = [entry('foo', 'Foo')]
    result = conn.search('uid=foo', 'ou=people,dc=ncsu,dc=edu', ['uid'])

    assert result == [{
        'uid': 'foo',
        'description': 'Foo',
        'objectclass': 'top',
    }]
    base, scope, filterstr, attrlist, sizelimit = links[0].searches[0]
    assert base == 'ou=people,dc=ncsu,dc=edu'
    assert scope == ldap.SCOPE_SUBTREE
    assert filterstr == 'uid=foo'
    assert attrlist == ['uid']
    assert sizelimit == 0


def test_search_all_fields(links):
    conn = LdapConnector()
    conn.search('uid=foo', 'ou=people,dc=ncsu,dc=edu')
    assert links[0].searches[0][3] == ['*', '+']


def test_search_empty(links):
    assert LdapConnector().search('uid=nobody', 'dc=ncsu,dc=edu') == []


def test_search_sorted(links):
    conn = LdapConnector()
    links[0].entries = [entry('a', 'b10'), entry('b', 'B2'),
                        entry('c', 'a1')]
    result = conn.search('uid=*', 'dc=ncsu,dc=edu', sort_key='description')
    assert [e['description'] for e in result] == ['a1', 'B2', 'b10']

    result = conn.search('uid=*', 'dc=ncsu,dc=edu', sort_key='description',
                         sort_order='desc')
    assert [e['description'] for e in result] == ['b10', 'B2', 'a1']


def test_search_size_limit(links):
    conn = LdapConnector(max_results=1)
    links[0].entries = [entry('a', 'A'), entry('b', 'B')]
    links[0].size_limit = 1
    result = conn.search('uid=*', 'dc=ncsu,dc=edu')
    assert [e['uid'] for e in result] == ['a']
    assert links[0].searches[0][4] == 1


def test_search_error(links):
    conn = LdapConnector()
    links[0].search_error = ldap.FILTER_ERROR({'desc': 'Bad search filter',
                                               'result': 87})
    with pytest.raises(ServiceError) as exc_info:
        conn.search('(((', 'dc=ncsu,dc=edu')
    assert exc_info.value.code == 87


def test_close(links):
    with LdapConnector() as conn:
        pass
    assert links[0].unbound
    assert conn.link is None
    with pytest.raises(ServiceError):
        conn.search('uid=foo', 'dc=ncsu,dc=edu')


def test_natural_key():
    values = ['item 10', 'Item 9', None, 'item 1']
    assert sorted(values, key=natural_key) == [None, 'item 1', 'Item 9',
                                               'item 10']


def test_get_client(links):
    conn = get_client({
        'bind_dn': 'uid=foo,ou=accounts,dc=ncsu,dc=edu',
        'password': 'plaintext:hunter2',
        'secure_server': 'ldaps://localhost',
        'max_results': 10,
    })
    assert links[0].uri == 'ldaps://localhost'
    assert links[0].bound_as[1] == 'hunter2'
    assert conn.max_results == 10


def test_get_client_anonymous(links):
    conn = get_client({}, cls=directory.UnitDirectory)
    assert isinstance(conn, directory.UnitDirectory)
    assert conn.is_anonymous


# Directory lookups


def test_get_buildings(links):
    buildings = directory.BuildingDirectory()
    links[0].entries = [entry('x', 'Withers Hall'), entry('y', 'Clark Hall')]
    result = buildings.get_buildings()
    assert [b['description'] for b in result] == ['Clark Hall',
                                                   'Withers Hall']
    base, _, filterstr, _, _ = links[0].searches[0]
    assert base == directory.BUILDING_CONTEXT
    assert filterstr == 'ncsuBldgAbbrev=*'


def test_get_units(links):
    units = directory.UnitDirectory()
    units.get_units(return_fields=['ou', 'description'])
    base, _, filterstr, attrlist, _ = links[0].searches[0]
    assert base == directory.UNIT_CONTEXT
    assert filterstr == 'ou=*'
    assert attrlist == ['ou', 'description']


@pytest.mark.parametrize('context', [
    directory.PEOPLE_CONTEXT,
    directory.STUDENT_CONTEXT,
    directory.EMPLOYEE_CONTEXT,
    directory.ACCOUNT_CONTEXT,
])
def test_find_by_unity_id(links, context):
    users = directory.UserDirectory()
    users.find_by_unity_id('jdoe', context=context)
    base, _, filterstr, _, _ = links[0].searches[0]
    assert base == context
    assert filterstr == 'uid=jdoe'


def test_find_by_unity_id_escapes(links):
    users = directory.UserDirectory()
    users.find_by_unity_id('*)(uid=*')
    assert links[0].searches[0][2] == r'uid=\2a\29\28uid=\2a'


def test_find_by_unity_id_invalid_context(links):
    users = directory.UserDirectory()
    with pytest.raises(ValidationError):
        users.find_by_unity_id('jdoe', context=directory.UNIT_CONTEXT)
    assert links[0].searches == []


def test_find_by_campus_id_anonymous(links):
    users = directory.UserDirectory()
    with pytest.raises(ValidationError):
        users.find_by_campus_id('000000001')
    assert links[0].searches == []


def test_find_by_campus_id(links):
    users = directory.UserDirectory('uid=foo', 'hunter2')
    users.find_by_campus_id(1, context=directory.STUDENT_CONTEXT)
    base, _, filterstr, _, _ = links[0].searches[0]
    assert base == directory.STUDENT_CONTEXT
    assert filterstr == 'ncsucampusID=1'


def test_find_by_campus_id_invalid_context(links):
    users = directory.UserDirectory('uid=foo', 'hunter2')
    with pytest.raises(ValidationError):
        users.find_by_campus_id(1, context=directory.ACCOUNT_CONTEXT)
