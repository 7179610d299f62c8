# encoding: utf-8
""" Tests for Ncstate.config """
import pytest

from Ncstate.config import loader
from Ncstate.config.configuration import ConfigDescriptor, Configuration
from Ncstate.config.errors import ConfigurationError
from Ncstate.config.secrets import Secret
from Ncstate.config.settings import (
    Boolean,
    Choice,
    Integer,
    NotSet,
    Numeric,
    String,
)


class ExampleConfig(Configuration):

    url = ConfigDescriptor(String, default='http://localhost/',
                           regex='^https?://', doc='Base url')

    name = ConfigDescriptor(String, minlen=2, maxlen=8)

    retries = ConfigDescriptor(Integer, default=3, minval=0, maxval=5)

    timeout = ConfigDescriptor(Numeric, default=1.5, minval=0)

    format = ConfigDescriptor(Choice, choices={'json', 'xml'},
                              default='json')

    verify = ConfigDescriptor(Boolean, default=True)

    password = ConfigDescriptor(Secret, default=None)


def test_defaults():
    config = ExampleConfig()
    assert config.url == 'http://localhost/'
    assert config.retries == 3
    assert config.name is NotSet
    assert config['format'] == 'json'


def test_list_settings():
    assert sorted(ExampleConfig.list_settings()) == [
        'format', 'name', 'password', 'retries', 'timeout', 'url', 'verify']


def test_init():
    config = ExampleConfig({'name': 'foo', 'retries': 0, 'verify': False})
    assert config.name == 'foo'
    assert config.retries == 0
    assert config.verify is False
    config.validate()


def test_instances_are_independent():
    a = ExampleConfig({'name': 'foo'})
    b = ExampleConfig({'name': 'bar'})
    assert a.name == 'foo'
    assert b.name == 'bar'


def test_validate_missing():
    with pytest.raises(ConfigurationError) as exc_info:
        ExampleConfig().validate()
    assert list(exc_info.value.errors) == ['name']


@pytest.mark.parametrize('key, value, exc_type', [
    ('url', 'ftp://localhost', ValueError),
    ('url', 3, TypeError),
    ('name', 'x', ValueError),
    ('name', 'way too long', ValueError),
    ('retries', 6, ValueError),
    ('retries', 1.5, TypeError),
    ('timeout', -1, ValueError),
    ('format', 'csv', ValueError),
    ('verify', 'yes', TypeError),
    ('password', 'hunter2', ValueError),
    ('password', 'vault:hunter2', ValueError),
])
def test_invalid_values(key, value, exc_type):
    with pytest.raises(ConfigurationError) as exc_info:
        ExampleConfig({key: value})
    assert isinstance(exc_info.value.errors[key], exc_type)


def test_unknown_key():
    with pytest.raises(ConfigurationError) as exc_info:
        ExampleConfig({'foo': 'bar'})
    assert 'foo' in exc_info.value.errors


def test_setitem():
    config = ExampleConfig()
    config['name'] = 'baz'
    assert config.name == 'baz'
    assert config['name'] == 'baz'
    with pytest.raises(KeyError):
        config['foo'] = 'bar'
    with pytest.raises(KeyError):
        config['foo']


def test_doc():
    assert ExampleConfig.url.doc == 'Base url'
    assert ExampleConfig.name.doc == ''


def test_error_message_hides_secret():
    with pytest.raises(ConfigurationError) as exc_info:
        ExampleConfig({'password': 'hunter2'})
    assert 'hunter2' not in str(exc_info.value)


@pytest.mark.parametrize('basename, data', [
    ('config.yml', 'name: foo\nretries: 1\n'),
    ('config.yaml', 'name: foo\nretries: 1\n'),
    ('config.json', '{"name": "foo", "retries": 1}'),
])
def test_read(config_file, basename, data):
    filename = config_file(basename, data)
    assert loader.read_config(filename) == {'name': 'foo', 'retries': 1}
    config = loader.read(ExampleConfig(), filename)
    assert config.name == 'foo'
    assert config.retries == 1


def test_read_unknown_extension(config_file):
    filename = config_file('config.ini', '[foo]\n')
    with pytest.raises(NotImplementedError):
        loader.read_config(filename)
