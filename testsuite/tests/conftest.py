# encoding: utf-8
"""
Global py-test config and fixtures.
"""
import logging

import pytest

import Ncstate.logutils
from Ncstate.testutils.http_utils import FakeSession
from Ncstate.testutils.log_utils import StrictNullHandler


@pytest.fixture(autouse=True, scope='session')
def logger():
    """ Format all log records, to catch errors in log calls. """
    root = logging.getLogger()
    handler = StrictNullHandler()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    Ncstate.logutils._configured = True
    yield root
    root.removeHandler(handler)


@pytest.fixture
def fake_session():
    """ An empty `FakeSession`.  Add responses to its `responses` list. """
    return FakeSession()


@pytest.fixture
def config_file(tmpdir):
    """
    A function that writes config files.

    Typical use:
    ::

        def test_foo(config_file):
            filename = config_file('foo.yml', 'url: http://localhost\\n')
    """
    def write_config(basename, data):
        path = tmpdir.join(basename)
        path.write_text(data, encoding='utf-8')
        return str(path)
    return write_config
