import getpass

from kernelwire import config
from kernelwire.protocol.session import Session


def test_username_environment(monkeypatch):

    monkeypatch.setenv('KERNELWIRE_USERNAME', 'override')
    monkeypatch.setattr(getpass, 'getuser', lambda: 'alice')

    assert config._username() == 'override'


def test_username_login(monkeypatch):

    monkeypatch.delenv('KERNELWIRE_USERNAME', raising=False)
    monkeypatch.setattr(getpass, 'getuser', lambda: 'alice')

    assert config._username() == 'alice'


def test_username_unavailable(monkeypatch):

    def getuser():
        raise OSError('no username set in the environment')

    monkeypatch.delenv('KERNELWIRE_USERNAME', raising=False)
    monkeypatch.setattr(getpass, 'getuser', getuser)

    assert config._username() == ''


def test_username_resolved_once():
    assert isinstance(config.username, str)


def test_session_default(monkeypatch):

    monkeypatch.setattr(config, 'username', 'bob')
    session = Session('key')
    assert session.username == 'bob'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
