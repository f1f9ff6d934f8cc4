import re
import uuid

import pytest

import kernelwire

v4_pattern = re.compile('^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$')


def test_new_v4():

    generated = set()

    for count in range(1000):
        id = kernelwire.protocol.session.new_v4()
        assert len(id) == 36
        assert v4_pattern.match(id)
        generated.add(id)

    assert len(generated) == 1000


def test_new_v4_fixed_bytes(monkeypatch):

    # The version and variant bits are set bytewise; the result must match
    # the standard library's construction for the same random bytes, which
    # does not depend on the host byte order.

    for raw in (b'\x00' * 16, b'\xff' * 16, bytes(range(16)), bytes(range(240, 256))):
        monkeypatch.setattr(kernelwire.protocol.session.os, 'urandom', lambda size, raw=raw: raw)
        id = kernelwire.protocol.session.new_v4()

        assert v4_pattern.match(id)
        assert id == str(uuid.UUID(bytes=raw, version=4))

    monkeypatch.setattr(kernelwire.protocol.session.os, 'urandom', lambda size: b'\x00' * 16)
    assert kernelwire.protocol.session.new_v4() == '00000000-0000-4000-8000-000000000000'

    monkeypatch.setattr(kernelwire.protocol.session.os, 'urandom', lambda size: b'\xff' * 16)
    assert kernelwire.protocol.session.new_v4() == 'ffffffff-ffff-4fff-bfff-ffffffffffff'


def test_session_basics():

    session = kernelwire.protocol.session.Session()
    assert session.key == ''
    assert session.signed == False
    assert v4_pattern.match(session.id)

    other = kernelwire.protocol.session.Session('secret')
    assert other.key == 'secret'
    assert other.signed == True
    assert other.id != session.id


def test_session_bytes_key():

    session = kernelwire.protocol.session.Session(b'secret')
    assert session.key == 'secret'

    with pytest.raises(kernelwire.InvalidArgumentError):
        kernelwire.protocol.session.Session(b'\xff\xfe')


def test_session_bad_key():

    for bad in (42, 1.5, ['key'], object()):
        with pytest.raises(kernelwire.InvalidArgumentError) as raised:
            kernelwire.protocol.session.Session(bad)
        assert raised.value.field == 'key'


def test_session_immutable():

    session = kernelwire.protocol.session.Session('secret')

    with pytest.raises(AttributeError):
        session.key = 'other'

    with pytest.raises(AttributeError):
        session.id = 'other'

    with pytest.raises(AttributeError):
        del session.username

    assert session.key == 'secret'


def test_session_username(monkeypatch):

    monkeypatch.setattr(kernelwire.config, 'username', 'configured')

    session = kernelwire.protocol.session.Session()
    assert session.username == 'configured'

    session = kernelwire.protocol.session.Session(username='explicit')
    assert session.username == 'explicit'

    with pytest.raises(kernelwire.InvalidArgumentError):
        kernelwire.protocol.session.Session(username=7)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
