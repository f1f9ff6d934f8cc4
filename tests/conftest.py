import pytest
import zmq

import kernelwire


@pytest.fixture
def signed_session():
    return kernelwire.protocol.session.Session(key='abc123', username='tester')


@pytest.fixture
def unsigned_session():
    return kernelwire.protocol.session.Session(username='tester')


@pytest.fixture(params=('msgspec', 'orjson', 'json'))
def json_backend(request, monkeypatch):
    """ Swap the active JSON library for the duration of a test. Backends
        that are not installed are skipped.
    """

    name = request.param

    if name == 'msgspec':
        msgspec = pytest.importorskip('msgspec')
        dumps = msgspec.json.Encoder().encode
        loads = msgspec.json.Decoder().decode
        errors = (msgspec.DecodeError,)
    elif name == 'orjson':
        orjson = pytest.importorskip('orjson')
        dumps = orjson.dumps
        loads = orjson.loads
        errors = (orjson.JSONDecodeError,)
    else:
        import json
        monkeypatch.setattr(kernelwire.json, 'json', json)
        dumps = kernelwire.json.json_dumps
        loads = json.loads
        errors = (ValueError,)

    monkeypatch.setattr(kernelwire.json, 'backend', name)
    monkeypatch.setattr(kernelwire.json, 'dumps', dumps)
    monkeypatch.setattr(kernelwire.json, 'loads', loads)
    monkeypatch.setattr(kernelwire.json, 'decode_errors', errors)

    return name


@pytest.fixture
def zmq_pair():

    context = zmq.Context()
    address = 'inproc://kernelwire-%d' % (id(context))

    server = context.socket(zmq.PAIR)
    server.setsockopt(zmq.LINGER, 0)
    server.bind(address)

    client = context.socket(zmq.PAIR)
    client.setsockopt(zmq.LINGER, 0)
    client.connect(address)

    yield client, server

    client.close()
    server.close()
    context.term()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
