import datetime

import kernelwire
from kernelwire.protocol import accessors


def status(state):
    return {'msg_type': 'status', 'content': {'execution_state': state}}


def test_is_idle_status():

    assert accessors.is_idle_status(status('idle')) == True

    assert accessors.is_idle_status(status('busy')) == False
    assert accessors.is_idle_status(status('starting')) == False
    assert accessors.is_idle_status({'msg_type': 'status'}) == False
    assert accessors.is_idle_status({'msg_type': 'status', 'content': {}}) == False
    assert accessors.is_idle_status({'msg_type': 'status', 'content': None}) == False
    assert accessors.is_idle_status({'msg_type': 'stream', 'content': {'execution_state': 'idle'}}) == False
    assert accessors.is_idle_status({'msg_type': 'execute_reply', 'content': {'execution_state': 'idle'}}) == False
    assert accessors.is_idle_status({}) == False


def test_is_busy_status():

    assert accessors.is_busy_status(status('busy')) == True
    assert accessors.is_busy_status(status('idle')) == False


def test_decoded_message(signed_session):

    request_id, frames = kernelwire.protocol.message.encode_message(signed_session, 'execute_request')
    idents, rest = kernelwire.protocol.framing.split_identities(frames)
    parent = kernelwire.protocol.message.decode_message(signed_session, rest)

    msg_id, frames = kernelwire.protocol.message.encode_message(signed_session, 'status',
                        content={'execution_state': 'idle'}, parent_header=parent)
    idents, rest = kernelwire.protocol.framing.split_identities(frames)
    decoded = kernelwire.protocol.message.decode_message(signed_session, rest)

    assert accessors.message_id(decoded) == msg_id
    assert accessors.message_type(decoded) == 'status'
    assert accessors.parent_message_id(decoded) == request_id
    assert accessors.parent_message_id(parent) is None
    assert accessors.is_idle_status(decoded) == True
    assert accessors.message_content(decoded) == {'execution_state': 'idle'}

    when = accessors.message_time(decoded)
    assert isinstance(when, datetime.datetime)
    assert when.tzinfo is not None

    now = datetime.datetime.now(datetime.timezone.utc)
    assert abs((now - when).total_seconds()) < 60


def test_missing_fields():

    assert accessors.message_id({}) is None
    assert accessors.message_type({}) is None
    assert accessors.parent_message_id({}) is None
    assert accessors.parent_message_id({'parent_header': {}}) is None
    assert accessors.parent_message_id({'parent_header': {'msg_id': 'p'}}) == 'p'
    assert accessors.message_content({}) == {}
    assert accessors.message_time({}) is None
    assert accessors.message_time({'header': {'msg_id': '1'}}) is None
    assert accessors.message_id(None) is None


def test_message_time():

    when = accessors.message_time({'header': {'date': '2024-05-01T12:30:15+02:00'}})
    assert when == datetime.datetime(2024, 5, 1, 10, 30, 15, tzinfo=datetime.timezone.utc)

    when = accessors.message_time({'header': {'date': '2024-05-01T12:30:15.123456Z'}})
    assert when.microsecond == 123456


def test_message_time_unparseable():

    for bad in ('garbage', '2024-13-45T99:99:99', 5, 1.5, ['2024-05-01'], {'date': 'x'}):
        assert accessors.message_time({'header': {'date': bad}}) is None


def test_message_data():

    message = {'msg_type': 'display_data', 'content': {'data': {'text/plain': '42', 'image/png': 'aGk='}}}

    assert accessors.message_data(message, 'text/plain') == '42'
    assert accessors.message_data(message, 'image/png') == 'aGk='
    assert accessors.message_data(message, 'text/html') is None
    assert accessors.message_data(status('idle'), 'text/plain') is None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
