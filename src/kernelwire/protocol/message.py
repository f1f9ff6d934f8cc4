""" Construction of outbound frame lists, and verification and decoding of
    inbound ones. This is where the header is built, the four JSON parts are
    encoded and signed, and the results are handed to the framing layer.
"""

import datetime
import logging

from . import codec
from . import fields
from . import framing
from . import signer
from .errors import InvalidArgumentError, MalformedMessageError, SignatureError
from .request import Content
from .session import new_v4

logger = logging.getLogger(__name__)


class Message:
    """ A decoded inbound message. The fields are available as attributes,
        and also by key, so that the accessor functions work equally well
        against a :class:`Message` or a plain dictionary of the same shape.

        :ivar header: The decoded header.
        :ivar msg_id: The message id, copied from the header.
        :ivar msg_type: The message type, copied from the header.
        :ivar parent_header: The decoded header of the originating request;
            an empty dictionary if there is none.
        :ivar metadata: The decoded metadata.
        :ivar content: The decoded content.
        :ivar buffers: A list of any binary buffers following the content.
    """

    _keys = ('header', 'msg_id', 'msg_type', 'parent_header', 'metadata', 'content', 'buffers')

    def __init__(self, header, parent_header=None, metadata=None, content=None, buffers=None):

        if parent_header is None:
            parent_header = dict()

        if metadata is None:
            metadata = dict()

        if content is None:
            content = dict()

        if buffers is None:
            buffers = list()

        self.header = header
        self.msg_id = header[fields.MSG_ID]
        self.msg_type = header[fields.MSG_TYPE]
        self.parent_header = parent_header
        self.metadata = metadata
        self.content = content
        self.buffers = buffers


    def __contains__(self, key):
        return key in self._keys


    def __getitem__(self, key):
        if key in self._keys:
            return getattr(self, key)
        raise KeyError(key)


    def __eq__(self, other):
        if not isinstance(other, Message):
            return NotImplemented
        return self.to_dict() == other.to_dict()


    def __repr__(self):
        return "Message(msg_type=%r, msg_id=%r)" % (self.msg_type, self.msg_id)


    def get(self, key, default=None):
        try:
            return self[key]
        except KeyError:
            return default


    def keys(self):
        return self._keys


    def to_dict(self):
        """ Return the message as a plain dictionary. """

        result = dict()
        for key in self._keys:
            result[key] = getattr(self, key)

        return result


# end of class Message



def _timestamp():
    """ Return the current local time in ISO-8601 format, to the second,
        with a numeric UTC offset.
    """

    now = datetime.datetime.now(datetime.timezone.utc).astimezone()
    return now.isoformat(timespec='seconds')


def build_header(session, msg_type):
    """ Build a new header for a message of type *msg_type* sent with the
        given *session*. Every header gets a new, unique msg_id.
    """

    if not isinstance(msg_type, str) or msg_type == '':
        raise InvalidArgumentError('msg_type', 'expected a non-empty string')

    header = dict()
    header[fields.MSG_ID] = new_v4()
    header[fields.MSG_TYPE] = str(msg_type)
    header[fields.VERSION] = fields.PROTOCOL_VERSION
    header[fields.USERNAME] = session.username
    header[fields.SESSION] = session.id
    header[fields.DATE] = _timestamp()

    return header


def _check_mapping(field, value):

    if value is None:
        return None

    try:
        keys = value.keys()
    except AttributeError:
        raise InvalidArgumentError(field, 'expected a mapping, got ' + type(value).__name__)

    for key in keys:
        if not isinstance(key, str):
            raise InvalidArgumentError(field, 'mapping keys must be strings, got ' + type(key).__name__)

    return value


def _check_buffers(buffers):

    if buffers is None:
        return []

    if isinstance(buffers, (bytes, bytearray, memoryview, str)):
        raise InvalidArgumentError('buffers', 'expected a sequence of byte strings, not a single value')

    checked = list()
    for buffer in buffers:
        if not isinstance(buffer, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError('buffers', 'expected bytes, got ' + type(buffer).__name__)
        checked.append(buffer)

    return checked


def encode_message(session, msg_type, idents=None, content=None, parent_header=None, metadata=None, buffers=None):
    """ Encode, sign, and frame a message. Return a tuple of the new message
        id and the complete list of frames, ready for a multipart send.

        The *content* may be a mapping or a :class:`Content` record; it is
        encoded as-is, without applying any defaults. The *parent_header*
        may be a mapping, or a decoded :class:`Message` whose header will
        be used.
    """

    if isinstance(content, Content):
        content = content.content()

    if isinstance(parent_header, Message):
        parent_header = parent_header.header

    content = _check_mapping(fields.CONTENT, content)
    metadata = _check_mapping(fields.METADATA, metadata)
    parent_header = _check_mapping(fields.PARENT_HEADER, parent_header)
    buffers = _check_buffers(buffers)

    header = build_header(session, msg_type)

    parts = (
        codec.encode_part(header, fields.HEADER),
        codec.encode_part(parent_header, fields.PARENT_HEADER),
        codec.encode_part(metadata, fields.METADATA),
        codec.encode_part(content, fields.CONTENT),
    )

    signature = signer.sign(session, parts)
    frames = framing.assemble(idents, signature, parts, buffers)

    msg_id = header[fields.MSG_ID]
    logger.debug("encoded %s %s: %d frames", msg_type, msg_id, len(frames))

    return msg_id, frames


def encode_request(session, request, **kwargs):
    """ Encode a :class:`Content` record under its own msg_type. Any
        additional keyword arguments are passed to :func:`encode_message`.
    """

    if not isinstance(request, Content):
        raise InvalidArgumentError('request', 'expected a Content record, got ' + type(request).__name__)

    return encode_message(session, request.msg_type, content=request, **kwargs)


def decode_message(session, frames):
    """ Verify and decode the protocol frames of an inbound message; that is,
        the frames following the delimiter, as returned by
        :func:`framing.split_identities`. Returns a :class:`Message`.
    """

    # The signature, then one frame per JSON part, then any buffers.

    minimum = 1 + len(fields.JSON_PARTS)

    if len(frames) < minimum:
        raise MalformedMessageError('expected at least %d protocol frames, got %d' % (minimum, len(frames)))

    frames = [framing.frame_bytes(frame) for frame in frames]

    signature = frames[0]
    parts = frames[1:minimum]
    buffers = frames[minimum:]

    try:
        signer.verify(session, parts, signature)
    except SignatureError as e:
        logger.warning("rejected message for session %s: %s", session.id, e)
        raise

    decoded = dict()
    for field, part in zip(fields.JSON_PARTS, parts):
        decoded[field] = codec.decode_part(part, field)

    header = decoded[fields.HEADER]
    parent_header = decoded[fields.PARENT_HEADER]
    metadata = decoded[fields.METADATA]
    content = decoded[fields.CONTENT]

    for field in (fields.MSG_ID, fields.MSG_TYPE):
        if field not in header:
            raise MalformedMessageError('header is missing ' + repr(field))

    message = Message(header, parent_header, metadata, content, buffers)
    logger.debug("decoded %s %s: %d buffers", message.msg_type, message.msg_id, len(buffers))

    return message


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
