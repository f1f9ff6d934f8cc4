from . import errors
from . import fields
from . import session
from . import types
from . import codec
from . import signer
from . import framing
from . import request
from . import message
from . import accessors

from .errors import (
    KernelWireError,
    InvalidArgumentError,
    MissingDelimiterError,
    MalformedMessageError,
    SignatureError,
    UnsignedMessageError,
    InvalidSignatureError,
    DecodeError,
)
from .fields import DELIMITER, PROTOCOL_VERSION
from .session import Session, new_v4
from .types import MsgType, validate_kinds
from .framing import split_identities, assemble
from .message import Message, build_header, encode_message, encode_request, decode_message
from .accessors import (
    message_id,
    message_type,
    message_content,
    parent_message_id,
    message_time,
    message_data,
    is_idle_status,
    is_busy_status,
)


"""
kernelwire Protocol Layer
=========================

This package implements the kernel messaging protocol (version 5.3): the
construction, signing, framing, verification, and decoding of messages
exchanged between a client and a kernel.

The protocol layer MUST NOT own a socket; it only converts between
logical messages and frame lists.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

User Code
    │
    ▼
Request Builders (request.py)
    One validated content record per request kind
    - ExecuteRequest, InspectRequest, HistoryRequest, ...
    - execute_request(), history_request(), ...

    │
    ▼
Message Builder (message.py)
    - build_header()
    - encode_message() / decode_message()
    - Message (decoded, read-only by convention)

    │
    ▼
Codec / Signer (codec.py, signer.py)
    JSON parts <-> bytes, HMAC-SHA256 over the four parts

    │
    ▼
Framing (framing.py)
    identities, <IDS|MSG>, signature, 4 JSON parts, buffers

    │
    ▼
Field Vocabulary (fields.py) / Registry (types.py)
    Canonical names and the closed set of receivable msg_types

---------------------------------------------------------------------

Below the Protocol Layer (for context)
--------------------------------------

Transport Layer (kernelwire.transport)
    Moves frame lists over a caller-owned socket
    - ZeroMQ

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
