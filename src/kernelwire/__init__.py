""" Python implementation of the kernel messaging protocol. This includes
    session and signing-key management, builders for every request a client
    sends to a kernel, and the encoding, signing, framing, verification, and
    decoding of the multipart messages exchanged with the kernel.
"""

# Utility components.

from . import config
from . import json

# The protocol layer, and the transport helpers built on it.

from . import protocol
from . import transport

# Primary public-facing interfaces.

from .protocol import Session, Message, MsgType
from .protocol import encode_message, encode_request, decode_message, split_identities
from .protocol.errors import *

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
