"""Send and receive protocol messages over a caller-owned ZeroMQ socket.

The socket is never created, configured, or closed here. ZeroMQ sockets
are not thread-safe; the caller must serialize access to each socket.

ROUTER sockets prepend identity frames on receipt; those are returned to
the caller so that a reply can be routed back with the same identities.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import zmq

from ...protocol import framing
from ...protocol.message import Message, decode_message, encode_message, encode_request
from ...protocol.session import Session
from ..base import TransportTimeout

logger = logging.getLogger(__name__)


def send(socket: zmq.Socket, session: Session, msg_type: str, **kwargs) -> str:
    """Encode a message and send it as a single multipart message.

    Keyword arguments are passed to :func:`encode_message`. Returns the
    id of the message sent.
    """

    msg_id, frames = encode_message(session, msg_type, **kwargs)
    socket.send_multipart(frames)
    return msg_id


def send_request(socket: zmq.Socket, session: Session, request, **kwargs) -> str:
    """Send a :class:`Content` record under its own msg_type."""

    msg_id, frames = encode_request(session, request, **kwargs)
    socket.send_multipart(frames)
    return msg_id


def recv(socket: zmq.Socket, session: Session, flags: int = 0) -> Tuple[List[bytes], Message]:
    """Receive, verify, and decode the next message on *socket*.

    Returns the identity frames and the decoded :class:`Message`. Any
    protocol error propagates; the offending message has already been
    consumed from the socket.
    """

    frames = socket.recv_multipart(flags)
    idents, rest = framing.split_identities(frames)
    message = decode_message(session, rest)
    return idents, message


def poll_recv(
    socket: zmq.Socket, session: Session, timeout: Optional[float] = None
) -> Tuple[List[bytes], Message]:
    """Wait up to *timeout* seconds for a message, then :func:`recv` it.

    Raises :class:`TransportTimeout` if nothing arrives in time. A *timeout*
    of None blocks indefinitely.
    """

    if timeout is None:
        milliseconds = None
    else:
        milliseconds = int(timeout * 1000)

    poller = zmq.Poller()
    poller.register(socket, zmq.POLLIN)

    ready = dict(poller.poll(milliseconds))

    if socket not in ready:
        logger.debug("no message within %.2fs", timeout)
        raise TransportTimeout(f"no message received in {timeout:.2f}s")

    return recv(socket, session, zmq.NOBLOCK)
