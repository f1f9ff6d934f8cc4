"""ZeroMQ send/receive helpers."""

from .multipart import send, send_request, recv, poll_recv
