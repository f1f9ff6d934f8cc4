"""Transport helpers built on the protocol layer."""

from .base import TransportError
from . import zmq
