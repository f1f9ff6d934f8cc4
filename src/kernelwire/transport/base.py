"""Transport errors.

These live outside :mod:`kernelwire.protocol` so the protocol remains
transport-agnostic.
"""

from __future__ import annotations

from ..protocol.errors import KernelWireError


class TransportError(KernelWireError):
    """Base class for all transport-layer errors."""


class TransportTimeout(TransportError):
    """No message arrived within the requested time."""
