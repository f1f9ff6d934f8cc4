""" Session identity and signing key for one client/kernel connection, and
    the UUID generator used for session and message identifiers.
"""

import os

from .. import config
from .errors import InvalidArgumentError


def new_v4():
    """ Return a new RFC-4122 version 4 UUID as a 36-character string.

        The version and variant bits live at fixed byte offsets in the
        16-byte sequence, so setting them bytewise is independent of the
        host byte order.
    """

    raw = bytearray(os.urandom(16))

    raw[6] = (raw[6] & 0x0F) | 0x40
    raw[8] = (raw[8] & 0x3F) | 0x80

    hexed = raw.hex()
    return '-'.join((hexed[0:8], hexed[8:12], hexed[12:16], hexed[16:20], hexed[20:32]))



class Session:
    """ The unit of trust for a single client/kernel connection. A
        :class:`Session` is immutable once created, and can be shared freely
        between threads.

        :ivar id: A version 4 UUID string, generated at construction.
        :ivar key: The HMAC signing key; an empty string disables signing.
        :ivar username: The username placed in every outbound header.
    """

    __slots__ = ('_id', '_key', '_username')

    def __init__(self, key='', username=None):

        if key is None:
            key = ''

        try:
            key.decode
        except AttributeError:
            pass
        else:
            try:
                key = key.decode('utf-8')
            except UnicodeDecodeError:
                raise InvalidArgumentError('key', 'signing key is not valid UTF-8')

        if not isinstance(key, str):
            raise InvalidArgumentError('key', 'expected a string, got ' + type(key).__name__)

        if username is None:
            username = config.username

        if not isinstance(username, str):
            raise InvalidArgumentError('username', 'expected a string, got ' + type(username).__name__)

        object.__setattr__(self, '_id', new_v4())
        object.__setattr__(self, '_key', key)
        object.__setattr__(self, '_username', username)


    def __setattr__(self, name, value):
        raise AttributeError('Session instances are immutable')


    def __delattr__(self, name):
        raise AttributeError('Session instances are immutable')


    def __repr__(self):
        return "Session(id=%r, signed=%r, username=%r)" % (self._id, self.signed, self._username)


    @property
    def id(self):
        return self._id


    @property
    def key(self):
        return self._key


    @property
    def username(self):
        return self._username


    @property
    def signed(self):
        """ True if outbound messages are signed and inbound signatures are
            checked.
        """

        return self._key != ''


# end of class Session


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
