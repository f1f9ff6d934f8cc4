""" HMAC-SHA256 signing and verification of the four JSON parts of a
    message. The signature covers the raw concatenation of the parts; the
    identities, the delimiter, and any binary buffers are not signed.

    No record of previously seen signatures is kept, so a replayed message
    with a valid signature will be accepted.
"""

import hashlib
import hmac

from .errors import InvalidArgumentError, InvalidSignatureError, UnsignedMessageError
from .fields import JSON_PARTS


def sign(session, parts):
    """ Return the lowercase hexadecimal signature for the sequence of four
        byte strings in *parts*, or an empty string if the *session* has no
        signing key.
    """

    if not session.signed:
        return ''

    if len(parts) != len(JSON_PARTS):
        raise InvalidArgumentError('parts', 'expected %d JSON parts, got %d' % (len(JSON_PARTS), len(parts)))

    digest = hmac.new(session.key.encode('utf-8'), digestmod=hashlib.sha256)

    for part in parts:
        digest.update(part)

    return digest.hexdigest()


def verify(session, parts, signature):
    """ Confirm that *signature* is valid for *parts*. Verification is
        skipped entirely if the *session* has no signing key; otherwise
        :class:`UnsignedMessageError` is raised for an empty signature, and
        :class:`InvalidSignatureError` for a mismatch. Returns True if the
        signature is acceptable.
    """

    if not session.signed:
        return True

    if signature is None or len(signature) == 0:
        raise UnsignedMessageError('signing is enabled but the message has no signature')

    try:
        signature = signature.encode('ascii')
    except AttributeError:
        signature = bytes(signature)
    except UnicodeEncodeError:
        raise InvalidSignatureError('signature contains non-ASCII characters')

    expected = sign(session, parts).encode('ascii')

    if hmac.compare_digest(expected, signature):
        return True

    raise InvalidSignatureError('message signature does not match its content')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
