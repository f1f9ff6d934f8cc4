""" Exceptions raised by the protocol layer. Every error is raised where it
    is detected and propagates synchronously to the immediate caller; nothing
    at this layer retries, and a message that fails to decode is never
    partially returned.
"""


class KernelWireError(Exception):
    """ Base class for all kernelwire protocol errors. """


class InvalidArgumentError(KernelWireError, ValueError):
    """ A builder or encoder was handed an unusable argument. The *field*
        attribute names the offending argument, if known.
    """

    def __init__(self, field, text):
        self.field = field
        self.text = text

        if field is None:
            message = text
        else:
            message = "%s: %s" % (field, text)

        KernelWireError.__init__(self, message)


class MissingDelimiterError(KernelWireError):
    """ An inbound frame list did not contain the delimiter frame. """


class MalformedMessageError(KernelWireError):
    """ An inbound frame list is too short, or its header is incomplete. """


class SignatureError(KernelWireError):
    """ Base class for signature verification failures. """


class UnsignedMessageError(SignatureError):
    """ Signing is enabled for the session, but the message has no
        signature.
    """


class InvalidSignatureError(SignatureError):
    """ The message signature does not match its content. """


class DecodeError(KernelWireError, ValueError):
    """ A JSON part is not valid UTF-8, not valid JSON, or not an object. """


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
