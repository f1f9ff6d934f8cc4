""" The registry of message types a caller may listen for. Each entry pairs
    a kind tag, such as 'execute-reply', with the msg_type string used on the
    wire, such as 'execute_reply'. The registry is consulted only to validate
    what a caller expects to receive; the decoder itself accepts any msg_type.
"""

import enum

from .errors import InvalidArgumentError


class MsgType(str, enum.Enum):
    """ Message types that can arrive from a kernel. The enum value is the
        wire msg_type; :attr:`kind` is the corresponding kind tag.
    """

    EXECUTE_RESULT = 'execute_result'
    EXECUTE_REPLY = 'execute_reply'
    INSPECT_REPLY = 'inspect_reply'
    COMPLETE_REPLY = 'complete_reply'
    HISTORY_REPLY = 'history_reply'
    IS_COMPLETE_REPLY = 'is_complete_reply'
    COMM_INFO_REPLY = 'comm_info_reply'
    KERNEL_INFO_REPLY = 'kernel_info_reply'
    SHUTDOWN_REPLY = 'shutdown_reply'
    INTERRUPT_REPLY = 'interrupt_reply'
    STREAM = 'stream'
    DISPLAY_DATA = 'display_data'
    UPDATE_DISPLAY_DATA = 'update_display_data'
    EXECUTE_INPUT = 'execute_input'
    ERROR = 'error'
    STATUS = 'status'
    CLEAR_OUTPUT = 'clear_output'
    INPUT_REPLY = 'input_reply'

    @property
    def kind(self):
        return self.value.replace('_', '-')


    def __str__(self):
        return self.value


# end of class MsgType


_by_kind = dict()
_by_wire = dict()

for _member in MsgType:
    _by_kind[_member.kind] = _member
    _by_wire[_member.value] = _member

del _member


def lookup(kind):
    """ Return the :class:`MsgType` for *kind*, which may be a kind tag
        ('execute-reply'), a wire string ('execute_reply'), or a
        :class:`MsgType` member. Raise :class:`InvalidArgumentError` if the
        kind is not recognized.
    """

    if isinstance(kind, MsgType):
        return kind

    if not isinstance(kind, str):
        raise InvalidArgumentError('msg_type', 'expected a string, got ' + type(kind).__name__)

    try:
        return _by_wire[kind]
    except KeyError:
        pass

    try:
        return _by_kind[kind]
    except KeyError:
        raise InvalidArgumentError('msg_type', 'unrecognized message type: ' + repr(kind))


def to_wire(kind):
    """ Return the wire msg_type string for *kind*. """

    return lookup(kind).value


def to_kind(msg_type):
    """ Return the kind tag for the wire *msg_type*. """

    return lookup(msg_type).kind


def is_known(kind):
    try:
        lookup(kind)
    except InvalidArgumentError:
        return False
    else:
        return True


def validate_kinds(kinds):
    """ Validate a caller's declared interest in the message *kinds*, a
        single kind or an iterable of kinds. Return a frozenset of the wire
        msg_type strings; any unrecognized kind raises
        :class:`InvalidArgumentError` before anything is returned.
    """

    if isinstance(kinds, str):
        kinds = (kinds,)

    validated = set()
    for kind in kinds:
        validated.add(to_wire(kind))

    return frozenset(validated)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
