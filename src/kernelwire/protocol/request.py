""" Content records for every request kind a client sends to a kernel. Each
    :class:`Content` subclass validates its arguments at construction, so an
    invalid record never exists; :func:`Content.content` produces the plain
    mapping that is handed to the JSON codec. The module-level builder
    functions are shortcuts that return that mapping directly.

    Validation failures raise :class:`InvalidArgumentError`, naming the
    offending field.
"""

import operator

from .fields import RANGE, SEARCH, TAIL
from .errors import InvalidArgumentError


def _string(field, value):
    if isinstance(value, str):
        return value
    raise InvalidArgumentError(field, 'expected a string, got ' + type(value).__name__)


def _integer(field, value):
    """ Resolve *value* to an integer. Anything implementing __index__ is
        accepted, which allows position markers and similar objects to stand
        in for a plain offset; booleans are rejected.
    """

    if isinstance(value, bool):
        raise InvalidArgumentError(field, 'expected an integer, got bool')

    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(field, 'expected an integer, got ' + type(value).__name__)


def _boolean(field, value):
    if isinstance(value, bool):
        return value
    raise InvalidArgumentError(field, 'expected a boolean, got ' + type(value).__name__)


def _mapping(field, value):
    if value is None:
        return dict()

    try:
        items = value.items()
    except AttributeError:
        raise InvalidArgumentError(field, 'expected a mapping, got ' + type(value).__name__)

    mapping = dict()
    for key, item in items:
        if not isinstance(key, str):
            raise InvalidArgumentError(field, 'mapping keys must be strings, got ' + type(key).__name__)
        mapping[key] = item

    return mapping



class Content:
    """ Base class for request content records. Subclasses set *msg_type*
        and populate the *fields* tuple, listing the attributes that make up
        the content mapping, in wire order.

        :ivar msg_type: The wire msg_type for messages carrying this content.
    """

    msg_type = None
    fields = ()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.content() == other.content()


    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.content())


    def content(self):
        """ Return the content as a dictionary, ready for the JSON codec. """

        content = dict()

        for field in self.fields:
            content[field] = getattr(self, field)

        return content


# end of class Content



class ExecuteRequest(Content):

    msg_type = 'execute_request'
    fields = ('code', 'silent', 'store_history', 'user_expressions', 'allow_stdin', 'stop_on_error')

    def __init__(self, code, silent=False, store_history=True, user_expressions=None, allow_stdin=True, stop_on_error=False):

        self.code = _string('code', code)
        self.silent = _boolean('silent', silent)
        self.store_history = _boolean('store_history', store_history)
        self.user_expressions = _mapping('user_expressions', user_expressions)
        self.allow_stdin = _boolean('allow_stdin', allow_stdin)
        self.stop_on_error = _boolean('stop_on_error', stop_on_error)


# end of class ExecuteRequest



class InspectRequest(Content):

    msg_type = 'inspect_request'
    fields = ('code', 'cursor_pos', 'detail_level')

    def __init__(self, code, pos, detail=0):

        self.code = _string('code', code)
        self.cursor_pos = _integer('pos', pos)

        detail = _integer('detail', detail)
        if detail not in (0, 1):
            raise InvalidArgumentError('detail', 'must be 0 or 1, got ' + repr(detail))

        self.detail_level = detail


# end of class InspectRequest



class CompleteRequest(Content):

    msg_type = 'complete_request'
    fields = ('code', 'cursor_pos')

    def __init__(self, code, pos):
        self.code = _string('code', code)
        self.cursor_pos = _integer('pos', pos)


# end of class CompleteRequest



class HistoryRequest(Content):
    """ A request for entries from the kernel's input history. The fields
        that are required depend on the *hist_access_type*:

        ``range``
            *session*, *start*, and *stop*, all integers.

        ``tail``
            *n*, an integer.

        ``search``
            *pattern*, a string, and *n*, an integer.
    """

    msg_type = 'history_request'

    access_types = {
        RANGE: ('session', 'start', 'stop'),
        TAIL: ('n',),
        SEARCH: ('pattern', 'n'),
    }

    def __init__(self, hist_access_type, output=False, raw=True, unique=False, session=None, start=None, stop=None, n=None, pattern=None):

        try:
            required = self.access_types[hist_access_type]
        except (KeyError, TypeError):
            raise InvalidArgumentError('hist_access_type', 'must be one of range, tail, or search, got ' + repr(hist_access_type))

        self.hist_access_type = hist_access_type
        self.output = _boolean('output', output)
        self.raw = _boolean('raw', raw)
        self.unique = _boolean('unique', unique)

        supplied = dict(session=session, start=start, stop=stop, n=n, pattern=pattern)

        for field in required:
            value = supplied[field]

            if value is None:
                raise InvalidArgumentError(field, 'required for hist_access_type ' + repr(hist_access_type))

            if field == 'pattern':
                value = _string(field, value)
            else:
                value = _integer(field, value)

            setattr(self, field, value)

        self.fields = ('output', 'raw', 'hist_access_type') + required + ('unique',)


# end of class HistoryRequest



class IsCompleteRequest(Content):

    msg_type = 'is_complete_request'
    fields = ('code',)

    def __init__(self, code):
        self.code = _string('code', code)


# end of class IsCompleteRequest



class CommInfoRequest(Content):

    msg_type = 'comm_info_request'

    def __init__(self, target_name=None):

        if target_name is None:
            self.target_name = None
        else:
            self.target_name = _string('target_name', target_name)
            self.fields = ('target_name',)


# end of class CommInfoRequest



class ShutdownRequest(Content):

    msg_type = 'shutdown_request'
    fields = ('restart',)

    def __init__(self, restart):
        self.restart = _boolean('restart', restart)


# end of class ShutdownRequest



class InputReply(Content):

    msg_type = 'input_reply'
    fields = ('value',)

    def __init__(self, value):
        self.value = _string('value', value)


# end of class InputReply



class KernelInfoRequest(Content):
    msg_type = 'kernel_info_request'


class InterruptRequest(Content):
    msg_type = 'interrupt_request'



class CommOpen(Content):

    msg_type = 'comm_open'
    fields = ('comm_id', 'target_name', 'data')

    def __init__(self, comm_id, target_name, data=None):
        self.comm_id = _string('comm_id', comm_id)
        self.target_name = _string('target_name', target_name)
        self.data = _mapping('data', data)


# end of class CommOpen



class CommMsg(Content):

    msg_type = 'comm_msg'
    fields = ('comm_id', 'data')

    def __init__(self, comm_id, data=None):
        self.comm_id = _string('comm_id', comm_id)
        self.data = _mapping('data', data)


# end of class CommMsg



class CommClose(CommMsg):
    msg_type = 'comm_close'


# Builder shortcuts, one per request kind.

def execute_request(code, silent=False, store_history=True, user_expressions=None, allow_stdin=True, stop_on_error=False):
    return ExecuteRequest(code, silent, store_history, user_expressions, allow_stdin, stop_on_error).content()


def inspect_request(code, pos, detail=0):
    return InspectRequest(code, pos, detail).content()


def complete_request(code, pos):
    return CompleteRequest(code, pos).content()


def history_request(hist_access_type, **kwargs):
    return HistoryRequest(hist_access_type, **kwargs).content()


def is_complete_request(code):
    return IsCompleteRequest(code).content()


def comm_info_request(target_name=None):
    return CommInfoRequest(target_name).content()


def shutdown_request(restart):
    return ShutdownRequest(restart).content()


def input_reply(value):
    return InputReply(value).content()


def kernel_info_request():
    return KernelInfoRequest().content()


def interrupt_request():
    return InterruptRequest().content()


def comm_open(comm_id, target_name, data=None):
    return CommOpen(comm_id, target_name, data).content()


def comm_msg(comm_id, data=None):
    return CommMsg(comm_id, data).content()


def comm_close(comm_id, data=None):
    return CommClose(comm_id, data).content()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
