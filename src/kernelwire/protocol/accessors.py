""" Read-only helpers over a decoded message. Each function accepts either
    a :class:`kernelwire.protocol.message.Message` or a plain dictionary of
    the same shape.
"""

from dateutil.parser import isoparse

from . import fields


def _get(message, key):
    try:
        return message.get(key)
    except AttributeError:
        return None


def message_id(message):
    return _get(message, fields.MSG_ID)


def message_type(message):
    return _get(message, fields.MSG_TYPE)


def message_content(message):
    content = _get(message, fields.CONTENT)
    if content is None:
        return dict()
    return content


def parent_message_id(message):
    """ Return the msg_id of the message's parent header, or None if the
        message has no parent.
    """

    parent = _get(message, fields.PARENT_HEADER)

    if not parent:
        return None

    return parent.get(fields.MSG_ID)


def message_time(message):
    """ Return the header date of the message as a timezone-aware
        :class:`datetime.datetime`, or None if there is no date, or the
        date is not an ISO-8601 string.
    """

    header = _get(message, fields.HEADER)

    if not header:
        return None

    date = header.get(fields.DATE)

    if not date or not isinstance(date, str):
        return None

    try:
        return isoparse(date)
    except (ValueError, OverflowError):
        return None


def _execution_state(message):

    if message_type(message) != 'status':
        return None

    content = _get(message, fields.CONTENT)

    try:
        return content.get(fields.EXECUTION_STATE)
    except AttributeError:
        return None


def is_idle_status(message):
    """ True if the message is a status message reporting that the kernel
        is idle.
    """

    return _execution_state(message) == fields.IDLE


def is_busy_status(message):
    return _execution_state(message) == fields.BUSY


def message_data(message, mimetype):
    """ Return the value for *mimetype* from the 'data' bundle of a
        display_data, update_display_data, execute_result, or inspect_reply
        message. None is returned if the message carries no such value.
    """

    content = message_content(message)
    data = content.get('data')

    try:
        return data.get(mimetype)
    except AttributeError:
        return None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
