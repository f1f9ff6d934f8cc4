""" Configuration values for kernelwire. Everything here is read once, from
    the environment, at import time; callers may also assign new values
    directly before creating any :class:`kernelwire.protocol.session.Session`
    instances.

    KERNELWIRE_USERNAME
        The username placed in the header of every outbound message, for
        any session that does not specify its own. Defaults to the login
        name of the user running the process, or an empty string if it
        cannot be determined.

    KERNELWIRE_JSON
        Force a specific JSON library: one of 'msgspec', 'orjson', or
        'json'. By default the fastest available library is used.
"""

import getpass
import os

json_backends = ('msgspec', 'orjson', 'json')


def _json_backend():

    try:
        backend = os.environ['KERNELWIRE_JSON']
    except KeyError:
        return None

    backend = backend.strip().lower()

    if backend == '':
        return None

    if backend not in json_backends:
        raise ImportError('unknown KERNELWIRE_JSON backend: ' + repr(backend))

    return backend


def _username():

    try:
        return os.environ['KERNELWIRE_USERNAME']
    except KeyError:
        pass

    # getpass raises KeyError (older releases) or OSError when the uid has
    # no password database entry, as in some containers.

    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ''


username = _username()
json_backend = _json_backend()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
