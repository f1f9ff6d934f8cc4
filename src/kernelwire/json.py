''' Wrapper module to select the most performant available library to handle
    the equivalent of :func:`json.loads` and :func:`json.dumps`. The
    KERNELWIRE_JSON environment variable, if set, names the one library
    that should be used.
'''

from . import config

# The business about conditionally importing the libraries is intended to
# avoid importing less efficient libraries if they are not available.

msgspec = None
orjson = None
json = None

_preferred = config.json_backend

if _preferred in (None, 'msgspec'):
    try:
        import msgspec
    except ImportError:
        if _preferred is not None:
            raise

if msgspec is None and _preferred in (None, 'orjson'):
    try:
        import orjson
    except ImportError:
        if _preferred is not None:
            raise

if msgspec is None and orjson is None:
    import json


# The msgspec 'encode' operation returns bytes, as does orjson.dumps. To
# maintain alignment all 'dumps' methods need to do so as well.

def json_dumps(*args, **kwargs):
    kwargs.setdefault('separators', (',', ':'))
    kwargs.setdefault('allow_nan', False)
    return json.dumps(*args, **kwargs).encode()


if msgspec is not None:
    backend = 'msgspec'
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    decode_errors = (msgspec.DecodeError,)
elif orjson is not None:
    backend = 'orjson'
    dumps = orjson.dumps
    loads = orjson.loads
    decode_errors = (orjson.JSONDecodeError,)
else:
    backend = 'json'
    dumps = json_dumps
    loads = json.loads
    decode_errors = (ValueError,)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
