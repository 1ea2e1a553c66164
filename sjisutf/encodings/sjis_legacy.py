"""
Shift_JIS codec of the legacy game archive tools.

Once :mod:`sjisutf` is imported::

    >>> b'\\x82\\xa0'.decode('sjis_legacy')
    'あ'
    >>> '\\uff71'.encode('sjis_legacy')
    b'\\xb1'

Error handlers ``strict`` and ``replace`` are supported.  Replacement is
U+FFFD on decode and ``?`` on encode.  There is no incremental or stream
support, whole strings are converted at once.
"""
# std imports
import codecs

# local
from sjisutf import codec
from sjisutf.exception import ConversionError

NAME = 'sjis_legacy'

#: Replacement values of the ``replace`` error handler.
DECODE_REPLACEMENT = u'\ufffd'
ENCODE_REPLACEMENT = b'?'


def _mode(errors, replacement):
    if errors == 'strict':
        return codec.STRICT
    if errors == 'replace':
        return codec.Substitute(replacement)
    raise ValueError('{0} codec does not support error handler {1!r}'
                     .format(NAME, errors))


# Codec APIs


class Codec(codecs.Codec):

    def decode(self, input, errors='strict'):
        mode = _mode(errors, DECODE_REPLACEMENT)
        data = bytes(input)
        try:
            text = codec.sjis2utf(data, mode)
        except ConversionError as err:
            raise UnicodeDecodeError(
                NAME, data, err.offset, err.offset + 1, str(err)) from err
        return text, len(data)

    def encode(self, input, errors='strict'):
        mode = _mode(errors, ENCODE_REPLACEMENT)
        utf8 = input.encode('utf-8', 'surrogatepass')
        try:
            data = codec.encode(utf8, mode)
        except ConversionError as err:
            start = len(utf8[:err.offset].decode('utf-8', 'surrogatepass'))
            raise UnicodeEncodeError(
                NAME, input, start, start + 1, str(err)) from err
        return data, len(input)


# encodings module API

def getaliases():
    return (
        'sjisutf',
        'legacy_sjis',
    )


def getregentry():
    return codecs.CodecInfo(
        name=NAME,
        encode=Codec().encode,
        decode=Codec().decode,
    )
