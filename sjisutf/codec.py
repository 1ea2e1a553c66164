"""
Shift_JIS <-> UTF-8 conversion.

Both directions run in one of two modes:

- :data:`STRICT`: the first unconvertible unit raises a subclass of
  :class:`~sjisutf.exception.ConversionError`, no output is returned.
- :class:`Substitute`: each unconvertible unit is replaced by the given
  value and conversion continues.

On decode, an invalid double-byte unit is replaced and only its *first*
byte is skipped, so that a trail byte which begins the next valid unit is
not lost.  On encode, a 4-byte (non-BMP) UTF-8 sequence is replaced and
skipped whole, continuation bytes included.
"""
# std imports
import collections
import logging

# local
from sjisutf.classify import is_sjis_half_kana
from sjisutf.exception import (InvalidByteSequence,
                               UnsupportedCodepoint,
                               UnsupportedUTF8Sequence)
from sjisutf.tables import is_valid_sjis, sjis_to_unicode, unicode_to_sjis

log = logging.getLogger(__name__)

#: Scalar of half-width byte 0xa0, half-width byte ``c`` decodes to
#: ``HALF_KANA_BASE + c - 0xa0``.
HALF_KANA_BASE = 0xff60

#: Highest scalar encoded as a single half-width byte.
HALF_KANA_LAST = 0xff9f


class Strict(object):

    """ Conversion mode that fails on the first unconvertible unit. """

    __slots__ = ()

    def __repr__(self):
        return 'STRICT'


#: The strict conversion mode.
STRICT = Strict()


class Substitute(collections.namedtuple('Substitute', ['value'])):

    """
    Conversion mode replacing each unconvertible unit by ``value``.

    For :func:`decode`, ``value`` is a unicode scalar of the BMP, given as
    an int or a single character.  For :func:`encode`, ``value`` is a single
    byte, given as an int, a bytes of length 1, or a single character of
    ordinal less than 256.
    """

    __slots__ = ()

    def __new__(cls, value):
        if isinstance(value, (str, bytes, bytearray)):
            if len(value) != 1:
                raise ValueError('substitution must be a single character '
                                 'or byte, got {0!r}'.format(value))
        elif not isinstance(value, int):
            raise ValueError('substitution must be int, str, or bytes, '
                             'got {0!r}'.format(value))
        return super(Substitute, cls).__new__(cls, value)


#: Result of :func:`decode_report` and :func:`encode_report`.
Conversion = collections.namedtuple('Conversion', ['output', 'substitutions'])


def _substitution(mode, limit):
    """ Return int value of ``mode``, or None when strict. """
    if mode is STRICT:
        return None
    if not isinstance(mode, Substitute):
        raise TypeError('mode must be STRICT or Substitute, '
                        'got {0!r}'.format(mode))
    value = mode.value
    if isinstance(value, (bytes, bytearray)):
        value = value[0]
    elif isinstance(value, str):
        value = ord(value)
    if not 0 <= value <= limit:
        raise ValueError('substitution out of range 0-{0:#x}: {1!r}'
                         .format(limit, mode.value))
    return value


def _put_utf8(out, codepoint):
    """ Append BMP scalar ``codepoint`` to bytearray ``out`` as UTF-8. """
    if codepoint <= 0x7f:
        out.append(codepoint)
    elif codepoint <= 0x7ff:
        out.append(0xc0 | codepoint >> 6)
        out.append(0x80 | codepoint & 0x3f)
    else:
        out.append(0xe0 | codepoint >> 12)
        out.append(0x80 | codepoint >> 6 & 0x3f)
        out.append(0x80 | codepoint & 0x3f)


def decode_report(data, mode=STRICT):
    """
    Convert Shift_JIS bytes ``data`` to UTF-8.

    :rtype: Conversion
    :raises InvalidByteSequence: invalid unit in strict mode.
    """
    substitution = _substitution(mode, 0xffff)
    data = bytes(data)
    out = bytearray()
    substitutions = 0
    pos, size = 0, len(data)
    while pos < size:
        c1 = data[pos]
        if c1 <= 0x7f:
            out.append(c1)
            pos += 1
            continue

        if is_sjis_half_kana(c1):
            codepoint = HALF_KANA_BASE + c1 - 0xa0
            pos += 1
        else:
            c2 = data[pos + 1] if pos + 1 < size else None
            if c2 is not None and is_valid_sjis(c1, c2):
                codepoint = sjis_to_unicode(c1, c2)
                pos += 2
            elif substitution is None:
                raise InvalidByteSequence(c1, c2, pos)
            else:
                log.debug('substituted invalid sequence %02x at offset %d',
                          c1, pos)
                codepoint = substitution
                substitutions += 1
                pos += 1
        _put_utf8(out, codepoint)
    return Conversion(bytes(out), substitutions)


def encode_report(data, mode=STRICT):
    """
    Convert UTF-8 bytes ``data`` to Shift_JIS.

    Continuation bytes are extracted by masking only; malformed
    continuation bytes are not detected.

    :rtype: Conversion
    :raises UnsupportedUTF8Sequence: 4-byte or truncated sequence in strict
        mode.
    :raises UnsupportedCodepoint: unmappable scalar in strict mode.
    """
    substitution = _substitution(mode, 0xff)
    data = bytes(data)
    out = bytearray()
    substitutions = 0
    pos, size = 0, len(data)
    while pos < size:
        lead = data[pos]
        if lead <= 0x7f:
            out.append(lead)
            pos += 1
            continue

        width = 2 if lead <= 0xdf else 3 if lead <= 0xef else 0
        if not width or pos + width > size:
            if substitution is None:
                raise UnsupportedUTF8Sequence(lead, pos)
            log.debug('substituted utf-8 sequence %02x at offset %d',
                      lead, pos)
            out.append(substitution)
            substitutions += 1
            pos += 1
            while pos < size and data[pos] & 0xc0 == 0x80:
                pos += 1
            continue

        if width == 2:
            codepoint = (lead & 0x1f) << 6 | data[pos + 1] & 0x3f
        else:
            codepoint = ((lead & 0x0f) << 12 | (data[pos + 1] & 0x3f) << 6
                         | data[pos + 2] & 0x3f)
        start, pos = pos, pos + width

        if HALF_KANA_BASE < codepoint <= HALF_KANA_LAST:
            out.append(codepoint - HALF_KANA_BASE + 0xa0)
            continue

        code = unicode_to_sjis(codepoint)
        if code:
            out.append(code >> 8)
            out.append(code & 0xff)
        elif substitution is None:
            raise UnsupportedCodepoint(codepoint, start)
        else:
            log.debug('substituted U+%04X at offset %d', codepoint, start)
            out.append(substitution)
            substitutions += 1
    return Conversion(bytes(out), substitutions)


def decode(data, mode=STRICT):
    """ Convert Shift_JIS bytes ``data`` to UTF-8 bytes. """
    return decode_report(data, mode).output


def encode(data, mode=STRICT):
    """ Convert UTF-8 bytes ``data`` to Shift_JIS bytes. """
    return encode_report(data, mode).output


def sjis2utf(data, mode=STRICT):
    """ Return Shift_JIS bytes ``data`` as a unicode string. """
    return decode(data, mode).decode('utf-8', 'surrogatepass')


def utf2sjis(text, mode=STRICT):
    """ Return unicode string ``text`` as Shift_JIS bytes. """
    return encode(text.encode('utf-8', 'surrogatepass'), mode)
