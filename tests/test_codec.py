import pytest

from sjisutf.codec import (STRICT, Substitute, Conversion, decode, encode,
                           decode_report, encode_report, sjis2utf, utf2sjis)
from sjisutf.exception import (ConversionError, InvalidByteSequence,
                               UnsupportedCodepoint, UnsupportedUTF8Sequence)
from sjisutf.tables import S2U, REVERSE_INDEX


# -----------------------------------------------------------
# Tests: decode (Shift_JIS -> UTF-8)
# -----------------------------------------------------------

def test_decode_ascii_identity():
    assert decode(b'A') == b'A'
    assert decode(b'hello, world\n\x00') == b'hello, world\n\x00'


def test_decode_empty():
    assert decode(b'') == b''
    assert encode(b'') == b''


def test_decode_known_hiragana():
    assert decode(b'\x82\xa0') == b'\xe3\x81\x82'


def test_decode_accepts_bytearray():
    assert decode(bytearray(b'\x82\xa0A')) == b'\xe3\x81\x82A'


def test_decode_half_width_kana():
    """ Every half-width byte decodes to 0xff60 + (byte - 0xa0). """
    for byte in range(0xa0, 0xe0):
        expected = chr(0xff60 + byte - 0xa0).encode('utf-8')
        assert decode(bytes((byte,))) == expected


def test_decode_two_byte_utf8_output():
    # 0x817e and 0x8180 are U+00D7 and U+00F7, two bytes each in UTF-8
    assert decode(b'\x81\x7e\x81\x80') == u'×÷'.encode('utf-8')


def test_decode_strict_invalid_sequence():
    with pytest.raises(InvalidByteSequence) as excinfo:
        decode(b'\xffA')
    assert excinfo.value.lead == 0xff
    assert excinfo.value.trail == 0x41
    assert excinfo.value.offset == 0
    assert 'ff 41' in str(excinfo.value)


def test_decode_strict_error_is_value_error():
    with pytest.raises(ValueError):
        decode(b'ok\xff')
    assert issubclass(InvalidByteSequence, ConversionError)


def test_decode_strict_reports_offset():
    with pytest.raises(InvalidByteSequence) as excinfo:
        decode(b'\x82\xa0abc\x85\x40')
    assert excinfo.value.offset == 5
    assert (excinfo.value.lead, excinfo.value.trail) == (0x85, 0x40)


def test_decode_truncated_lead_byte():
    with pytest.raises(InvalidByteSequence) as excinfo:
        decode(b'A\x82')
    assert excinfo.value.trail is None
    assert excinfo.value.offset == 1
    assert decode(b'A\x82', Substitute('?')) == b'A?'


def test_decode_substitute_skips_one_byte():
    """ The trail byte of an invalid unit is decoded again on its own. """
    assert decode(b'\xffA', Substitute('?')) == b'?A'


def test_decode_substitute_resynchronizes():
    # 0x8582 is unassigned; 0x82a0 following it must not be lost.
    data = b'\x85\x82\xa0'
    assert decode(data, Substitute('?')) == b'?\xe3\x81\x82'


def test_decode_substitute_non_ascii_scalar():
    assert decode(b'\xff', Substitute(u'〓')) == b'\xe3\x80\x93'
    assert decode(b'\xff', Substitute(0x3013)) == b'\xe3\x80\x93'


def test_decode_report_counts_substitutions():
    result = decode_report(b'\xff\xffA', Substitute('?'))
    assert result == Conversion(b'??A', 2)
    assert decode_report(b'\x82\xa0').substitutions == 0


# -----------------------------------------------------------
# Tests: encode (UTF-8 -> Shift_JIS)
# -----------------------------------------------------------

def test_encode_ascii_identity():
    assert encode(b'A') == b'A'


def test_encode_known_hiragana():
    assert encode(b'\xe3\x81\x82') == b'\x82\xa0'


def test_encode_half_width_kana():
    for byte in range(0xa1, 0xe0):
        utf8 = chr(0xff60 + byte - 0xa0).encode('utf-8')
        assert encode(utf8) == bytes((byte,))


def test_encode_ff60_is_not_half_width():
    """ U+FF60 lies below the half-width range, and is not mapped. """
    with pytest.raises(UnsupportedCodepoint) as excinfo:
        encode(u'\uff60'.encode('utf-8'))
    assert excinfo.value.codepoint == 0xff60


def test_encode_non_bmp_strict():
    with pytest.raises(UnsupportedUTF8Sequence) as excinfo:
        encode(u'\U0001f600'.encode('utf-8'))
    assert excinfo.value.lead == 0xf0
    assert excinfo.value.offset == 0


def test_encode_non_bmp_substitute_whole_sequence():
    assert encode(u'\U0001f600'.encode('utf-8'), Substitute('?')) == b'?'
    assert encode(u'a\U0001f600b'.encode('utf-8'), Substitute('?')) == b'a?b'


def test_encode_unsupported_codepoint():
    with pytest.raises(UnsupportedCodepoint) as excinfo:
        encode(u'xé'.encode('utf-8'))
    assert excinfo.value.codepoint == 0xe9
    assert excinfo.value.offset == 1
    assert 'U+00E9' in str(excinfo.value)


def test_encode_unsupported_codepoint_substitute():
    utf8 = u'été'.encode('utf-8')
    assert encode(utf8, Substitute(b'?')) == b'?t?'
    assert encode_report(utf8, Substitute(0x3f)).substitutions == 2


def test_encode_truncated_sequence():
    with pytest.raises(UnsupportedUTF8Sequence):
        encode(b'\xe3\x81')
    assert encode(b'A\xe3\x81', Substitute('?')) == b'A?'


def test_encode_duplicate_scalar_uses_lowest_code():
    # NOT SIGN is at 0x81ca, 0xeef9 and 0xfa54.
    assert encode(u'\uffe2'.encode('utf-8')) == b'\x81\xca'
    # ROMAN NUMERAL ONE is at 0x8754 and 0xfa4a.
    assert encode(u'\u2160'.encode('utf-8')) == b'\x87\x54'


# -----------------------------------------------------------
# Tests: round trip and text conveniences
# -----------------------------------------------------------

def test_round_trip_valid_units():
    """ Every unit whose scalar resolves back to it round-trips. """
    checked = 0
    for row, cells in enumerate(S2U):
        lead = row + 0x80
        for column, codepoint in enumerate(cells):
            trail = column + 0x40
            code = lead << 8 | trail
            if not codepoint or REVERSE_INDEX[codepoint] != code:
                continue
            unit = bytes((lead, trail))
            assert encode(decode(unit)) == unit
            checked += 1
    assert checked > 7000


def test_sjis2utf_and_utf2sjis():
    assert sjis2utf(b'\x83\x65\x83\x58\x83\x67.ald') == u'テスト.ald'
    assert utf2sjis(u'テスト.ald') == b'\x83\x65\x83\x58\x83\x67.ald'
    assert utf2sjis(u'é', Substitute('?')) == b'?'


# -----------------------------------------------------------
# Tests: conversion modes
# -----------------------------------------------------------

def test_strict_repr():
    assert repr(STRICT) == 'STRICT'


@pytest.mark.parametrize('value', ['', 'ab', b'', b'ab', 1.5, None])
def test_substitute_rejects_bad_values(value):
    with pytest.raises(ValueError):
        Substitute(value)


def test_substitute_out_of_range():
    with pytest.raises(ValueError):
        decode(b'\xff', Substitute(0x10000))
    with pytest.raises(ValueError):
        encode(b'\xf0\x9f\x98\x80', Substitute(0x100))
    with pytest.raises(ValueError):
        encode(b'\xf0\x9f\x98\x80', Substitute(u'〓'))


def test_mode_must_be_strict_or_substitute():
    with pytest.raises(TypeError):
        decode(b'A', None)
    with pytest.raises(TypeError):
        encode(b'A', '?')
