import io

from sjisutf.dump import dump, dump_lines


def _line(addr, hexbytes, text, columns=16):
    hexdump = u''.join(u'{0:02x} '.format(c) for c in hexbytes)
    hexdump += u'   ' * (columns - len(hexbytes))
    return u'{0:08x}: {1} {2}'.format(addr, hexdump, text)


def test_dump_empty():
    assert list(dump_lines(b'')) == []


def test_dump_glyphs():
    data = b'\x82\xa0\x82\xa2AB\xb1\x00'
    assert list(dump_lines(data)) == [_line(0, data, u'あいAB\uff71.')]


def test_dump_multiple_lines():
    data = bytes(range(0x30, 0x30 + 20))
    lines = list(dump_lines(data))
    assert lines == [_line(0x00, data[:16], u'0123456789:;<=>?'),
                     _line(0x10, data[16:], u'@ABC')]


def test_dump_unit_straddles_line():
    """ The trail byte on the next line is shown as a single space. """
    data = b'A' * 15 + b'\x82\xa0' + b'B'
    lines = list(dump_lines(data))
    assert lines == [_line(0x00, data[:16], u'A' * 15 + u'あ'),
                     _line(0x10, data[16:], u' B')]


def test_dump_lead_without_trail():
    assert list(dump_lines(b'\x82')) == [_line(0, b'\x82', u'.')]
    assert list(dump_lines(b'\x82\x0a')) == [_line(0, b'\x82\x0a', u'..')]


def test_dump_invalid_unit_uses_placeholder():
    # 0x8540 is classified as a unit, but unassigned.
    data = b'\x85\x40'
    assert list(dump_lines(data)) == [_line(0, data, u'.@')]


def test_dump_narrow_glyph_is_padded():
    # GREEK CAPITAL LETTER ALPHA occupies a single cell.
    data = b'\x83\x9fZ'
    assert list(dump_lines(data)) == [_line(0, data, u'\u0391 Z')]


def test_dump_columns_and_placeholder():
    data = b'\x01ab\x02'
    lines = list(dump_lines(data, columns=2, placeholder=u'_'))
    assert lines == [_line(0, b'\x01a', u'_a', columns=2),
                     _line(2, b'b\x02', u'b_', columns=2)]


def test_dump_writes_stream():
    stream = io.StringIO()
    dump(b'hi', stream)
    assert stream.getvalue() == _line(0, b'hi', u'hi') + u'\n'
