"""
Hex dump of Shift_JIS data.

Each line shows an offset, the bytes in hex, and a text column where
double-byte units and half-width kana are displayed as their glyph::

    00000000: 82 a0 82 a2 41 42 b1 00                          あいABｱ.

A double-byte glyph always occupies two terminal cells, the width of its
two bytes, so that the text column stays aligned with the hex column.
"""
# std imports
import sys

# 3rd-party
from wcwidth import wcswidth

# local
from sjisutf.classify import is_sjis_byte1, is_sjis_byte2, is_sjis_half_kana
from sjisutf.codec import Substitute, sjis2utf


def _glyph(unit, cells, mode):
    """ Return ``unit`` decoded, padded with spaces to ``cells`` wide. """
    text = sjis2utf(unit, mode)
    width = wcswidth(text)
    if width < 0:
        width = len(text)
    return text + u' ' * (cells - width)


def dump_lines(data, columns=16, placeholder=u'.'):
    """
    Generate hex dump lines of ``data``, ``columns`` bytes per line.

    Bytes without a glyph are shown as ``placeholder``.  A double-byte
    unit beginning in the last column is displayed at the end of its line,
    and the following line begins with a space in place of its trail byte.
    """
    data = bytes(data)
    mode = Substitute(placeholder)
    size = len(data)
    skip_first = False
    for addr in range(0, size, columns):
        row = data[addr:addr + columns]
        hexdump = u''.join(u'{0:02x} '.format(c) for c in row)
        hexdump += u'   ' * (columns - len(row))

        text = []
        idx = 0
        while idx < len(row):
            c = row[idx]
            if idx == 0 and skip_first:
                text.append(u' ')
                skip_first = False
            elif is_sjis_byte1(c):
                pos = addr + idx
                if pos + 1 < size and is_sjis_byte2(data[pos + 1]):
                    text.append(_glyph(data[pos:pos + 2], 2, mode))
                    if idx == columns - 1:
                        skip_first = True
                    idx += 1
                else:
                    text.append(placeholder)
            elif is_sjis_half_kana(c):
                text.append(_glyph(row[idx:idx + 1], 1, mode))
            elif 0x20 <= c <= 0x7e:
                text.append(chr(c))
            else:
                text.append(placeholder)
            idx += 1
        yield u'{0:08x}: {1} {2}'.format(addr, hexdump, u''.join(text))


def dump(data, stream=None, columns=16, placeholder=u'.'):
    """ Write hex dump of ``data`` to ``stream`` (default: stdout). """
    stream = sys.stdout if stream is None else stream
    for line in dump_lines(data, columns=columns, placeholder=placeholder):
        stream.write(line + u'\n')
