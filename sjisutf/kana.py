"""
JIS X0201 half-width katakana (hankaku) helpers.

Double-byte kana of the 0x81 and 0x82 rows narrow to a single half-width
byte by :func:`to_half_kana`; :func:`from_half_kana` widens a half-width
byte back to one canonical double-byte code.  The two directions are not
exact inverses: hiragana and katakana both narrow to the same half-width
byte, which always widens to hiragana.
"""
# local
from sjisutf.classify import is_sjis_byte1, is_sjis_byte2, is_sjis_half_kana

# Narrowing tables, indexed by trail byte - 0x40.

HANKAKU_81 = (
    0x20, 0xa4, 0xa1, 0x00, 0x00, 0xa5, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0xb0, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0xa2, 0xa3, 0x00,
) + (0x00,) * 136

HANKAKU_82 = (0x00,) * 88 + (
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xa7,
    0xb1, 0xa8, 0xb2, 0xa9, 0xb3, 0xaa, 0xb4, 0xab,
    0xb5, 0xb6, 0x00, 0xb7, 0x00, 0xb8, 0x00, 0xb9,
    0x00, 0xba, 0x00, 0xbb, 0x00, 0xbc, 0x00, 0xbd,
    0x00, 0xbe, 0x00, 0xbf, 0x00, 0xc0, 0x00, 0xc1,
    0x00, 0xaf, 0xc2, 0x00, 0xc3, 0x00, 0xc4, 0x00,
    0xc5, 0xc6, 0xc7, 0xc8, 0xc9, 0xca, 0x00, 0x00,
    0xcb, 0x00, 0x00, 0xcc, 0x00, 0x00, 0xcd, 0x00,
    0x00, 0xce, 0x00, 0x00, 0xcf, 0xd0, 0xd1, 0xd2,
    0xd3, 0xac, 0xd4, 0xad, 0xd5, 0xae, 0xd6, 0xd7,
    0xd8, 0xd9, 0xda, 0xdb, 0x00, 0xdc, 0x00, 0x00,
    0xa6, 0xdd, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
) + (0x00,) * 8

# Widening table, indexed by half-width byte - 0xa0.

KANA_TABLE = (
    0x8140, 0x8142, 0x8175, 0x8176, 0x8141, 0x8145, 0x82f0, 0x829f,
    0x82a1, 0x82a3, 0x82a5, 0x82a7, 0x82e1, 0x82e3, 0x82e5, 0x82c1,
    0x815b, 0x82a0, 0x82a2, 0x82a4, 0x82a6, 0x82a8, 0x82a9, 0x82ab,
    0x82ad, 0x82af, 0x82b1, 0x82b3, 0x82b5, 0x82b7, 0x82b9, 0x82bb,
    0x82bd, 0x82bf, 0x82c2, 0x82c4, 0x82c6, 0x82c8, 0x82c9, 0x82ca,
    0x82cb, 0x82cc, 0x82cd, 0x82d0, 0x82d3, 0x82d6, 0x82d9, 0x82dc,
    0x82dd, 0x82de, 0x82df, 0x82e0, 0x82e2, 0x82e4, 0x82e6, 0x82e7,
    0x82e8, 0x82e9, 0x82ea, 0x82eb, 0x82ed, 0x82f1, 0x814a, 0x814b,
)

_NARROWING = {0x81: HANKAKU_81, 0x82: HANKAKU_82}


def to_half_kana(c1, c2):
    """
    Return the half-width byte for double-byte unit ``c1``, ``c2``.

    Returns 0 when the unit has no half-width form.
    """
    table = _NARROWING.get(c1)
    if table is None or not 0x40 <= c2 <= 0xff:
        return 0
    return table[c2 - 0x40]


def from_half_kana(c):
    """
    Return the canonical double-byte code (``lead << 8 | trail``) of
    half-width byte ``c``.

    :raises ValueError: ``c`` is not a half-width katakana byte.
    """
    if not is_sjis_half_kana(c):
        raise ValueError('not a half-width kana byte: {0!r}'.format(c))
    return KANA_TABLE[c - 0xa0]


def narrow_kana(data):
    """ Return SJIS ``data`` with double-byte kana replaced by half-width. """
    out = bytearray()
    pos, size = 0, len(data)
    while pos < size:
        c1 = data[pos]
        if (is_sjis_byte1(c1) and pos + 1 < size
                and is_sjis_byte2(data[pos + 1])):
            half = to_half_kana(c1, data[pos + 1])
            if half:
                out.append(half)
            else:
                out += data[pos:pos + 2]
            pos += 2
            continue
        out.append(c1)
        pos += 1
    return bytes(out)


def widen_kana(data):
    """ Return SJIS ``data`` with half-width kana replaced by double-byte. """
    out = bytearray()
    pos, size = 0, len(data)
    while pos < size:
        c1 = data[pos]
        if is_sjis_half_kana(c1):
            code = KANA_TABLE[c1 - 0xa0]
            out.append(code >> 8)
            out.append(code & 0xff)
            pos += 1
        elif (is_sjis_byte1(c1) and pos + 1 < size
                and is_sjis_byte2(data[pos + 1])):
            out += data[pos:pos + 2]
            pos += 2
        else:
            out.append(c1)
            pos += 1
    return bytes(out)
