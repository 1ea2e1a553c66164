"""
Byte classification for Shift_JIS.

These ranges are shared with the archive tools' hex-dump renderer and are
fixed; do not derive them from the conversion table.
"""


def is_sjis_byte1(c):
    """ Whether byte ``c`` may begin a double-byte unit. """
    return 0x81 <= c <= 0x9f or 0xe0 <= c <= 0xfc


def is_sjis_byte2(c):
    """ Whether byte ``c`` may end a double-byte unit. """
    return 0x40 <= c <= 0x7e or 0x80 <= c <= 0xfc


def is_sjis_half_kana(c):
    """ Whether byte ``c`` is a JIS X0201 half-width katakana. """
    return 0xa0 <= c <= 0xdf
