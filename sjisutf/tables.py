"""
Shift_JIS conversion table and its reverse index.

The forward table ``S2U`` is indexed as ``S2U[lead - 0x80][trail - 0x40]``
and holds the unicode scalar of each double-byte unit, or 0 where the unit
is not valid.  Its repertoire is that of Microsoft code page 932, taken
from python's own ``cp932`` codec, so the NEC and IBM extension rows and
the user-defined area (mapped into the private use area) are included.

``REVERSE_INDEX`` maps each scalar back to the *first* double-byte code
holding it, scanning by ascending lead byte, then ascending trail byte.
Scalars present more than once in ``S2U`` (the NEC-selected and IBM
extension duplicates) therefore always resolve to the lowest code.
"""
# std imports
import codecs
import logging

# local
from sjisutf.classify import is_sjis_byte1, is_sjis_byte2, is_sjis_half_kana

log = logging.getLogger(__name__)

#: Lowest lead byte and lowest trail byte represented in ``S2U``.
LEAD_BASE, TRAIL_BASE = 0x80, 0x40

#: Dimensions of ``S2U``.
ROWS, COLUMNS = 0x100 - LEAD_BASE, 0x100 - TRAIL_BASE

_cp932_decode = codecs.getdecoder('cp932')


def _build_table():
    """ Return the forward table as a tuple of row tuples. """
    table = []
    for lead in range(LEAD_BASE, 0x100):
        row = [0] * COLUMNS
        if is_sjis_byte1(lead):
            for trail in range(TRAIL_BASE, 0x100):
                if not is_sjis_byte2(trail):
                    continue
                try:
                    text, _ = _cp932_decode(bytes((lead, trail)))
                except UnicodeDecodeError:
                    continue
                if len(text) == 1 and 0 < ord(text) <= 0xffff:
                    row[trail - TRAIL_BASE] = ord(text)
        table.append(tuple(row))
    return tuple(table)


def _build_reverse_index(table):
    """ Return dict of scalar -> code, first match in ascending order wins. """
    index = {}
    duplicates = 0
    for lead in range(LEAD_BASE + 1, 0x100):
        if is_sjis_half_kana(lead):
            continue
        row = table[lead - LEAD_BASE]
        for trail in range(TRAIL_BASE, 0x100):
            codepoint = row[trail - TRAIL_BASE]
            if not codepoint:
                continue
            if codepoint in index:
                duplicates += 1
                continue
            index[codepoint] = lead << 8 | trail
    log.debug('reverse index: %d scalars, %d duplicate codes ignored',
              len(index), duplicates)
    return index


#: Forward table, ``S2U[lead - 0x80][trail - 0x40]`` -> scalar or 0.
S2U = _build_table()

#: Reverse index, scalar -> ``lead << 8 | trail``.
REVERSE_INDEX = _build_reverse_index(S2U)


def sjis_to_unicode(c1, c2):
    """
    Return the scalar of double-byte unit ``c1``, ``c2``, or 0.

    Bytes outside of the table dimensions are never valid.
    """
    if LEAD_BASE <= c1 <= 0xff and TRAIL_BASE <= c2 <= 0xff:
        return S2U[c1 - LEAD_BASE][c2 - TRAIL_BASE]
    return 0


def is_valid_sjis(c1, c2):
    """ Whether ``c1``, ``c2`` form a valid, mapped double-byte unit. """
    return bool(is_sjis_byte1(c1) and is_sjis_byte2(c2)
                and S2U[c1 - LEAD_BASE][c2 - TRAIL_BASE])


def unicode_to_sjis(codepoint):
    """ Return ``lead << 8 | trail`` encoding ``codepoint``, or 0. """
    return REVERSE_INDEX.get(codepoint, 0)


def scan_unicode_to_sjis(codepoint):
    """
    Linear search of ``S2U`` for ``codepoint``.

    Same result as :func:`unicode_to_sjis`, at the cost of a table scan per
    call.  Kept as the reference for the reverse index.
    """
    if not codepoint:
        return 0
    for lead in range(LEAD_BASE + 1, 0x100):
        if is_sjis_half_kana(lead):
            continue
        row = S2U[lead - LEAD_BASE]
        for trail in range(TRAIL_BASE, 0x100):
            if row[trail - TRAIL_BASE] == codepoint:
                return lead << 8 | trail
    return 0
