""" Shift_JIS <-> UTF-8 conversion for legacy game archive tools. """
__version__ = '1.0.0'

# local/exported at top-level 'from sjisutf import ...'
from sjisutf.classify import is_sjis_byte1, is_sjis_byte2, is_sjis_half_kana
from sjisutf.codec import (STRICT, Substitute, Conversion,
                           decode, encode, decode_report, encode_report,
                           sjis2utf, utf2sjis)
from sjisutf.exception import (ConversionError, InvalidByteSequence,
                               UnsupportedCodepoint, UnsupportedUTF8Sequence)
from sjisutf.kana import (to_half_kana, from_half_kana,
                          narrow_kana, widen_kana)
from sjisutf.tables import is_valid_sjis, unicode_to_sjis

# local side-effect producing imports
# (encoding 'sjis_legacy' becomes registered)
__import__('sjisutf.encodings')

__all__ = ('STRICT', 'Substitute', 'Conversion', 'decode', 'encode',
           'decode_report', 'encode_report', 'sjis2utf', 'utf2sjis',
           'ConversionError', 'InvalidByteSequence', 'UnsupportedCodepoint',
           'UnsupportedUTF8Sequence', 'is_sjis_byte1', 'is_sjis_byte2',
           'is_sjis_half_kana', 'is_valid_sjis', 'unicode_to_sjis',
           'to_half_kana', 'from_half_kana', 'narrow_kana', 'widen_kana',
           )
