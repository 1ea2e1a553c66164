""" Custom exceptions for sjisutf. """


class ConversionError(ValueError):

    """ Base class of all conversion failures. """

    pass


class InvalidByteSequence(ConversionError):

    """ Thrown when a lead byte is not followed by a valid trail byte. """

    def __init__(self, lead, trail, offset):
        self.lead = lead
        self.trail = trail
        self.offset = offset
        if trail is None:
            msg = 'Invalid SJIS byte sequence {0:02x} (truncated)'.format(lead)
        else:
            msg = 'Invalid SJIS byte sequence {0:02x} {1:02x}'.format(
                lead, trail)
        super(InvalidByteSequence, self).__init__(
            '{0} at offset {1}'.format(msg, offset))


class UnsupportedCodepoint(ConversionError):

    """ Thrown when a unicode scalar has no SJIS representation. """

    def __init__(self, codepoint, offset):
        self.codepoint = codepoint
        self.offset = offset
        super(UnsupportedCodepoint, self).__init__(
            'Codepoint U+{0:04X} cannot be converted to Shift_JIS '
            '(offset {1})'.format(codepoint, offset))


class UnsupportedUTF8Sequence(ConversionError):

    """ Thrown for 4-byte (non-BMP) or truncated UTF-8 sequences. """

    def __init__(self, lead, offset):
        self.lead = lead
        self.offset = offset
        super(UnsupportedUTF8Sequence, self).__init__(
            'Unsupported UTF-8 sequence {0:02x} at offset {1}'.format(
                lead, offset))
