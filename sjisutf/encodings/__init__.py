""" Registers sjisutf codecs with python's codec registry. """
# std imports
import codecs
import logging
import re

_cache = {}
_aliases = {}

#: Codec modules of this package.
CODECS = ('sjis_legacy',)

logger = logging.getLogger(__name__)


def normalize_encoding(encoding):
    return re.sub(
        r'[^\w_-]', '', encoding.lower()
    ).replace('-', '_')


def search_function(encoding):
    encoding = normalize_encoding(encoding)
    try:
        return _cache[encoding]
    except KeyError:
        pass

    encoding = _aliases.get(encoding, encoding)
    if encoding not in CODECS:
        return None

    mod = __import__('sjisutf.encodings.' + encoding, fromlist=['*'], level=0)
    _cache[encoding] = mod.getregentry()
    logger.debug('registered codec %s', encoding)

    try:
        codecaliases = mod.getaliases()
    except AttributeError:
        pass
    else:
        for alias in codecaliases:
            if alias not in _aliases:
                _aliases[alias] = encoding
                _cache[alias] = _cache[encoding]

    return _cache[encoding]


codecs.register(search_function)


# Now to initialize all locally available codecs and their aliases:
for _encoding in CODECS:
    codecs.lookup(_encoding)
