""" Command-line parser for sjisutf. """
import getopt
import sys
import os

# local
from sjisutf.codec import STRICT, Substitute


class UsageError(Exception):

    """ Thrown for invalid command-line arguments. """

    pass


def get_lookup_paths():
    """ Return default lookup paths of (sjisutf.ini, logging.ini). """
    if sys.platform.lower().startswith('win32'):
        system_path = os.path.join('C:', 'sjisutf')
    else:
        system_path = os.path.join(os.path.sep, 'etc', 'sjisutf')

    lookup_cfg = (os.path.join(system_path, 'sjisutf.ini'),
                  os.path.expanduser(os.path.join('~', '.sjisutf',
                                                  'sjisutf.ini')))

    lookup_log = (os.path.join(system_path, 'logging.ini'),
                  os.path.expanduser(os.path.join('~', '.sjisutf',
                                                  'logging.ini')))
    return lookup_cfg, lookup_log


def parse_args(argv):
    """
    Parse global arguments ``argv``, excluding program name.

    Returns tuple ``(lookup_cfg, lookup_log, command, tail)``, where
    ``command`` is None when not given.

    :raises UsageError: unknown option.
    """
    lookup_cfg, lookup_log = get_lookup_paths()
    try:
        opts, tail = getopt.getopt(argv, u'', ('config=', 'logger=',
                                               'help'))
    except getopt.GetoptError as err:
        raise UsageError(str(err))
    for opt, arg in opts:
        if opt in ('--config',):
            lookup_cfg = (arg,)
        elif opt in ('--logger',):
            lookup_log = (arg,)
        elif opt in ('--help',):
            tail = ['help'] + tail[:1]
    command = tail[0] if tail else None
    return lookup_cfg, lookup_log, command, tail[1:]


def parse_command(argv, shortopts, longopts):
    """
    Parse options of a sub-command.

    :raises UsageError: unknown option.
    """
    try:
        return getopt.gnu_getopt(argv, shortopts, longopts)
    except getopt.GetoptError as err:
        raise UsageError(str(err))


def parse_substitution(value):
    """
    Return conversion mode of substitution ``value``.

    An empty value is :data:`~sjisutf.codec.STRICT`.  A single character
    is used as-is, anything else is read as an integer literal, such as
    ``0x3f``.

    :raises UsageError: value is not a character or integer.
    """
    if not value:
        return STRICT
    if len(value) == 1:
        return Substitute(value)
    try:
        return Substitute(int(value, 0))
    except ValueError:
        raise UsageError('invalid substitution: {0!r}'.format(value))
