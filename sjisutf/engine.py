#!/usr/bin/env python
""" Command-line launcher for sjisutf. """
# std imports
import collections
import logging
import sys

# local
from sjisutf import __version__, cmdline
from sjisutf.cmdline import UsageError
from sjisutf.codec import decode, encode
from sjisutf.dump import dump
from sjisutf.kana import narrow_kana, widen_kana

log = logging.getLogger(__name__)

#: A sub-command: ``func`` is called with its arguments and returns the
#: exit status, ``usage`` is its usage text.
Command = collections.namedtuple('Command', ['name', 'func', 'usage',
                                             'summary'])


def _read_input(args):
    """ Return contents of file ``args[0]``, or stdin when absent. """
    if len(args) > 1:
        raise UsageError('too many arguments: {0}'.format(' '.join(args)))
    if args:
        with open(args[0], 'rb') as fin:
            return fin.read()
    return getattr(sys.stdin, 'buffer', sys.stdin).read()


def _write_output(data):
    stream = getattr(sys.stdout, 'buffer', sys.stdout)
    stream.write(data)
    stream.flush()


def do_decode(args):
    """ Convert Shift_JIS input to UTF-8. """
    from sjisutf.ini import get_ini
    opts, args = cmdline.parse_command(args, 's:w',
                                       ['substitute=', 'wide-kana'])
    substitution = get_ini(section='codec', key='decode_substitution')
    wide_kana = False
    for opt, arg in opts:
        if opt in ('-s', '--substitute'):
            substitution = arg
        elif opt in ('-w', '--wide-kana'):
            wide_kana = True
    mode = cmdline.parse_substitution(substitution)

    data = _read_input(args)
    if wide_kana:
        data = widen_kana(data)
    _write_output(decode(data, mode))
    return 0


def do_encode(args):
    """ Convert UTF-8 input to Shift_JIS. """
    from sjisutf.ini import get_ini
    opts, args = cmdline.parse_command(args, 's:n',
                                       ['substitute=', 'narrow-kana'])
    substitution = get_ini(section='codec', key='encode_substitution')
    narrow = False
    for opt, arg in opts:
        if opt in ('-s', '--substitute'):
            substitution = arg
        elif opt in ('-n', '--narrow-kana'):
            narrow = True
    mode = cmdline.parse_substitution(substitution)

    data = encode(_read_input(args), mode)
    if narrow:
        data = narrow_kana(data)
    _write_output(data)
    return 0


def do_dump(args):
    """ Print hex dump of Shift_JIS input. """
    from sjisutf.ini import get_ini
    _, args = cmdline.parse_command(args, '', [])
    columns = get_ini(section='dump', key='columns', getter='getint') or 16
    placeholder = get_ini(section='dump', key='placeholder') or u'.'
    dump(_read_input(args), sys.stdout,
         columns=columns, placeholder=placeholder)
    return 0


def do_version(args):
    """ Display version information. """
    print('sjisutf {0}'.format(__version__))
    return 0


def do_help(args):
    """ Display help about a command. """
    if not args:
        usage()
        return 0
    for cmd in COMMANDS:
        if cmd.name == args[0]:
            print(cmd.usage)
            return 0
    raise UsageError("Invalid subcommand '{0}'".format(args[0]))


COMMANDS = (
    Command('decode', do_decode,
            'Usage: sjisutf decode [-s <char>] [-w] [<file>]\n'
            'Options:\n'
            '    -s, --substitute <char>  Replace invalid sequences by <char>\n'
            '    -w, --wide-kana          Widen half-width kana first',
            'Convert Shift_JIS to UTF-8'),
    Command('encode', do_encode,
            'Usage: sjisutf encode [-s <char>] [-n] [<file>]\n'
            'Options:\n'
            '    -s, --substitute <char>  Replace unconvertible characters '
            'by <char>\n'
            '    -n, --narrow-kana        Narrow kana to half-width',
            'Convert UTF-8 to Shift_JIS'),
    Command('dump', do_dump,
            'Usage: sjisutf dump [<file>]',
            'Print hex dump of Shift_JIS file'),
    Command('help', do_help,
            'Usage: sjisutf help <command>',
            'Display help information about commands'),
    Command('version', do_version,
            'Usage: sjisutf version',
            'Display version information and exit'),
)


def usage():
    print('Usage: sjisutf [--config=<ini>] [--logger=<ini>] '
          '<command> [<args>]')
    print('')
    print('commands:')
    for cmd in COMMANDS:
        print('  {0:<8} {1}'.format(cmd.name, cmd.summary))
    print('')
    print("Run 'sjisutf help <command>' for more information about a "
          "specific command.")


def main(argv=None):
    """
    sjisutf main entry point.

    Command line arguments:

    - ``--config=`` location of alternate sjisutf.ini file
    - ``--logger=`` location of alternate logging.ini file
    """
    argv = sys.argv[1:] if argv is None else argv
    try:
        lookup_cfg, lookup_log, command, args = cmdline.parse_args(argv)
    except UsageError as err:
        sys.stderr.write('sjisutf: {0}\n'.format(err))
        return 1

    import sjisutf.ini
    sjisutf.ini.init(lookup_cfg, lookup_log)

    if command is None:
        usage()
        return 1
    for cmd in COMMANDS:
        if cmd.name == command:
            break
    else:
        log.error("Invalid subcommand '%s'", command)
        return 1

    try:
        return cmd.func(args)
    except UsageError as err:
        log.error('%s: %s', command, err)
        print(cmd.usage)
        return 1
    except ValueError as err:
        # includes sjisutf.exception.ConversionError
        log.error('%s: %s', command, err)
        return 1
    except IOError as err:
        log.error('%s: %s', command, err)
        return 1


if __name__ == '__main__':
    sys.exit(main())
