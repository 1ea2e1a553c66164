""" Configuration package for sjisutf. """
# std imports
import logging.config
import configparser
import warnings
import inspect
import os

#: Singleton representing configuration after load
CFG = None

# pylint: disable=W0603
#         Using the global statement


def init(lookup_cfg, lookup_log):
    """
    Initialize global 'CFG' variable and the logging system.

    Each variable (``lookup_cfg``, ``lookup_log``) is tuple lookup path of
    in-order preferences for .ini files.  The first existing file of each
    is loaded; when none are found, built-in defaults are used.  Values of
    a loaded ``lookup_cfg`` file override the defaults of
    :func:`init_cfg_ini`.
    """
    log = logging.getLogger(__name__)

    for cfg_logfile in lookup_log:
        cfg_logfile = os.path.expanduser(cfg_logfile)
        if os.path.exists(cfg_logfile):
            logging.config.fileConfig(cfg_logfile,
                                      disable_existing_loggers=False)
            log.debug('loaded %s', cfg_logfile)
            break
    else:
        logging.config.fileConfig(init_log_ini(),
                                  disable_existing_loggers=False)

    cfg = init_cfg_ini()
    for cfg_file in lookup_cfg:
        cfg_file = os.path.expanduser(cfg_file)
        if os.path.exists(cfg_file):
            cfg.read(cfg_file, encoding='utf-8')
            log.debug('loaded %s', cfg_file)
            break

    global CFG
    CFG = cfg


def init_cfg_ini():
    """ Returns ConfigParser instance of sjisutf defaults. """
    cfg = configparser.ConfigParser(interpolation=None)

    # an empty substitution is strict: conversion fails on the first
    # unconvertible unit.
    cfg.add_section('codec')
    cfg.set('codec', 'decode_substitution', '')
    cfg.set('codec', 'encode_substitution', '')

    cfg.add_section('dump')
    cfg.set('dump', 'columns', '16')
    cfg.set('dump', 'placeholder', '.')

    return cfg


def init_log_ini():
    """ Return ConfigParser instance of logger defaults. """
    cfg_log = configparser.RawConfigParser()
    cfg_log.add_section('formatters')
    cfg_log.set('formatters', 'keys', 'default')

    cfg_log.add_section('formatter_default')
    cfg_log.set('formatter_default', 'format',
                u'%(levelname)s %(name)s: %(message)s')
    cfg_log.set('formatter_default', 'class', 'logging.Formatter')

    cfg_log.add_section('handlers')
    cfg_log.set('handlers', 'keys', 'console')

    # stdout carries conversion output, log to stderr only.
    cfg_log.add_section('handler_console')
    cfg_log.set('handler_console', 'class',
                'sjisutf.log.ColoredConsoleHandler')
    cfg_log.set('handler_console', 'formatter', 'default')
    cfg_log.set('handler_console', 'args', 'tuple()')

    cfg_log.add_section('loggers')
    cfg_log.set('loggers', 'keys', 'root')

    cfg_log.add_section('logger_root')
    cfg_log.set('logger_root', 'level', 'WARNING')
    cfg_log.set('logger_root', 'handlers', 'console')

    return cfg_log


def get_ini(section=None, key=None, getter='get', split=False, splitsep=','):
    """
    Get an ini configuration of ``section`` and ``key``.

    If the option does not exist, an empty list, string, or False
    is returned -- return type decided by the given arguments.

    The ``getter`` method is 'get' by default, returning a string.
    For booleans, use ``getter='getboolean'``, integers ``getter='getint'``.

    To return a list, use ``split=True``.
    """
    assert section is not None, section
    assert key is not None, key
    if CFG is None:
        stack = inspect.stack()
        caller_mod, caller_func = stack[1][1], stack[1][3]
        warnings.warn('ini system not (yet) initialized, '
                      'caller = {0}:{1}'.format(caller_mod, caller_func))
    elif CFG.has_option(section, key):
        getter = getattr(CFG, getter)
        value = getter(section, key)
        if split and hasattr(value, 'split'):
            return [_value.strip() for _value in value.split(splitsep)]
        return value
    if getter == 'getboolean':
        return False
    if split:
        return []
    return u''
