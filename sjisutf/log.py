""" Logging handler for sjisutf. """
# std imports
import logging
import copy
import sys

# 3rd-party
from blessed import Terminal


class ColoredConsoleHandler(logging.StreamHandler):
    """
    A stderr stream handler that colors the levelname.

    Colors are only emitted when stderr is a terminal.
    """

    def __init__(self):
        self.term = Terminal(stream=sys.stderr)
        logging.StreamHandler.__init__(self, sys.stderr)

    def get_color(self, levelno):
        """ Return terminal formatter for log level ``levelno``. """
        return (self.term.bold_red if levelno >= logging.ERROR else
                self.term.bold_yellow if levelno >= logging.WARNING else
                self.term.bold_white if levelno >= logging.INFO else
                self.term.blue)

    def emit(self, record):
        """ Emit a copy of ``record`` with a colored levelname. """
        record = copy.copy(record)
        levelname = (record.levelname.lower()
                     if record.levelname != 'WARNING' else 'warn')
        record.levelname = self.get_color(record.levelno)(levelname)
        logging.StreamHandler.emit(self, record)
