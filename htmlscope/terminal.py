# The htmlscope project
#   Copyright (c) 2017 Ben Nuttall <https://github.com/bennuttall>
#   Copyright (c) 2017 Dave Jones <dave@waveform.org.uk>
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#     * Redistributions of source code must retain the above copyright
#       notice, this list of conditions and the following disclaimer.
#     * Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#     * Neither the name of the copyright holder nor the
#       names of its contributors may be used to endorse or promote products
#       derived from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""
The console-script plumbing shared by htmlscope's commands: a parser that
reads defaults from the htmlscope configuration files, console and file
logging, and the exception hook which turns errors into exit codes.

.. autofunction:: configure_parser

.. autofunction:: configure_logging

.. autoclass:: ErrorHandler
"""

import sys
import logging
import traceback
from collections import OrderedDict

import configargparse
from configargparse import FileType  # pylint: disable=unused-import

from . import __version__, const


# Messages logged before configure_logging is called go straight to stderr
# without adornment
_CONSOLE = logging.StreamHandler(sys.stderr)
_CONSOLE.setFormatter(logging.Formatter('%(message)s'))
_CONSOLE.setLevel(logging.DEBUG)
logging.getLogger().addHandler(_CONSOLE)


class ArgParser(configargparse.ArgParser):
    "An ArgParser which raises usage errors instead of exiting"
    # pylint: disable=method-hidden
    def error(self, message):
        raise configargparse.ArgumentError(None, message)


class WidthFormatter(logging.Formatter):
    "A log formatter which truncates messages longer than *maxwidth*"
    def __init__(self, fmt=None, maxwidth=120, ellipsis='...'):
        super().__init__(fmt)
        self.maxwidth = maxwidth
        self.ellipsis = ellipsis

    def formatMessage(self, record):
        s = super().formatMessage(record)
        if len(s) > self.maxwidth:
            s = s[:self.maxwidth - len(self.ellipsis)] + self.ellipsis
        return s


def configure_parser(description):
    """
    Return an argument parser with the options every htmlscope script takes:
    ``--version``, ``-c FILE``, ``-q``, ``-v`` and ``-l FILE``. Defaults are
    read from the files in :data:`~htmlscope.const.CONFIG_FILES`, so a script
    only has to add its own arguments.
    """
    parser = ArgParser(
        description=description,
        add_config_file_help=False,
        add_env_var_help=False,
        default_config_files=const.CONFIG_FILES,
        ignore_unknown_config_file_keys=True
    )
    parser.add_argument(
        '--version', action='version', version=__version__)
    parser.add_argument(
        '-c', '--configuration', metavar='FILE', default=None,
        is_config_file=True, help='Specify a configuration file to load')
    parser.set_defaults(log_level=logging.WARNING)
    parser.add_argument(
        '-q', '--quiet', dest='log_level', action='store_const',
        const=logging.ERROR, help='Produce less console output')
    parser.add_argument(
        '-v', '--verbose', dest='log_level', action='store_const',
        const=logging.INFO, help='Produce more console output')
    parser.add_argument(
        '-l', '--log-file', metavar='FILE',
        help='Log messages to the specified file')
    return parser


def configure_logging(log_level, log_filename=None):
    """
    Set the console to *log_level* and, if *log_filename* is given, also log
    to that file with timestamps. The file always receives at least
    ``INFO`` messages.
    """
    _CONSOLE.setLevel(log_level)
    _CONSOLE.setFormatter(WidthFormatter('%(message)s'))
    # addHandler ignores duplicates
    logging.getLogger().addHandler(_CONSOLE)
    if log_filename is not None:
        log_file = logging.FileHandler(log_filename, encoding='utf-8')
        log_file.setFormatter(WidthFormatter(
            '%(asctime)s %(name)s %(levelname)s: %(message)s'))
        log_file.setLevel(min(logging.INFO, log_level))
        logging.getLogger().addHandler(log_file)
    logging.getLogger().setLevel(min(logging.INFO, log_level))


class ErrorHandler:
    """
    The exception hook installed by htmlscope's scripts. Exceptions of a
    registered class are reported with just their message and mapped to an
    exit code; anything else is logged with its full traceback and gives exit
    code 1.

    Scripts register the errors they expect by assignment::

        error_handler[HtmlWriterError] = (error_handler.exc_message, 1)

    The first element of the pair produces the lines to log (or is
    :data:`None` to log nothing) and the second is the exit code; either may
    be a callable taking the exception info.
    """
    def __init__(self):
        self._config = OrderedDict({
            SystemExit:        (None, self.exc_value),
            KeyboardInterrupt: (None, 2),
            OSError:           (self.exc_message, 1),
            configargparse.ArgumentError:
                               (self.syntax_error, 2),
        })

    @staticmethod
    def exc_message(exc_type, exc_value, exc_tb):
        return [exc_value]

    @staticmethod
    def exc_value(exc_type, exc_value, exc_tb):
        return exc_value

    @staticmethod
    def syntax_error(exc_type, exc_value, exc_tb):
        return [exc_value, 'Try the --help option for more information.']

    def __setitem__(self, exc_class, action):
        message, exitcode = action
        self._config[exc_class] = (message, exitcode)

    def __call__(self, exc_type, exc_value, exc_tb):
        for exc_class, (message, value) in self._config.items():
            if issubclass(exc_type, exc_class):
                if callable(message):
                    message = message(exc_type, exc_value, exc_tb)
                if callable(value):
                    value = value(exc_type, exc_value, exc_tb)
                if message is not None:
                    for line in message:
                        logging.critical(line)
                return value
        for line in traceback.format_exception(exc_type, exc_value, exc_tb):
            for msg in line.rstrip().split('\n'):
                logging.critical(msg.replace('%', '%%'))
        return 1

error_handler = ErrorHandler()
