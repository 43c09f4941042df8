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
Contains the functions that implement the :program:`htmlscope-render` script.

.. autofunction:: main

.. autofunction:: do_render
"""

import sys
import logging

from .. import __version__, terminal, const
from ..dynamic import element
from ..tags import Layout
from ..writer import HtmlWriter, HtmlWriterError


def attribute(s):
    """
    Convert the command line argument *s*, of the form ``NAME=VALUE``, into a
    (name, value) tuple.
    """
    name, sep, value = s.partition('=')
    if not sep or not name:
        raise ValueError('expected NAME=VALUE')
    return name, value


def main(args=None):
    """
    This is the main function for the :program:`htmlscope-render` script. It
    writes a single element, with optional text content, using
    :func:`~htmlscope.dynamic.element`.
    """
    terminal.error_handler[HtmlWriterError] = (
        terminal.error_handler.exc_message, 1)
    sys.excepthook = terminal.error_handler
    logging.getLogger().name = 'render'
    parser = terminal.configure_parser("""\
The htmlscope-render script writes a single HTML element to stdout (or the
file given with --output). Attributes are given as NAME=VALUE pairs and are
written in the order specified; underscores in names become hyphens.
""")
    parser.add_argument(
        'tag', help="The name of the element to write")
    parser.add_argument(
        'attributes', nargs='*', type=attribute, metavar='NAME=VALUE',
        help="Attributes of the element")
    parser.add_argument(
        '-t', '--text', default=None,
        help="Text content of the element; this will be escaped")
    parser.add_argument(
        '--layout', default=Layout.INLINE.value,
        choices=[layout.value for layout in Layout],
        help="How to frame the element (default: %(default)s)")
    parser.add_argument(
        '--indent', type=int, default=0, metavar='N',
        help="The indentation level to start at (default: %(default)s)")
    parser.add_argument(
        '--indent-text', default=const.INDENT_TEXT, metavar='STR',
        help="The string written for each level of indentation (default: "
        "tab)")
    parser.add_argument(
        '-o', '--output', type=terminal.FileType('w', encoding='utf-8'),
        default='-', metavar='FILE',
        help="The file to write the element to (default: stdout)")
    config = parser.parse_args(args)
    terminal.configure_logging(config.log_level, config.log_file)

    if config.text and config.tag.lower() in const.SELF_CLOSING_TAGS:
        parser.error('<{0}> is self-closing and cannot contain text'.format(
            config.tag.lower()))

    logging.info("htmlscope renderer version %s", __version__)
    writer = HtmlWriter(config.output, indent_text=config.indent_text)
    writer.indent = config.indent
    try:
        do_render(writer, config)
    finally:
        if config.output is not sys.stdout:
            config.output.close()
    return 0


def do_render(writer, config):
    """
    Writes the element described by *config* to *writer*, followed by a line
    break.

    :param writer:
        The :class:`~htmlscope.writer.HtmlWriter` to write to.

    :param config:
        The configuration obtained from parsing the command line.
    """
    logging.info('Writing <%s> with %d attribute(s)',
                 config.tag, len(config.attributes))
    scope = element(writer, config.tag, config.attributes,
                    layout=Layout(config.layout))
    if scope is not None:
        with scope:
            if config.text:
                writer.write_encoded_text(config.text)
    writer.write_line()
