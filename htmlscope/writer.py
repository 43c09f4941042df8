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
Defines :class:`HtmlWriter`, the stateful stream writer that every other part
of htmlscope writes through, and the exceptions raised when it is misused.

The writer owns three pieces of state:

* the indentation level, which is emitted (as repetitions of the indent text)
  before the first thing written on each new line;

* a buffer of attributes, added with :meth:`~HtmlWriter.add_attribute` and
  consumed by the next :meth:`~HtmlWriter.render_begin_tag`;

* the stack of open tags, so that :meth:`~HtmlWriter.render_end_tag` always
  closes the most recently opened tag.

.. autoclass:: HtmlWriter
    :members:

.. autoexception:: HtmlWriterError

.. autoexception:: TagNestingError

.. autoexception:: TagClosedError

.. autoexception:: UnsupportedValueError
"""

import io

from . import const
from .html import html, text


class HtmlWriterError(Exception):
    "Base class for errors raised when writing HTML"


class TagNestingError(HtmlWriterError):
    """
    Raised when a tag is closed out of order, or when a close is requested
    with no tag open.
    """


class TagClosedError(HtmlWriterError):
    "Raised when a tag scope is released more than once"


class UnsupportedValueError(HtmlWriterError, TypeError):
    "Raised when asked to expand a format which is not a string"


class HtmlWriter:
    """
    Writes HTML to *stream* (an :class:`io.StringIO` if omitted), indenting
    each line with *indent_text* repeated :attr:`indent` times and ending
    lines with *newline*.

    For example::

        >>> w = HtmlWriter()
        >>> w.add_attribute('href', '/foo?a=1&b=2')
        >>> w.render_begin_tag('a')
        >>> w.write_encoded_text('Foo & Bar')
        >>> w.render_end_tag()
        >>> w.getvalue()
        '<a href="/foo?a=1&amp;b=2">Foo &amp; Bar</a>'
    """
    def __init__(self, stream=None, indent_text=const.INDENT_TEXT,
                 newline=const.NEWLINE):
        if stream is None:
            stream = io.StringIO()
        self._stream = stream
        self._indent_text = indent_text
        self._newline = newline
        self._indent = 0
        self._tabs_pending = True
        self._attributes = []
        self._tags = []

    @property
    def stream(self):
        "The stream that output is written to"
        return self._stream

    @property
    def indent(self):
        """
        The current indentation level. Setting this to a negative value sets
        it to 0.
        """
        return self._indent

    @indent.setter
    def indent(self, value):
        self._indent = max(0, value)

    @property
    def open_tags(self):
        "A tuple of the names of the currently open tags, outermost first"
        return tuple(self._tags)

    def getvalue(self):
        "Return everything written so far (if the stream supports it)"
        return self._stream.getvalue()

    def _output_tabs(self):
        if self._tabs_pending:
            self._stream.write(self._indent_text * self._indent)
            self._tabs_pending = False

    def write(self, value):
        """
        Write *value* without escaping it. :data:`None` writes nothing,
        objects with an ``__html__`` method are written as that method's
        result, and anything else is converted with :func:`str`.
        """
        if value is None:
            return
        if hasattr(value, '__html__'):
            value = value.__html__()
        elif not isinstance(value, str):
            value = str(value)
        self._output_tabs()
        self._stream.write(value)

    def write_line(self, value=None):
        "Write *value* (if given) followed by a line break"
        self.write(value)
        self._stream.write(self._newline)
        self._tabs_pending = True

    def write_encoded_text(self, value):
        "Write *value* escaping any HTML special characters within it"
        self.write(html(value))

    @staticmethod
    def _format_attribute(name, value, encode):
        if encode:
            value = html(value)
        else:
            value = text(value)
        return ' {0}="{1}"'.format(name, value)

    def add_attribute(self, name, value, encode=True):
        """
        Buffer the attribute *name* with *value* for the next tag opened with
        :meth:`render_begin_tag` or :meth:`write_self_closing_tag`. Attributes
        are written in the order they are added, duplicates included.
        """
        self._attributes.append(self._format_attribute(name, value, encode))

    def _pending_attributes(self):
        result = ''.join(self._attributes)
        self._attributes = []
        return result

    def render_begin_tag(self, name):
        "Write the opening tag *name* along with any buffered attributes"
        self.write('<{0}{1}>'.format(name, self._pending_attributes()))
        self._tags.append(name)

    def render_end_tag(self):
        "Write the closing tag for the most recently opened tag"
        if not self._tags:
            raise TagNestingError('no open tag to close')
        self.write('</{0}>'.format(self._tags.pop()))

    def write_begin_tag(self, name):
        """
        Write the start of the tag *name*, leaving it unterminated so that
        :meth:`write_attribute` can follow.
        """
        self.write('<{0}'.format(name))

    def write_attribute(self, name, value, encode=True):
        "Write an attribute directly into an unterminated tag"
        self.write(self._format_attribute(name, value, encode))

    def write_self_closing_tag(self, name):
        "Write the complete tag *name* with any buffered attributes"
        self.write('<{0}{1}{2}'.format(
            name, self._pending_attributes(), const.SELF_CLOSING_TAG_END))
