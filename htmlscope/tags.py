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
Defines :class:`TagScope`, which opens an HTML element when constructed and
closes it when released, along with the two primitives that all the element
helpers delegate to: :func:`render_tag` and :func:`render_self_closing_tag`.

A scope is normally used as a context manager, which guarantees the closing
tag is written exactly once however the block is left::

    >>> w = HtmlWriter()
    >>> with render_tag(w, Tag.P, css_class='intro'):
    ...     w.write_encoded_text('Fish & chips')
    >>> w.getvalue()
    '<p class="intro">Fish &amp; chips</p>'

.. autoclass:: Tag

.. autoclass:: Layout

.. autoclass:: TagScope
    :members:

.. autofunction:: render_tag

.. autofunction:: render_self_closing_tag

.. autofunction:: tag_name
"""

import logging
from enum import Enum

from . import const
from .attributes import id_class_attributes
from .writer import TagNestingError, TagClosedError


logger = logging.getLogger('htmlscope.tags')


class Tag(Enum):
    """
    Well-known HTML element names; the lowercase form of the value is used as
    the tag name.
    """
    A = 'a'
    ARTICLE = 'article'
    ASIDE = 'aside'
    B = 'b'
    BODY = 'body'
    BR = 'br'
    BUTTON = 'button'
    CODE = 'code'
    DD = 'dd'
    DETAILS = 'details'
    DIALOG = 'dialog'
    DIV = 'div'
    DL = 'dl'
    DT = 'dt'
    EM = 'em'
    FOOTER = 'footer'
    FORM = 'form'
    H1 = 'h1'
    H2 = 'h2'
    H3 = 'h3'
    H4 = 'h4'
    H5 = 'h5'
    H6 = 'h6'
    HEAD = 'head'
    HEADER = 'header'
    HR = 'hr'
    HTML = 'html'
    I = 'i'
    IMG = 'img'
    INPUT = 'input'
    LABEL = 'label'
    LI = 'li'
    LINK = 'link'
    MENU = 'menu'
    MENUITEM = 'menuitem'
    META = 'meta'
    NAV = 'nav'
    OL = 'ol'
    OPTION = 'option'
    P = 'p'
    PRE = 'pre'
    PROGRESS = 'progress'
    SCRIPT = 'script'
    SECTION = 'section'
    SELECT = 'select'
    SPAN = 'span'
    STRONG = 'strong'
    SUMMARY = 'summary'
    TABLE = 'table'
    TBODY = 'tbody'
    TD = 'td'
    TEXTAREA = 'textarea'
    TH = 'th'
    THEAD = 'thead'
    TIME = 'time'
    TITLE = 'title'
    TR = 'tr'
    UL = 'ul'


class Layout(Enum):
    """
    Controls how a :class:`TagScope` frames its element:

    ``INLINE``
        the tags are written where the writer currently is

    ``OWN_LINE``
        the element starts on a new line, one level further indented, and a
        line break follows the closing tag

    ``OWN_LINE_WITH_BREAKS``
        as ``OWN_LINE``, but the content also starts on a new line after the
        opening tag and is followed by a line break before the closing tag
    """
    INLINE = 'inline'
    OWN_LINE = 'own-line'
    OWN_LINE_WITH_BREAKS = 'own-line-with-breaks'

    @property
    def break_before(self):
        return self is not Layout.INLINE

    @property
    def inner_breaks(self):
        return self is Layout.OWN_LINE_WITH_BREAKS


def tag_name(tag):
    """
    Return the textual name of *tag*, which is either a :class:`Tag` member
    (lowercased) or a free-form string (returned verbatim).
    """
    if isinstance(tag, Tag):
        return tag.value.lower()
    if not isinstance(tag, str) or not tag:
        raise ValueError('invalid tag name {0!r}'.format(tag))
    return tag


class TagScope:
    """
    Opens the element *tag* on *writer* with the given *attributes* (written
    in order, duplicates included) and closes it when released, either by
    calling :meth:`close` or by leaving a ``with`` block.

    Releasing a scope twice raises :exc:`~htmlscope.writer.TagClosedError`.
    Releasing a scope while an element opened after it is still open raises
    :exc:`~htmlscope.writer.TagNestingError` and writes nothing.
    """
    def __init__(self, writer, tag, *attributes, layout=Layout.INLINE):
        self._writer = writer
        self._name = tag_name(tag)
        self._layout = Layout(layout)
        indent = writer.indent
        try:
            if self._layout.break_before:
                writer.indent += 1
                writer.write_line()
            for attr in attributes:
                writer.add_attribute(attr.name, attr.value, encode=False)
            writer.render_begin_tag(self._name)
        except Exception:
            writer.indent = indent
            raise
        self._depth = len(writer.open_tags)
        if self._layout.inner_breaks:
            writer.write_line()
        logger.debug('opened <%s> at depth %d', self._name, self._depth)

    def __repr__(self):
        return '<TagScope name={0!r} layout={1} closed={2}>'.format(
            self._name, self._layout.value, self.closed)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        if exc_type is None:
            self.close()
        else:
            # Leave the error from the block to propagate
            try:
                self.close()
            except TagNestingError:
                logger.warning(
                    '<%s> left open after %s', self._name, exc_type.__name__)

    @property
    def name(self):
        "The name of the element this scope opened"
        return self._name

    @property
    def layout(self):
        "The :class:`Layout` of the element"
        return self._layout

    @property
    def closed(self):
        "True once the closing tag has been written"
        return self._depth is None

    def close(self):
        "Write the closing tag of the element"
        if self._depth is None:
            raise TagClosedError('<{0}> is already closed'.format(self._name))
        open_tags = self._writer.open_tags
        if len(open_tags) > self._depth:
            raise TagNestingError(
                'cannot close <{0}> while <{1}> is still open'.format(
                    self._name, open_tags[-1]))
        elif len(open_tags) < self._depth:
            raise TagNestingError(
                '<{0}> was closed out of order'.format(self._name))
        if self._layout.inner_breaks:
            self._writer.write_line()
        self._writer.render_end_tag()
        if self._layout.break_before:
            self._writer.write_line()
            self._writer.indent -= 1
        logger.debug('closed <%s> at depth %d', self._name, self._depth)
        self._depth = None


def render_tag(writer, tag, *attributes, id=None, css_class=None,
               layout=Layout.INLINE):
    # pylint: disable=redefined-builtin
    """
    Open the element *tag* on *writer* and return the :class:`TagScope` that
    will close it. The raw *attributes* are written first, followed by the
    optional *id* and *css_class* (as ``class``).
    """
    attributes = list(attributes) + id_class_attributes(id, css_class)
    return TagScope(writer, tag, *attributes, layout=layout)


def render_self_closing_tag(writer, tag, *attributes, id=None,
                            css_class=None, layout=Layout.INLINE):
    # pylint: disable=redefined-builtin
    """
    Write the complete self-closing element *tag* (e.g. ``<br/>``) on
    *writer*. Attributes are ordered as in :func:`render_tag`. No scope is
    created, so nothing is returned. With a *layout* other than ``INLINE`` the
    element is written on its own line, one level further indented.
    """
    attributes = list(attributes) + id_class_attributes(id, css_class)
    own_line = Layout(layout).break_before
    if own_line:
        writer.indent += 1
    try:
        if own_line:
            writer.write_line()
        writer.write_begin_tag(tag_name(tag))
        for attr in attributes:
            writer.write_attribute(attr.name, attr.value, encode=False)
        writer.write(const.SELF_CLOSING_TAG_END)
        if own_line:
            writer.write_line()
    finally:
        if own_line:
            writer.indent -= 1
