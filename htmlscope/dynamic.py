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
Defines :func:`element`, the free-form way of writing any element by name,
and :class:`DynamicWriter`, which uses ``__getattr__`` magic to turn method
calls into calls to :func:`element`.

.. autofunction:: element

.. autoclass:: DynamicWriter
    :members: write, write_encoded_text
"""

from collections.abc import Mapping

from . import const
from .attributes import Attribute
from .tags import Layout, TagScope, render_self_closing_tag
from .writer import UnsupportedValueError


def htmlify(name):
    """
    Convert a pythonified tag or attribute name back to HTML by stripping
    trailing underscores (so reserved words like ``class_`` can be used) and
    replacing the remaining underscores with hyphens.
    """
    return name.rstrip('_').replace('_', '-')


def element(writer, name, attributes=None, layout=Layout.INLINE):
    """
    Write the element *name* (case-insensitive) on *writer*. The
    *attributes* may be a mapping or an iterable of (name, value) pairs; each
    name is passed through :func:`htmlify` and each value is converted to
    text, with :data:`None` written as an empty value.

    If *name* is a self-closing element (see
    :data:`~htmlscope.const.SELF_CLOSING_TAGS`) the complete element is
    written and :data:`None` is returned. Otherwise the opened
    :class:`~htmlscope.tags.TagScope` is returned and must be released to
    close the element. Either way the element is framed according to
    *layout*.
    """
    name = name.rstrip('_').lower()
    if attributes is None:
        attributes = ()
    elif isinstance(attributes, Mapping):
        attributes = attributes.items()
    attributes = [
        Attribute(htmlify(attr), value)
        for attr, value in attributes
    ]
    if name in const.SELF_CLOSING_TAGS:
        render_self_closing_tag(writer, name, *attributes, layout=layout)
        return None
    else:
        return TagScope(writer, name, *attributes, layout=layout)


class DynamicWriter:
    """
    A wrapper around an :class:`~htmlscope.writer.HtmlWriter` which
    generates elements from method calls. The method name is used as the
    element name and the keyword arguments as its attributes, with
    underscores in the names replaced by hyphens (a trailing underscore is
    stripped, for reserved words)::

        >>> w = HtmlWriter()
        >>> d = DynamicWriter(w)
        >>> with d.div(class_='note', data_id=5):
        ...     d.write('Hello')
        ...     d.br()
        >>> w.getvalue()
        '<div class="note" data-id="5">Hello<br/></div>'

    Methods for self-closing elements (``br``, ``img``, ...) write the whole
    element and return :data:`None`; all others return the
    :class:`~htmlscope.tags.TagScope` of the opened element. Attributes must
    be given as keyword arguments.

    The name ``write`` (in any case) is never turned into an element; use
    :meth:`write` for text.
    """
    def __init__(self, writer):
        self._writer = writer

    @property
    def writer(self):
        "The underlying :class:`~htmlscope.writer.HtmlWriter`"
        return self._writer

    def write(self, value, *args):
        """
        Write *value* without escaping it. :data:`None` writes nothing,
        objects with an ``__html__`` method are written as that method's
        result, and any other value (a :class:`bool`, a character, a number,
        a date, ...) is converted with :func:`str`.

        If *args* are given, *value* must be a format string which is
        expanded with :meth:`str.format`, e.g. ``write('{0} of {1}', 3,
        10)``.

        A format which is not a :class:`str` raises
        :exc:`~htmlscope.writer.UnsupportedValueError`.
        """
        if args:
            if not isinstance(value, str):
                raise UnsupportedValueError(
                    'format must be a str, not {0}'.format(
                        type(value).__name__))
            value = value.format(*args)
        self._writer.write(value)

    def write_encoded_text(self, text):
        "Write *text*, escaping any HTML special characters within it"
        self._writer.write_encoded_text(text)

    def __getattr__(self, attr):
        if attr.startswith('_') or attr.lower() == 'write':
            raise AttributeError(attr)
        def generator(**kwargs):
            return element(self._writer, attr, kwargs)
        setattr(self, attr, generator)
        return generator
