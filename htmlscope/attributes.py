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
Defines :class:`Attribute`, the name / value pair written inside an opening
tag, and :class:`Attr`, the enumeration of well-known attribute names.

.. autoclass:: Attr

.. autoclass:: Attribute

.. autofunction:: optional_attributes

.. autofunction:: id_class_attributes
"""

from enum import Enum
from collections import namedtuple

from voluptuous import Schema, All, Length, Invalid

from .html import text


class Attr(Enum):
    """
    Well-known HTML attribute names. An :class:`Attribute` constructed from
    one of these uses the lowercase form of its value as the name.
    """
    ACCESSKEY = 'accesskey'
    ALIGN = 'align'
    ALT = 'alt'
    CHECKED = 'checked'
    CLASS = 'class'
    COLSPAN = 'colspan'
    CONTENT = 'content'
    DATETIME = 'datetime'
    DIR = 'dir'
    DISABLED = 'disabled'
    FOR = 'for'
    HEIGHT = 'height'
    HREF = 'href'
    ICON = 'icon'
    ID = 'id'
    LABEL = 'label'
    LANG = 'lang'
    MAX = 'max'
    MAXLENGTH = 'maxlength'
    NAME = 'name'
    OPEN = 'open'
    READONLY = 'readonly'
    REL = 'rel'
    ROWSPAN = 'rowspan'
    SRC = 'src'
    STYLE = 'style'
    TABINDEX = 'tabindex'
    TARGET = 'target'
    TITLE = 'title'
    TYPE = 'type'
    VALUE = 'value'
    WIDTH = 'width'


_attribute_name = Schema(All(str, Length(min=1)))


class Attribute(namedtuple('Attribute', ('name', 'value'))):
    """
    An immutable attribute *name* and *value*. The *name* is either an
    :class:`Attr` member or a non-empty string which is used verbatim. The
    *value* is converted with :func:`~htmlscope.html.text`, so :data:`None`
    becomes the empty string.

    The tag helpers write the value verbatim, so it must already be encoded
    where it contains HTML special characters.
    """
    __slots__ = ()

    def __new__(cls, name, value=''):
        if isinstance(name, Attr):
            name = name.value.lower()
        try:
            name = _attribute_name(name)
        except Invalid as exc:
            raise ValueError('invalid attribute name {0!r}: {1}'.format(
                name, exc))
        return super().__new__(cls, name, text(value))


def optional_attributes(*pairs):
    """
    Return a list of :class:`Attribute` built from the (name, value) *pairs*
    in the order given, leaving out any pair whose value is :data:`None` or
    empty.
    """
    return [
        Attribute(name, value)
        for name, value in pairs
        if value is not None and value != ''
    ]


def id_class_attributes(id=None, css_class=None):
    # pylint: disable=redefined-builtin
    "Return the optional ``id`` and ``class`` attributes, in that order"
    return optional_attributes((Attr.ID, id), (Attr.CLASS, css_class))
