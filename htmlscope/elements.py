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
Convenience functions for writing common HTML elements. Every function takes
the :class:`~htmlscope.writer.HtmlWriter` to write to, any number of raw
:class:`~htmlscope.attributes.Attribute` instances, and keyword arguments for
the attributes usually given to that element. The raw attributes are written
first, then the keyword attributes in a fixed order; keyword attributes which
are :data:`None` or empty are left out entirely.

Functions for elements with content return the opened
:class:`~htmlscope.tags.TagScope` (accepting a *layout* keyword); functions
for self-closing elements write the whole element and return :data:`None`.
For example::

    >>> w = HtmlWriter()
    >>> with render_a(w, href='/docs/', title='Documentation'):
    ...     render_img(w, src='/logo.png', alt='Logo')
    >>> w.getvalue()
    '<a href="/docs/" title="Documentation"><img src="/logo.png" alt="Logo"/></a>'
"""

import datetime as dt

from .attributes import Attr, Attribute, optional_attributes
from .tags import Tag, Layout, render_tag, render_self_closing_tag

# pylint: disable=redefined-builtin


UTC = dt.timezone.utc
DATETIME_FORMAT = (
    '{0.year:04d}-{0.month:02d}-{0.day:02d}'
    'T{0.hour:02d}:{0.minute:02d}:{0.second:02d}Z')


def render_a(writer, *attributes, href=None, target=None, title=None,
             id=None, css_class=None, data_ga=None,
             data_ga_event_category=None, layout=Layout.INLINE):
    """
    Open an anchor. The keyword attributes are written in the order *href*,
    *target*, *title*, *id*, *css_class* (as ``class``), *data_ga* (as
    ``data-ga``) and *data_ga_event_category* (as ``data-gaeventcategory``).
    """
    attributes = list(attributes) + optional_attributes(
        (Attr.HREF, href),
        (Attr.TARGET, target),
        (Attr.TITLE, title),
        (Attr.ID, id),
        (Attr.CLASS, css_class),
        ('data-ga', data_ga),
        ('data-gaeventcategory', data_ga_event_category),
    )
    return render_tag(writer, Tag.A, *attributes, layout=layout)


def render_img(writer, *attributes, src=None, alt=None, title=None, id=None,
               css_class=None):
    """
    Write a self-closing image. The keyword attributes are written in the
    order *id*, *css_class*, *src*, *alt*, *title*.
    """
    attributes = list(attributes) + optional_attributes(
        (Attr.ID, id),
        (Attr.CLASS, css_class),
        (Attr.SRC, src),
        (Attr.ALT, alt),
        (Attr.TITLE, title),
    )
    render_self_closing_tag(writer, Tag.IMG, *attributes)


def render_link(writer, *attributes, href=None, rel=None, type=None):
    """
    Write a self-closing ``<link>``, with keyword attributes in the order
    *rel*, *href*, *type*.
    """
    attributes = list(attributes) + optional_attributes(
        (Attr.REL, rel),
        (Attr.HREF, href),
        (Attr.TYPE, type),
    )
    render_self_closing_tag(writer, Tag.LINK, *attributes)


def render_meta(writer, *attributes, name=None, content=None):
    "Write a self-closing ``<meta>`` with optional *name* and *content*"
    attributes = list(attributes) + optional_attributes(
        (Attr.NAME, name),
        (Attr.CONTENT, content),
    )
    render_self_closing_tag(writer, Tag.META, *attributes)


def render_label(writer, *attributes, for_=None, id=None, css_class=None,
                 layout=Layout.INLINE):
    """
    Open a ``<label>``. *for_* is the id of the labelled control and is
    written (as ``for``) after *id* and *css_class*.
    """
    attributes = list(attributes) + optional_attributes(
        (Attr.ID, id),
        (Attr.CLASS, css_class),
        (Attr.FOR, for_),
    )
    return render_tag(writer, Tag.LABEL, *attributes, layout=layout)


def render_menu_item(writer, *attributes, label=None, icon=None, id=None,
                     css_class=None, layout=Layout.INLINE):
    """
    Open a ``<menuitem>``; *label* and *icon* are written after *id* and
    *css_class*.
    """
    attributes = list(attributes) + optional_attributes(
        (Attr.ID, id),
        (Attr.CLASS, css_class),
        (Attr.LABEL, label),
        (Attr.ICON, icon),
    )
    return render_tag(writer, Tag.MENUITEM, *attributes, layout=layout)


def render_dialog(writer, *attributes, open=False, id=None, css_class=None,
                  layout=Layout.INLINE):
    """
    Open a ``<dialog>``. If *open* is true, ``open="open"`` is written after
    *id* and *css_class*.
    """
    attributes = list(attributes) + optional_attributes(
        (Attr.ID, id),
        (Attr.CLASS, css_class),
        (Attr.OPEN, 'open' if open else None),
    )
    return render_tag(writer, Tag.DIALOG, *attributes, layout=layout)


def format_datetime(timestamp):
    """
    Convert the :class:`~datetime.datetime` *timestamp* to UTC and format it
    for a ``datetime`` attribute, e.g. ``2020-01-02T03:04:05Z``. Naive values
    are assumed to be in local time.
    """
    return DATETIME_FORMAT.format(timestamp.astimezone(UTC))


def render_time(writer, *attributes, date_time=None, id=None, css_class=None,
                layout=Layout.INLINE):
    """
    Open a ``<time>``. *date_time* is either a pre-formatted string, which is
    written unchanged, or a :class:`~datetime.datetime` which is formatted by
    :func:`format_datetime`. It is written (as ``datetime``) after *id* and
    *css_class*.
    """
    if isinstance(date_time, dt.datetime):
        date_time = format_datetime(date_time)
    attributes = list(attributes) + optional_attributes(
        (Attr.ID, id),
        (Attr.CLASS, css_class),
        (Attr.DATETIME, date_time),
    )
    return render_tag(writer, Tag.TIME, *attributes, layout=layout)


def render_progress(writer, *attributes, value, max, id=None, css_class=None,
                    layout=Layout.INLINE):
    """
    Open a ``<progress>``. The numeric *value* and *max* are required and are
    always written, after *id* and *css_class*, in a locale-independent form.
    """
    attributes = list(attributes) + optional_attributes(
        (Attr.ID, id),
        (Attr.CLASS, css_class),
    ) + [
        Attribute(Attr.VALUE, str(value)),
        Attribute(Attr.MAX, str(max)),
    ]
    return render_tag(writer, Tag.PROGRESS, *attributes, layout=layout)


# The remaining elements take nothing beyond an optional id and class


def render_ol(writer, *attributes, id=None, css_class=None,
              layout=Layout.INLINE):
    "Open an ordered list"
    return render_tag(writer, Tag.OL, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_ul(writer, *attributes, id=None, css_class=None,
              layout=Layout.INLINE):
    "Open an unordered list"
    return render_tag(writer, Tag.UL, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_li(writer, *attributes, id=None, css_class=None,
              layout=Layout.INLINE):
    "Open a list item"
    return render_tag(writer, Tag.LI, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_h1(writer, *attributes, id=None, css_class=None,
              layout=Layout.INLINE):
    return render_tag(writer, Tag.H1, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_h2(writer, *attributes, id=None, css_class=None,
              layout=Layout.INLINE):
    return render_tag(writer, Tag.H2, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_h3(writer, *attributes, id=None, css_class=None,
              layout=Layout.INLINE):
    return render_tag(writer, Tag.H3, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_h4(writer, *attributes, id=None, css_class=None,
              layout=Layout.INLINE):
    return render_tag(writer, Tag.H4, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_h5(writer, *attributes, id=None, css_class=None,
              layout=Layout.INLINE):
    return render_tag(writer, Tag.H5, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_h6(writer, *attributes, id=None, css_class=None,
              layout=Layout.INLINE):
    return render_tag(writer, Tag.H6, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_em(writer, *attributes, id=None, css_class=None,
              layout=Layout.INLINE):
    "Open an emphasis element"
    return render_tag(writer, Tag.EM, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_strong(writer, *attributes, id=None, css_class=None,
                  layout=Layout.INLINE):
    return render_tag(writer, Tag.STRONG, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_menu(writer, *attributes, id=None, css_class=None,
                layout=Layout.INLINE):
    "Open a ``<menu>``; see also :func:`render_menu_item`"
    return render_tag(writer, Tag.MENU, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_section(writer, *attributes, id=None, css_class=None,
                   layout=Layout.INLINE):
    return render_tag(writer, Tag.SECTION, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_details(writer, *attributes, id=None, css_class=None,
                   layout=Layout.INLINE):
    "Open a disclosure widget; see also :func:`render_summary`"
    return render_tag(writer, Tag.DETAILS, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_summary(writer, *attributes, id=None, css_class=None,
                   layout=Layout.INLINE):
    return render_tag(writer, Tag.SUMMARY, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_div(writer, *attributes, id=None, css_class=None,
               layout=Layout.INLINE):
    return render_tag(writer, Tag.DIV, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_span(writer, *attributes, id=None, css_class=None,
                layout=Layout.INLINE):
    return render_tag(writer, Tag.SPAN, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_p(writer, *attributes, id=None, css_class=None,
             layout=Layout.INLINE):
    "Open a paragraph"
    return render_tag(writer, Tag.P, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_nav(writer, *attributes, id=None, css_class=None,
               layout=Layout.INLINE):
    return render_tag(writer, Tag.NAV, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_header(writer, *attributes, id=None, css_class=None,
                  layout=Layout.INLINE):
    return render_tag(writer, Tag.HEADER, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_footer(writer, *attributes, id=None, css_class=None,
                  layout=Layout.INLINE):
    return render_tag(writer, Tag.FOOTER, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_article(writer, *attributes, id=None, css_class=None,
                   layout=Layout.INLINE):
    return render_tag(writer, Tag.ARTICLE, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_aside(writer, *attributes, id=None, css_class=None,
                 layout=Layout.INLINE):
    return render_tag(writer, Tag.ASIDE, *attributes, id=id,
                      css_class=css_class, layout=layout)


def render_br(writer, *attributes, id=None, css_class=None):
    "Write a line break element"
    render_self_closing_tag(writer, Tag.BR, *attributes, id=id,
                            css_class=css_class)


def render_hr(writer, *attributes, id=None, css_class=None):
    "Write a thematic break element"
    render_self_closing_tag(writer, Tag.HR, *attributes, id=id,
                            css_class=css_class)
