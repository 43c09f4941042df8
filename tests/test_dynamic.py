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


import datetime as dt
from decimal import Decimal
from collections import OrderedDict

import pytest

from htmlscope import const
from htmlscope.html import literal
from htmlscope.tags import Layout, TagScope
from htmlscope.writer import UnsupportedValueError
from htmlscope.dynamic import DynamicWriter, element, htmlify


def test_htmlify():
    assert htmlify('href') == 'href'
    assert htmlify('data_ga') == 'data-ga'
    assert htmlify('class_') == 'class'
    assert htmlify('aria_label_') == 'aria-label'


def test_element_scope(writer):
    scope = element(writer, 'anchor', OrderedDict([
        ('href', '/x'), ('data_ga', 'y')]))
    assert isinstance(scope, TagScope)
    assert writer.getvalue() == '<anchor href="/x" data-ga="y">'
    scope.close()
    assert writer.getvalue() == '<anchor href="/x" data-ga="y"></anchor>'


def test_element_pairs(writer):
    with element(writer, 'P', [('class', 'a'), ('class', 'b')]):
        pass
    assert writer.getvalue() == '<p class="a" class="b"></p>'


def test_element_no_attributes(writer):
    with element(writer, 'del_'):
        pass
    assert writer.getvalue() == '<del></del>'


def test_element_self_closing(writer):
    assert element(writer, 'IMG', {'src': '/a.png'}) is None
    assert writer.getvalue() == '<img src="/a.png"/>'
    assert writer.open_tags == ()


def test_element_layout(writer):
    with element(writer, 'div', layout=Layout.OWN_LINE):
        pass
    assert writer.getvalue() == '\n\t<div></div>\n'


def test_element_self_closing_layout(writer):
    assert element(writer, 'img', {'alt': '<x>'},
                   layout=Layout.OWN_LINE) is None
    assert writer.getvalue() == '\n\t<img alt="<x>"/>\n'
    assert writer.indent == 0


def test_dynamic_tag(writer, dyn):
    scope = dyn.anchor(href='/x', data_ga='y')
    assert isinstance(scope, TagScope)
    assert writer.getvalue() == '<anchor href="/x" data-ga="y">'
    scope.close()
    assert writer.getvalue() == '<anchor href="/x" data-ga="y"></anchor>'


def test_dynamic_self_closing(writer, dyn):
    assert dyn.img(src='/a.png') is None
    assert writer.getvalue() == '<img src="/a.png"/>'


@pytest.mark.parametrize('name', const.SELF_CLOSING_TAGS)
def test_dynamic_all_self_closing(writer, dyn, name):
    assert getattr(dyn, name)() is None
    assert writer.getvalue() == '<{0}/>'.format(name)


def test_dynamic_case_insensitive(writer, dyn):
    with dyn.DIV(id='x'):
        dyn.Br()
    assert writer.getvalue() == '<div id="x"><br/></div>'


def test_dynamic_values(writer, dyn):
    with dyn.td(colspan=2, title=None, data_flag=True, class_='num'):
        pass
    assert writer.getvalue() == (
        '<td colspan="2" title="" data-flag="True" class="num"></td>')


def test_dynamic_nesting(writer, dyn):
    with dyn.ul(class_='menu'):
        with dyn.li():
            with dyn.a(href='/'):
                dyn.write('Home')
        with dyn.li():
            dyn.write_encoded_text('Q&A')
    assert writer.getvalue() == (
        '<ul class="menu"><li><a href="/">Home</a></li><li>Q&amp;A</li></ul>')


def test_dynamic_positional_args(writer, dyn):
    with pytest.raises(TypeError):
        dyn.div('foo')
    assert writer.getvalue() == ''


def test_dynamic_refuses_write(dyn):
    with pytest.raises(AttributeError):
        dyn.Write
    with pytest.raises(AttributeError):
        dyn.WRITE('foo')
    with pytest.raises(AttributeError):
        dyn._private


def test_dynamic_generator_cached(dyn):
    assert dyn.section is dyn.section


def test_dynamic_writer_property(writer, dyn):
    assert dyn.writer is writer


def test_write_kinds(writer, dyn):
    dyn.write(True)
    dyn.write('c')
    dyn.write(' ')
    dyn.write(1.5)
    dyn.write(2 ** 40)
    dyn.write(Decimal('1.10'))
    dyn.write(None)
    dyn.write(literal('<b>'))
    assert writer.getvalue() == 'Truec 1.510995116277761.10<b>'


def test_write_formats(writer, dyn):
    dyn.write('{0};', 'a')
    dyn.write('{0}-{1};', 1, 2)
    dyn.write('{0}{1}{2}{3}', 'a', 'b', 'c', 'd')
    assert writer.getvalue() == 'a;1-2;abcd'


class Money:
    def __str__(self):
        return '£5'


@pytest.mark.parametrize('value, expected', [
    (dt.date(2020, 1, 2), '2020-01-02'),
    (Money(), '£5'),
    ([1], '[1]'),
    ({}, '{}'),
    (('a',), "('a',)"),
])
def test_write_any_object(writer, dyn, value, expected):
    dyn.write(value)
    assert writer.getvalue() == expected


def test_write_unsupported_format(writer, dyn):
    with pytest.raises(UnsupportedValueError):
        dyn.write(5, 'a')
    with pytest.raises(TypeError):
        dyn.write(dt.date(2020, 1, 2), 'a')
    assert writer.getvalue() == ''
