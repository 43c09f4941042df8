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


from htmlscope.html import html, literal, content, text


def test_literals():
    assert html(literal('foo')) == 'foo'
    assert html(literal('<foo>')) == '<foo>'
    assert html(literal('foo & bar')) == 'foo & bar'


def test_content():
    assert html(content('foo')) == 'foo'
    assert html(content('<foo>')) == '&lt;foo&gt;'
    assert html(content('foo & bar')) == 'foo &amp; bar'
    assert html(content('"foo"')) == '&quot;foo&quot;'


def test_str():
    assert html('foo') == 'foo'
    assert html('<foo>') == '&lt;foo&gt;'
    assert html('foo & bar') == 'foo &amp; bar'


def test_non_str():
    assert html(None) == ''
    assert html(101) == '101'
    assert html(b'm\xc2\xb5') == 'mµ'


def test_text():
    assert text(None) == ''
    assert text('') == ''
    assert text('foo') == 'foo'
    assert text(1.5) == '1.5'
    assert text(True) == 'True'
    assert text(b'baz') == 'baz'
    assert isinstance(text(literal('<b>')), literal)
