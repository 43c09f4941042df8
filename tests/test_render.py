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


import sys
from unittest import mock

import pytest
import configargparse

from htmlscope import terminal
from htmlscope.writer import TagNestingError
from htmlscope.render import main, attribute


@pytest.fixture(autouse=True)
def restore_excepthook(request):
    hook = sys.excepthook
    yield
    sys.excepthook = hook


def test_attribute():
    assert attribute('href=/docs/') == ('href', '/docs/')
    assert attribute('title=') == ('title', '')
    assert attribute('data=a=b') == ('data', 'a=b')
    with pytest.raises(ValueError):
        attribute('href')
    with pytest.raises(ValueError):
        attribute('=foo')


def test_help(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['--help'])
    assert exc.value.code == 0
    assert 'htmlscope-render' in capsys.readouterr().out


def test_render_element(capsys):
    assert main(['a', 'href=/docs/', 'data_ga=nav', '--text', 'Docs & more']) == 0
    out, err = capsys.readouterr()
    assert out == '<a href="/docs/" data-ga="nav">Docs &amp; more</a>\n'


def test_render_self_closing(capsys):
    assert main(['IMG', 'src=/a.png', 'alt=']) == 0
    out, err = capsys.readouterr()
    assert out == '<img src="/a.png" alt=""/>\n'


def test_render_layout(capsys):
    assert main([
        'div', '--layout', 'own-line-with-breaks', '--indent-text', '  ',
        '-t', 'x']) == 0
    out, err = capsys.readouterr()
    assert out == '\n  <div>\n  x\n  </div>\n\n'


def test_render_indent(capsys):
    assert main(['p', '--indent', '2', '-t', 'x']) == 0
    out, err = capsys.readouterr()
    assert out == '\t\t<p>x</p>\n'


def test_render_output_file(tmpdir, capsys):
    path = tmpdir.join('out.html')
    assert main(['p', 'class=intro', '-t', 'hi', '-o', str(path)]) == 0
    assert path.read_text('utf-8') == '<p class="intro">hi</p>\n'
    out, err = capsys.readouterr()
    assert out == ''


def test_render_configuration(tmpdir, capsys):
    conf = tmpdir.join('htmlscope.conf')
    conf.write('layout = own-line\n')
    assert main(['-c', str(conf), 'span']) == 0
    out, err = capsys.readouterr()
    assert out == '\n\t<span></span>\n\n'


def test_render_bad_attribute():
    with pytest.raises(configargparse.ArgumentError):
        main(['a', 'href'])


def test_render_text_in_self_closing():
    with pytest.raises(configargparse.ArgumentError):
        main(['br', '-t', 'foo'])


def test_render_self_closing_layout(capsys):
    assert main(['img', 'src=/a.png', '--layout', 'own-line']) == 0
    out, err = capsys.readouterr()
    assert out == '\n\t<img src="/a.png"/>\n\n'


def test_render_registers_writer_errors():
    with mock.patch('htmlscope.terminal.logging') as logging:
        main(['br'])
        assert sys.excepthook is terminal.error_handler
        assert sys.excepthook(TagNestingError, 'no open tag', None) == 1
        assert logging.critical.call_args_list == [mock.call('no open tag')]
