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
Defines the small protocol used to decide whether a value still needs
escaping before it is placed in an HTML document. Any object with an
``__html__`` method is assumed to know how to render itself; plain strings
are escaped.

.. autoclass:: literal

.. autoclass:: content

.. autofunction:: html

.. autofunction:: text
"""


class literal(str):
    "A str sub-class that assumes its content is HTML"
    def __html__(self):
        return self


class content(str):
    "A str sub-class which escapes content for inclusion in HTML"
    def __html__(self):
        return literal(self.\
                replace('&', '&amp;').\
                replace('"', '&quot;').\
                replace('<', '&lt;').\
                replace('>', '&gt;'))


def html(s):
    "Return s in a form suitable for inclusion in an HTML document"
    if hasattr(s, '__html__'):
        return s.__html__()
    else:
        return content(text(s)).__html__()


def text(value):
    """
    Convert *value* to the text used for an attribute value. :data:`None`
    becomes the empty string, :class:`bytes` are decoded as UTF-8, and
    :class:`str` instances (including sub-classes like :class:`literal`) are
    returned unchanged so that they keep their ``__html__`` behaviour.
    """
    if value is None:
        return ''
    elif isinstance(value, str):
        return value
    elif isinstance(value, (bytes, bytearray)):
        return value.decode('utf-8')
    else:
        return str(value)
