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
The htmlscope project provides helpers for writing HTML through a stateful
stream writer which tracks indentation and keeps opening and closing tags
balanced. It consists of:

* :class:`~htmlscope.writer.HtmlWriter` - the writer itself, which buffers
  attributes for the next opened tag and maintains the stack of open tags.

* :class:`~htmlscope.tags.TagScope` - a context manager which opens a tag on
  construction and closes it (exactly once) when released.

* :mod:`htmlscope.elements` - convenience functions such as
  :func:`~htmlscope.elements.render_a` and
  :func:`~htmlscope.elements.render_img` which build the attribute list for
  common elements.

* :class:`~htmlscope.dynamic.DynamicWriter` - a facade which turns arbitrary
  method calls into tags, e.g. ``w.div(class_='note')``.

* ``htmlscope-render`` - a small script which renders a single element from
  the command line.
"""

# Stop pylint's crusade against nicely aligned code
# pylint: disable=bad-whitespace

__project__      = 'htmlscope'
__version__      = '0.1'
__description__  = 'Helpers for writing balanced, indented HTML'
__keywords__     = ['html', 'writer', 'tags']
__author__       = 'Ben Nuttall'
__author_email__ = 'ben@bennuttall.com'
__url__          = 'https://github.com/bennuttall/htmlscope'
__platforms__    = 'ALL'

__requires__ = ['configargparse', 'voluptuous']

__extra_requires__ = {
    'test': ['pytest', 'coverage'],
    'doc':  ['sphinx'],
}

__classifiers__ = [
    'Development Status :: 4 - Beta',
    'Environment :: Console',
    'Environment :: Web Environment',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: BSD License',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3',
    'Topic :: Text Processing :: Markup :: HTML',
]

__entry_points__ = {
    'console_scripts': [
        'htmlscope-render = htmlscope.render:main',
    ],
}
