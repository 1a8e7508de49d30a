#-----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
#-----------------------------------------------------------------------------
"""
Reading and writing of ``.properties`` text, the flat key/value format used
for dataset descriptor files.

The dialect is that of ``java.util.Properties``: ``#`` or ``!`` comments,
``=``, ``:`` or whitespace between key and value, backslash escapes and line
continuations. Files are encoded as ISO-8859-1, with other characters
written as ``\\uXXXX`` escapes.
"""

import datetime

ENCODING = 'latin-1'

_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}
_SEPARATORS = '=:'
_WHITESPACE = ' \t\f'


def _logical_lines(text):
    """Join continuation lines, dropping blanks and comments"""
    buf = None
    for raw in text.splitlines():
        line = raw.lstrip(_WHITESPACE)
        if buf is None:
            if not line or line[0] in '#!':
                continue
            buf = ''
        # an odd number of trailing backslashes continues onto the next line
        trailing = len(line) - len(line.rstrip('\\'))
        if trailing % 2:
            buf += line[:-1]
            continue
        yield buf + line
        buf = None
    if buf:
        yield buf


def _unescape(s):
    out = []
    i = 0
    while i < len(s):
        c = s[i]
        if c != '\\':
            out.append(c)
            i += 1
            continue
        i += 1
        if i >= len(s):
            break
        c = s[i]
        if c == 'u':
            code = s[i + 1:i + 5]
            if len(code) != 4:
                raise ValueError("Malformed \\uxxxx encoding: %r" % s)
            out.append(chr(int(code, 16)))
            i += 5
            continue
        out.append(_ESCAPES.get(c, c))
        i += 1
    # recombine surrogate pairs written for characters beyond the BMP
    return ''.join(out).encode('utf-16-le', 'surrogatepass').decode('utf-16-le')


def _split(line):
    """Find the end of the key and the start of the value"""
    i = 0
    while i < len(line):
        c = line[i]
        if c == '\\':
            i += 2
            continue
        if c in _SEPARATORS or c in _WHITESPACE:
            break
        i += 1
    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def loads(text):
    """Parse properties text into a dict of str to str

    Later duplicates of a key replace earlier ones.
    """
    out = {}
    for line in _logical_lines(text):
        key, value = _split(line)
        out[_unescape(key)] = _unescape(value)
    return out


def load(f):
    """Read properties from an open file, binary or text"""
    data = f.read()
    if isinstance(data, bytes):
        data = data.decode(ENCODING)
    return loads(data)


def _escape(s, is_key=False):
    out = []
    for i, c in enumerate(s):
        if c == '\\':
            out.append('\\\\')
        elif c == '\t':
            out.append('\\t')
        elif c == '\n':
            out.append('\\n')
        elif c == '\r':
            out.append('\\r')
        elif c == '\f':
            out.append('\\f')
        elif c == ' ' and (is_key or i == 0):
            out.append('\\ ')
        elif c in '=:#!':
            out.append('\\' + c)
        elif ord(c) > 0xffff:
            units = c.encode('utf-16-be')
            out.append('\\u%02X%02X\\u%02X%02X' % tuple(units))
        elif ord(c) < 0x20 or ord(c) > 0x7e:
            out.append('\\u%04X' % ord(c))
        else:
            out.append(c)
    return ''.join(out)


def dumps(mapping, comment=None, timestamp=True):
    """Format a mapping as properties text

    Parameters
    ----------
    mapping: dict
        keys and values must be str
    comment: str, optional
        written as a leading ``#`` line
    timestamp: bool
        whether to write the current time as a ``#`` line, as Java does
    """
    lines = []
    if comment:
        for part in comment.splitlines():
            lines.append('#' + ''.join(c if ord(c) < 0x100 else '\\u%04X' % ord(c)
                                       for c in part))
    if timestamp:
        lines.append('#' + datetime.datetime.now().strftime('%a %b %d %H:%M:%S %Y'))
    for key, value in mapping.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError("Properties keys and values must be str, got %r=%r"
                            % (key, value))
        lines.append('%s=%s' % (_escape(key, is_key=True), _escape(value)))
    return '\n'.join(lines) + '\n'


def dump(mapping, f, comment=None, timestamp=True):
    """Write properties to a binary file"""
    f.write(dumps(mapping, comment=comment, timestamp=timestamp).encode(ENCODING))
