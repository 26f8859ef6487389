
# please leave this copyright notice in binary distributions.
license = """
cmdline/text.py
part of the cmdline software package
Copyright 2023 by the cmdline authors
All rights reserved.

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included
in all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""


def presplit_textwrap(words, margin=79, *, two_spaces=False):
    """
    Joins "words" into lines no longer than "margin"
    and returns the result as a string.

    "words" is an iterable of pre-split words, e.g.
    the result of description.split().  A word longer
    than "margin" gets a line to itself; it's never broken.

    If "two_spaces" is true, words ending in sentence-ending
    punctuation ('.', '?', and '!') are followed by two spaces.
    Option descriptions are reproduced as written, so it's
    off by default.
    """
    col = 0
    lastword = ''
    text = []

    for word in words:
        if not word:
            continue

        if two_spaces and lastword.endswith(('.', '?', '!')):
            space = "  "
        else:
            space = " "

        if (len(word) + len(space) + col) > margin:
            if col:
                text.append('\n')
                col = 0
        elif col:
            text.append(space)
            col += len(space)

        text.append(word)
        col += len(word)
        lastword = word

    return "".join(text)


def merge_columns(*blobs, column_spacing=1):
    """
    Lays out blobs of text side by side and returns the result.

    Each blob is a tuple (text, width); lines of text are
    padded to width.  A line that doesn't leave column_spacing
    spaces free is emitted as-is, and the columns to its right
    wait until the column has no more lines that don't fit.
    That's how a flag group too long for the flag column ends
    up with its description starting on the next line:

        merge_columns(("", 2), ("--a-very-long-option", 10), ("desc", 40))

    returns

          --a-very-long-option
                    desc

    Output lines are rstripped.  This doesn't wrap text;
    wrap each blob with presplit_textwrap() first.
    """
    columns = [s.rstrip().split('\n') for s, width in blobs]
    widths = [width for s, width in blobs]
    # index of the last line in each column that doesn't fit
    overflows = [
        max((i for i, line in enumerate(lines) if (len(line) + column_spacing) > width), default=-1)
        for lines, width in zip(columns, widths)
        ]
    positions = [0] * len(columns)

    output = []
    while any(position < len(lines) for position, lines in zip(positions, columns)):
        line = []
        for i, (lines, width) in enumerate(zip(columns, widths)):
            position = positions[i]
            if position == len(lines):
                line.append(" " * width)
                continue
            positions[i] += 1
            if position <= overflows[i]:
                line.append(lines[position])
                break
            line.append(lines[position].ljust(width))
        output.append("".join(line).rstrip())

    return "\n".join(output).rstrip()
