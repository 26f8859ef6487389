#!/usr/bin/env python3


# part of the cmdline software package
# Copyright 2023 by the cmdline authors
# All rights reserved.
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
# OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.


import unittest

from cmdline.text import merge_columns, presplit_textwrap


class PresplitTextwrapTests(unittest.TestCase):

    def test_single_spaces(self):
        words = "hello there. how are you? i am fine! so there's that.".split()
        self.assertEqual(presplit_textwrap(words), "hello there. how are you? i am fine! so there's that.")

    def test_two_spaces(self):
        words = "hello there. how are you? i am fine! so there's that.".split()
        self.assertEqual(
            presplit_textwrap(words, two_spaces=True),
            "hello there.  how are you?  i am fine!  so there's that.")
        self.assertEqual(
            presplit_textwrap(words, 20, two_spaces=True),
            "hello there.  how\nare you?  i am fine!\nso there's that.")

    def test_long_word(self):
        self.assertEqual(
            presplit_textwrap(["a", "supercalifragilistic", "b"], 10),
            "a\nsupercalifragilistic\nb")

    def test_empty(self):
        self.assertEqual(presplit_textwrap([]), "")
        self.assertEqual(presplit_textwrap(["", "x", ""]), "x")


class MergeColumnsTests(unittest.TestCase):
    maxDiff = None

    def test_columns(self):
        self.assertEqual(
            merge_columns(("1\n2\n3", 5), ("howdy\nhello\nhi, how are you?\ni'm fine.", 17), ("ending\ntext!", 80)),
            "1    howdy            ending\n2    hello            text!\n3    hi, how are you?\n     i'm fine.")

    def test_too_wide(self):
        self.assertEqual(
            merge_columns(("", 2), ("--a-very-long-option", 10), ("desc", 40)),
            "  --a-very-long-option\n            desc")

    def test_exact_fit_counts_spacing(self):
        self.assertEqual(merge_columns(("abcdefghi", 10), ("x", 10)), "abcdefghi x")
        self.assertEqual(merge_columns(("abcdefghij", 10), ("x", 10)), "abcdefghij\n          x")

    def test_indent(self):
        self.assertEqual(merge_columns(("", 4), ("a\nb", 10)), "    a\n    b")


if __name__ == "__main__":
    unittest.main()
