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

import os
import sys

import cmdline


def main(argv=None):
    args = cmdline.parse(sys.argv if argv is None else argv, [
        ("help", "Simple program to rename a file"),
        ("version", "1.0"),
        ("input", "Input file to rename"),
        (("-o", "--output", "output"), "Output file name", "output.txt"),
        (("--verbose",), "Print more info about what is being done", "false"),
        ])

    try:
        os.rename(args["input"], args["output"])
    except OSError:
        print(f"Failed to rename {args['input']}", file=sys.stderr)
        return 1
    if args["--verbose"] == "true":
        print(f"File was renamed to {args['output']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
