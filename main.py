#!/usr/bin/env python3
# git clone strategy benchmark
#
# Runs each clone strategy against every repository given on the command line:
#   - plain clone
#   - shallow clone (--depth 1)
#   - single branch clone, once per requested branch
#   - selected branches clone, with and without tags (two or more branches)
#
# The transcript is printed to the terminal and saved, without escape
# sequences, to <program name>.report in the current directory.
#
# Usage (after `pip install -e .`):
#   python main.py [-n] <remote> <repo-info> [<repo-info> ...]

import sys

from git_clone_bench.cli import main


if __name__ == '__main__':
    sys.exit(main())
