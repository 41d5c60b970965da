"""Allow ``python -m grepfront`` invocation.

The interpreter reports ``__main__.py`` as ``argv[0]``; the program name
is substituted so sub-program identities read ``grepfront-<subcommand>``.
"""

from __future__ import annotations

import sys

from grepfront.cli.app import PROGRAM_NAME, cli

if __name__ == "__main__":
    cli([PROGRAM_NAME, *sys.argv[1:]])
