"""grepfront — command-line front-end for a code-scanning engine.

Routes ``grepfront <subcommand> ...`` to the matching subcommand handler,
falling back to ``scan`` when no subcommand is named.
"""

from grepfront.version import __version__

__all__: list[str] = ["__version__"]
