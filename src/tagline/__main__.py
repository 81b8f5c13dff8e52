# topmark:header:start
#
#   project      : Tagline
#   file         : __main__.py
#   file_relpath : src/tagline/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Module entry point for running Tagline via ``python -m tagline``.

Equivalent to running the ``tagline`` console script.

Examples:
    List the tagged lines of a file::

        python -m tagline tags --marker begin="# BEGIN" settings.ini
"""

from __future__ import annotations

from tagline.cli.main import cli

if __name__ == "__main__":
    cli()
