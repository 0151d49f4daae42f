# topmark:header:start
#
#   project      : editml-clean
#   file         : __main__.py
#   file_relpath : src/editml_clean/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Module entry point for running editml-clean via ``python -m editml_clean``.

It delegates directly to :func:`editml_clean.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how the tool is launched.

Examples:
    Clean a file using the module interface::

        python -m editml_clean draft.editml -o draft.txt
"""

from __future__ import annotations

from editml_clean.cli.main import cli

if __name__ == "__main__":
    cli()
