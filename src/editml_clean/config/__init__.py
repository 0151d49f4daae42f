# topmark:header:start
#
#   project      : editml-clean
#   file         : __init__.py
#   file_relpath : src/editml_clean/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Runtime configuration and logging for editml-clean.

There is no configuration file: a run is fully described by the immutable
`RunConfig` built from the command line (see `editml_clean.config.model`).
"""

from __future__ import annotations

from editml_clean.config.model import RunConfig

__all__ = ["RunConfig"]
