# topmark:header:start
#
#   project      : editml-clean
#   file         : constants.py
#   file_relpath : src/editml_clean/constants.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""editml-clean constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

APP_NAME: str = "editml-clean"

APP_VERSION: str = get_version(APP_NAME)

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "EDITML_CLEAN_LOG_LEVEL"

INPUT_ENCODING: str = "utf-8"
