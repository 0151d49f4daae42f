# topmark:header:start
#
#   project      : editml-clean
#   file         : __init__.py
#   file_relpath : src/editml_clean/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Click command-line interface for editml-clean."""
