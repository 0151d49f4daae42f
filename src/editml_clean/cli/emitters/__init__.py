# topmark:header:start
#
#   project      : editml-clean
#   file         : __init__.py
#   file_relpath : src/editml_clean/cli/emitters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Human-readable emitters for the CLI."""
