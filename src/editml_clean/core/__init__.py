# topmark:header:start
#
#   project      : editml-clean
#   file         : __init__.py
#   file_relpath : src/editml_clean/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Front-end independent building blocks shared by the pipeline and the CLI."""
