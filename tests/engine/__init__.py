# topmark:header:start
#
#   project      : editml-clean
#   file         : __init__.py
#   file_relpath : tests/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end
