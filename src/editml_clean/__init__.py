# topmark:header:start
#
#   project      : editml-clean
#   file         : __init__.py
#   file_relpath : src/editml_clean/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""editml-clean package.

editml-clean is a command-line filter that strips EditML editorial markup
(insertions, deletions, comments, highlights and move/copy directives) from a
document and emits the clean prose, reporting structural problems along the way.
"""

from __future__ import annotations
