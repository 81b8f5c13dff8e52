# topmark:header:start
#
#   project      : Tagline
#   file         : __init__.py
#   file_relpath : tests/document/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end
