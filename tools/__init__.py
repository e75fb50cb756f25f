# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP clients and core/.  Each
#   tool:
#     1. Calls into core/ (resolver, matcher, contribution service, ...)
#     2. Converts dataclasses to dicts for JSON
#     3. Turns failures into {"error": ...} payloads instead of raising
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain business logic (that's in core/)
#   - They do NOT know about Google ADK
# =============================================================================
