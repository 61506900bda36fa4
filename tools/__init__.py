# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server that exposes the Cosmos DB tools.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and core/.  It:
#     1. Declares each tool (name, typed parameters, docstring)
#     2. Logs the request and the response
#     3. Hands the arguments to core.dispatcher.ToolDispatcher
#     4. Turns an error ToolResult into a protocol-level error
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate arguments or talk to Cosmos DB (core/ + adapters/)
#   - They do NOT know about the console agent in agent/
#
# TOOL CONTRACTS:
#   The docstrings are what the calling LLM reads to decide when and how to
#   call a tool, so they spell out defaults (partitionKey = id), the merge
#   behaviour of update_item and the exact not-found message.
# =============================================================================
