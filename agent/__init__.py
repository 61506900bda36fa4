# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK console agent that drives the Cosmos DB
# tool server.
#
# ARCHITECTURAL ROLE:
#   The agent starts tools/mcp_server.py as an MCP subprocess and lets an
#   LLM decide which of the four tools to call for a user's question.
#
#   - It is NOT part of the server: the server runs without it, and any
#     other MCP client can use the tools the same way
#   - It holds no data-access logic (that's in core/ and adapters/)
#   - It only configures the model, the prompt and the MCP connection
# =============================================================================
