# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains the operation semantics of the Cosmos DB tool server:
# argument validation, the merge engine, the fault taxonomy, the result
# normalizer and the dispatcher that ties them together.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK or the Azure SDK.
#   The dispatcher talks to the store through the DocumentStore protocol
#   (core/store.py); adapters/ supplies the Azure implementation and the
#   tests supply an in-memory one.
# =============================================================================
