# =============================================================================
# adapters/__init__.py
# =============================================================================
# Concrete DocumentStore implementations.  These are the only modules that
# import a database SDK.
# =============================================================================
