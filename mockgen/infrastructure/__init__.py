"""Infrastructure layer - Adapters, stubs and observability.

This layer implements the ports defined in the application layer.
"""
