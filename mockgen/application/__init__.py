"""Application layer - Use cases and orchestration.

This layer contains:
- ports/: Abstract interfaces for the parser and formatter adapters
- services/: The generation pipeline
- synthesis/: Builders of the generated declaration trees

IMPORTANT: This layer may import from domain and config but NOT from
infrastructure.
"""
