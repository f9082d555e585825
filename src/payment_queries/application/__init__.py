"""Application layer - Query services and port definitions.

This layer contains:
- Services: Read-side queries and aggregates over payments
- Ports: Abstract interfaces for external dependencies

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
