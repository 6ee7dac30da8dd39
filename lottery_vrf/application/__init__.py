"""
Application layer - Ports and verification services.

This layer contains:
- Port definitions (abstract interfaces for infrastructure)
- The event-await harness used to verify event-driven workflows

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, bootstrap
"""
