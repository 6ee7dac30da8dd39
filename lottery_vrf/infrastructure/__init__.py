"""
Infrastructure layer - Adapters and in-process stubs.

This layer contains:
- In-memory event emitter and system clock adapters
- The randomness oracle mock and entropy stubs
- A raffle consumer double for driving the protocol
- Structured logging configuration

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""
