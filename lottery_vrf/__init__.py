"""
Lottery VRF - randomness request/fulfill protocol harness

Local scaffolding for a raffle consumer that depends on a verifiable
randomness coordinator:
- An in-process oracle mock (subscriptions, requests, fulfillment)
- An event-await harness for verifying event-driven workflows
- A tag-addressable mock deployment step for development networks
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
