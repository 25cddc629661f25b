"""
Solana Instruction API — stateless HTTP service over Solana SDK primitives.

Generates keypairs, builds SPL Token and System program instructions, and
signs/verifies messages. Every request is independent; nothing is persisted
and nothing is submitted to the network.
"""

__version__ = "0.1.0"
