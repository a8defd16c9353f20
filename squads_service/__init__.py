"""
Squads service: HTTP CRUD API for multisig groups, their vaults and members.
"""

__version__ = "0.1.0"
