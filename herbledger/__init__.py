"""
Herb provenance ledger.
Key-addressed herb batch records over an ordered key-value world state.
"""

__version__ = "1.0.0"
