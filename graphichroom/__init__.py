"""
Graphichroom Ledger - Source Package

A single-session bookkeeping dashboard for small design agencies
and freelancers.

DESIGN PRINCIPLES:
1. Stores own the data, the aggregation engine only reads snapshots
2. Derived numbers are recomputed, never stored
3. AI output is opaque text behind an injectable generator
4. Every user action is audited
"""

__version__ = "1.0.0"
__author__ = "Graphichroom Team"
