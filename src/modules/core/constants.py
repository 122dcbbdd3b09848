"""Numeric bounds of the storage columns.

Inbound integers above these limits are rejected during validation.
"""

MAX_INTEGER = 2_147_483_647
MAX_BIG_INTEGER = 9_223_372_036_854_775_807
