"""
Campaign manager backend.

Record store for campaigns, donations, expenses, voter outreach, secure
messages and notifications, with role-gated create operations.
"""

__version__ = "0.1.0"
