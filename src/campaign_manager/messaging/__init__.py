"""
Secure messages exchanged within a campaign.
"""
