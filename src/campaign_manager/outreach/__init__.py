"""
Voter outreach activities.
"""
