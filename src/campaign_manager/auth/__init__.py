"""
Users, roles and access control.
"""
