"""
Campaign records.
"""
