"""
Campaign notifications emitted after each successful mutation.
"""
