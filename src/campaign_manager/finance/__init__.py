"""
Campaign donations and expenses.
"""
