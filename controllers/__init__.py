"""
Flask controllers.
"""
