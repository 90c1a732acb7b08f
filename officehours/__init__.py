"""
officehours - Validate and schedule candidate interviews within office hours.
"""

__version__ = "0.1.0"
