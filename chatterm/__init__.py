"""
chatterm - terminal mock-up of a chat client
"""

__version__ = "0.1.0"
