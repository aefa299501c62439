"""
Textual UI for chatterm.
"""
