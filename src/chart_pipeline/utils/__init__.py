"""
Reusable pipeline utilities (colors, formatting, value defaults, logging).
"""
