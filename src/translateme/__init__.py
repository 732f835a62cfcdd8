"""
TranslateMe - translate text through MyMemory and keep a translation history.
"""

__version__ = "1.0.0"
