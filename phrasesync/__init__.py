"""
phrasesync: keeps every language of a localization project aligned with its
default language.
"""

__version__ = "1.0.0"
