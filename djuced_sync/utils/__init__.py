"""
Utilities for djuced-sync
"""
