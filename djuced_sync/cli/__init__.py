#!/usr/bin/env python3
"""
Command-line interface for djuced-sync
"""

from .main import app, main

__all__ = ["app", "main"]
