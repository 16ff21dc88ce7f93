"""
Expense Tracker - Source Package

A small interactive command-line tool for recording personal expenses
in a local JSON file.

DESIGN PRINCIPLES:
1. One user, one file, one operation at a time
2. Every operation loads fresh from disk and saves the whole collection
3. Bad input is rejected at the prompt, never in the data layer
4. A missing or corrupt file reads as an empty collection
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Team"
