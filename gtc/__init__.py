"""
gtc - Git Translate Commit

Translate a commit message into English, review it, and commit it.
"""

__version__ = "0.1.0"
