"""
Data models for the Book-a-Demo flow.
"""

from .contact import ContactSubmission

__all__ = ["ContactSubmission"]
