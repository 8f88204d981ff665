"""
Book-a-Demo flow: business email classification, the demo modal state
machine and the HubSpot contact proxy.
"""

__version__ = "1.0.0"
