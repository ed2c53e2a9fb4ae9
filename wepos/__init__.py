"""
WePOS - a standalone point of sale frontend for ERPNext.

Serves the POS application shell on ``?wcpos=true`` requests, isolated from
the website theme's assets, and provides the helpers the POS client and the
admin settings screen consume.
"""

__version__ = "1.0.0"
