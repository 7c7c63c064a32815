"""
SahaRapor - field reporting service for telecom crew operations
"""

__version__ = '0.1.0'
