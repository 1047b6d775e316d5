"""
SecureMSG - Repeating-Key Text Obfuscation Tool

Shifts each character of a message by the code point of the matching key
character, rates key strength, and keeps a local history of past operations.
Not a secure cipher: the transform is trivially reversible by analysis.
"""

__version__ = "1.0.0"
__author__ = "SecureMSG Contributors"
