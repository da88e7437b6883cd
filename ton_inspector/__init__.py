"""
TON Account Inspector — lookup tool for a single TON account address.

Fetches the account record from TonAPI, classifies its lifecycle state and
contract type, and renders a normalized summary through a web page, a JSON
endpoint, or the command line.
"""

__version__ = "0.1.0"
