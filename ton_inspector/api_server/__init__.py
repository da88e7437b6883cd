"""
API server package — HTML lookup page and JSON endpoint over TonAPI.
"""
