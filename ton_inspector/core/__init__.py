"""
Core utilities — exceptions shared by the client, service, web app and CLI.
"""
