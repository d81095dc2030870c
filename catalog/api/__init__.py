"""
HTTP API for the content catalog
"""
