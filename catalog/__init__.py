"""
Content catalog: in-memory store, query engine and REST API for dramas and movies
"""
