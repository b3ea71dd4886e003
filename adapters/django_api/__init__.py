"""
Picker Django HTTP adapter.
Thin framework glue over picker/http_api handlers.
"""
