"""
Infrastructure package for the Stream Adaptor.
Contains the glue that connects serializers to HTTP client libraries.
"""
