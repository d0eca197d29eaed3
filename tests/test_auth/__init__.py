"""
Auth Module Tests
----------------
Test suite for the token lifecycle and request authentication.
Tests cover signing keys, token generation, validation, the request filter
and the authentication entry point.
"""
