"""
Tests for the sailresponse package.
"""
