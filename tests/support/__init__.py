"""
Test Support

Shared test doubles for the siteverify suite.

Usage:
    from tests.support.fakes import FakeSession
"""
