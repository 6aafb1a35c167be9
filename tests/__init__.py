"""
Test suite for the resource curator

Unit tests for the verification layer, catalog selection, curation pipeline,
configuration, API endpoints and CLI. No test performs real network I/O:
HTTP is served by httpx.MockTransport or stub verifiers.
"""
