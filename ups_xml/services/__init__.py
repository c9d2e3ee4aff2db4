"""Service layer for the UPS XML client.

Request building, response normalization, service-code resolution,
tracking reconciliation, and the client facade that ties them together.
"""
