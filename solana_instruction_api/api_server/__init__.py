"""
API server package: JSON-over-HTTP interface.

Routers per concern (keypair, token, message, transfer), shared response
envelope, error handlers and request logging middleware.
"""
