"""WSGI entrypoint for serving the Photoness site behind Passenger."""

from app import create_app

# Passenger looks for a module-level variable named ``application``.
application = create_app()
