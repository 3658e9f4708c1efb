"""
API package.

``router`` in ``api/router.py`` bundles every endpoint and is mounted
under ``/api`` by the application factory.
"""
