"""Route modules of the API stub.

Every module here exposing a top-level ``router`` is picked up by
:func:`turismo.utils.routing.register_routes`.
"""
