"""
API package containing the HTTP routes.

``router`` aggregates the domain routers; ``main.create_app`` mounts
it under ``/api``.
"""
