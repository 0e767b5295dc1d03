"""
HTTP layer.

``router.py`` aggregates the endpoint routers; ``deps.py`` holds the
dependencies that hand the application's inventory store to them.
"""
