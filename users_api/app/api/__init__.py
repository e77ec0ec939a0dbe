"""
API package.

``router.py`` builds the top‑level router from the modules in
``endpoints``; ``main.create_app`` includes it in the application.
"""
