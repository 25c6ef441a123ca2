"""WSGI entrypoint for the Recipe World application.

The Flask development server is intentionally not started from this module so
that deployments rely on Gunicorn (``gunicorn main:app``). Local development can
still use ``flask --app main run`` which imports the ``app`` object defined
below.
"""

from recipe_world import configure_logging, create_app

configure_logging()
app = create_app()


__all__ = ["app"]
