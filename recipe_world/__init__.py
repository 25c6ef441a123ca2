import logging
import os
from typing import Optional

from flask import Flask, flash, redirect, render_template, session, url_for
from werkzeug.wrappers import Response

from .catalog import GeneratedRecipeCatalog
from .models import Recipe, ScreenState
from .state import ViewStateController
from .storage import RecipeRepository

logger = logging.getLogger(__name__)


def create_app(catalog: Optional[RecipeRepository] = None) -> Flask:
    """Create and configure the Flask application.

    Parameters
    ----------
    catalog:
        Optional recipe repository. When ``None`` the application generates
        its recipes with :class:`GeneratedRecipeCatalog`, sized through the
        ``RECIPE_COUNT`` environment variable.
    """

    app = Flask(__name__)
    app.secret_key = os.environ.get("FLASK_SECRET_KEY", "development-secret-change-me")

    if catalog is None:
        catalog = GeneratedRecipeCatalog.from_env()
    app.config["RECIPE_CATALOG"] = catalog

    def view_state() -> ViewStateController:
        controller = ViewStateController(session)
        controller.subscribe(_log_transition)
        return controller

    @app.get("/")
    def index() -> str:
        controller = view_state()

        if controller.screen is ScreenState.ONBOARDING:
            return render_template("onboarding.html", title="Welcome")

        recipes = app.config["RECIPE_CATALOG"].list_recipes()
        return render_template(
            "recipes.html",
            recipes=recipes,
            expanded_ids=set(controller.expansion.expanded_ids()),
            title="Recipes",
        )

    @app.post("/continue")
    def continue_to_recipes() -> Response:
        view_state().continue_()
        return redirect(url_for("index"))

    @app.post("/back")
    def back_to_welcome() -> Response:
        view_state().go_back()
        return redirect(url_for("index"))

    @app.post("/recipes/<int:recipe_id>/toggle")
    def toggle_recipe(recipe_id: int) -> Response:
        catalog_backend: RecipeRepository = app.config["RECIPE_CATALOG"]

        try:
            recipe = catalog_backend.get_recipe(recipe_id)
        except KeyError:
            flash("Recipe not found.", "error")
            return redirect(url_for("index"))

        controller = view_state()
        if controller.screen is not ScreenState.RECIPE_LIST:
            return redirect(url_for("index"))

        controller.toggle_card(recipe.id)
        return redirect(url_for("index", _anchor=f"recipe-{recipe.id}"))

    return app


def configure_logging() -> None:
    """Apply ``RECIPE_WORLD_LOG_LEVEL`` to the package logger.

    Called once by the process entrypoint, not by :func:`create_app`.
    """

    raw = os.environ.get("RECIPE_WORLD_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError(f"RECIPE_WORLD_LOG_LEVEL must be a logging level name, got {raw!r}.")
    logger.setLevel(level)


def _log_transition(previous: ScreenState, current: ScreenState) -> None:
    logger.info("Screen changed from %s to %s", previous.value, current.value)


__all__ = ["configure_logging", "create_app", "Recipe", "ScreenState"]
