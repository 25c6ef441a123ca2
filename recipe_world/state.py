"""View state for the two-screen recipe UI.

Both the screen selection and the per-card expansion flags are kept in a
caller-supplied mutable mapping. The web layer passes the Flask session so the
state outlives a single request; tests pass a plain ``dict``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, MutableMapping, Optional

from .models import ScreenState


SCREEN_KEY = "screen"
EXPANDED_KEY = "expanded_recipes"

ScreenListener = Callable[[ScreenState, ScreenState], None]

logger = logging.getLogger(__name__)


class ExpansionState:
    """Expanded/collapsed flag per recipe card, keyed by recipe id."""

    def __init__(self, store: MutableMapping[str, Any]) -> None:
        self._store = store

    def expanded_ids(self) -> List[int]:
        raw = self._store.get(EXPANDED_KEY) or []
        return [recipe_id for recipe_id in raw if isinstance(recipe_id, int)]

    def is_expanded(self, recipe_id: int) -> bool:
        return recipe_id in self.expanded_ids()

    def toggle(self, recipe_id: int) -> bool:
        """Flip the card's flag and return the new value."""

        expanded = self.expanded_ids()
        if recipe_id in expanded:
            expanded.remove(recipe_id)
            is_expanded = False
        else:
            expanded.append(recipe_id)
            is_expanded = True

        # Reassign rather than mutate so session backends notice the change.
        self._store[EXPANDED_KEY] = sorted(expanded)
        logger.debug("Recipe %s %s", recipe_id, "expanded" if is_expanded else "collapsed")
        return is_expanded

    def clear(self) -> None:
        self._store.pop(EXPANDED_KEY, None)


class ViewStateController:
    """Selects between the onboarding screen and the recipe list.

    Transitions are total and idempotent: calling :meth:`continue_` while the
    list is already shown, or :meth:`go_back` while onboarding, leaves the
    state untouched and notifies no listener.
    """

    def __init__(self, store: Optional[MutableMapping[str, Any]] = None) -> None:
        self._store: MutableMapping[str, Any] = store if store is not None else {}
        self._listeners: List[ScreenListener] = []
        self.expansion = ExpansionState(self._store)

    @property
    def screen(self) -> ScreenState:
        try:
            return ScreenState(self._store.get(SCREEN_KEY))
        except ValueError:
            return ScreenState.ONBOARDING

    def subscribe(self, listener: ScreenListener) -> Callable[[], None]:
        """Register ``listener`` for screen changes and return an unsubscribe callable."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def continue_(self) -> ScreenState:
        return self._transition(ScreenState.RECIPE_LIST)

    def go_back(self) -> ScreenState:
        previous = self.screen
        current = self._transition(ScreenState.ONBOARDING)
        if previous is not current:
            # Leaving the list tears its cards down.
            self.expansion.clear()
        return current

    def toggle_card(self, recipe_id: int) -> bool:
        """Flip a card on the recipe list and return its new state.

        Cards only exist while the list is shown; a toggle arriving on the
        onboarding screen is ignored and reports the card as collapsed.
        """

        if self.screen is not ScreenState.RECIPE_LIST:
            logger.debug("Ignoring toggle of recipe %s outside the recipe list", recipe_id)
            return False
        return self.expansion.toggle(recipe_id)

    def _transition(self, target: ScreenState) -> ScreenState:
        previous = self.screen
        if previous is target:
            return previous

        self._store[SCREEN_KEY] = target.value
        for listener in list(self._listeners):
            listener(previous, target)
        return target


__all__ = ["ExpansionState", "ScreenListener", "ViewStateController"]
