"""Navigation capability used to send the user to the identity provider."""

from __future__ import annotations

import logging
import webbrowser
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Navigator(Protocol):
    """Anything that can move the current browsing context to another URL."""

    def navigate_to(self, url: str) -> None:
        """Load ``url`` in place of the current page."""


class WebBrowserNavigator:
    """Opens redirect targets in the system web browser.

    Suited to desktop and command line hosts that drive an interactive login.
    """

    def __init__(self, *, new_tab: bool = True):
        self.new_tab = new_tab

    def navigate_to(self, url: str) -> None:
        logger.debug("Opening browser at %s", url)
        if self.new_tab:
            opened = webbrowser.open_new_tab(url)
        else:
            opened = webbrowser.open(url)
        if not opened:
            logger.warning("No browser could be launched for %s", url)


class NullNavigator:
    """Navigator for headless hosts where no browser is available."""

    def navigate_to(self, url: str) -> None:
        logger.debug("Ignoring navigation to %s (headless)", url)


__all__ = ["Navigator", "NullNavigator", "WebBrowserNavigator"]
