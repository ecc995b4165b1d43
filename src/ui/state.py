"""Explicit UI state owned by the page's presentation components."""

from dataclasses import dataclass

# Page offset (px) past which the navigation bar switches to its solid style
SCROLL_THRESHOLD = 20


@dataclass
class NavState:
    """Navigation bar flags for one page instance."""

    menu_open: bool = False
    scrolled: bool = False

    def toggle_menu(self) -> None:
        self.menu_open = not self.menu_open

    def close_menu(self) -> None:
        self.menu_open = False

    def update_scroll(self, offset: float) -> bool:
        """Record the window offset.

        Returns:
            True if the scrolled flag changed.
        """
        scrolled = offset > SCROLL_THRESHOLD
        changed = scrolled != self.scrolled
        self.scrolled = scrolled
        return changed


@dataclass
class ChatWidgetState:
    """Open/closed flag of the floating chat widget."""

    is_open: bool = False

    def toggle(self) -> None:
        self.is_open = not self.is_open

    def close(self) -> None:
        self.is_open = False
