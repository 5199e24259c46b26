"""Data models for the web UI.

This module defines the navigation and template context structures
used for server-side rendering of the home page and its partials.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

from snapraid_web.history.models import (
    CHANGE_CATEGORIES,
    STEP_NAMES,
    NavigationList,
    OverviewRow,
    RunDetail,
)


@dataclass(frozen=True)
class NavigationItem:
    """One entry of the top navigation bar.

    Attributes:
        id: Section identifier, also the partial name loaded by the client.
        label: Display label.
    """

    id: str
    label: str


NAVIGATION_ITEMS: tuple[NavigationItem, ...] = (
    NavigationItem(id="overview", label="Overview"),
    NavigationItem(id="details", label="Details"),
)

DEFAULT_SECTION = "overview"


@dataclass
class HomeContext:
    """Template context for the page shell."""

    version: str
    nav_items: list[NavigationItem] = field(
        default_factory=lambda: list(NAVIGATION_ITEMS)
    )
    default_section: str = DEFAULT_SECTION

    def to_dict(self) -> dict:
        """Convert to dictionary for template rendering."""
        return asdict(self)


@dataclass
class OverviewContext:
    """Template context for the overview partial.

    Attributes:
        rows: Overview rows, most recent run first.
        step_names: Step columns in display order.
    """

    rows: list[OverviewRow]
    step_names: tuple[str, ...] = STEP_NAMES

    def to_dict(self) -> dict:
        """Convert to dictionary for template rendering.

        Rows stay dataclass instances so templates can use their methods.
        """
        return {"rows": self.rows, "step_names": self.step_names}


@dataclass
class RunContext:
    """Template context for the run detail partial.

    Attributes:
        run: Detail of the selected run.
        run_ids: All run identifiers, ascending, for the run selector.
        categories: Change categories in display order.
    """

    run: RunDetail
    run_ids: list[str]
    categories: tuple[str, ...] = CHANGE_CATEGORIES

    @classmethod
    def from_resolution(
        cls, run: RunDetail, navigation: NavigationList
    ) -> RunContext:
        """Create context from a resolved run and its navigation list."""
        return cls(run=run, run_ids=navigation.to_list())

    def to_dict(self) -> dict:
        """Convert to dictionary for template rendering."""
        return {
            "run": self.run,
            "run_ids": self.run_ids,
            "categories": self.categories,
        }
