"""Data records handed to the page template."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

PAGE_TITLE = "Golang Standalone GUI Example"


@dataclass(frozen=True)
class RowRecord:
    """One line of the file table."""

    file_name: str
    comment: str
    relative_age: str
    icon_name: str


@dataclass
class ViewModel:
    """Everything the GUI page displays. ``rows`` is in display order."""

    title: str
    unwatch_count: int = 0
    star_count: int = 0
    fork_count: int = 0
    commit_count: int = 0
    branch_count: int = 0
    release_count: int = 0
    contributor_count: int = 0
    rows: List[RowRecord] = field(default_factory=list)


def build_view_model() -> ViewModel:
    """Return the fixed GUI state. A fresh object is built on every call."""
    model = ViewModel(
        title=PAGE_TITLE,
        unwatch_count=3,
        star_count=0,
        fork_count=2,
        commit_count=31,
        release_count=1,
        contributor_count=1,
    )
    model.rows.append(RowRecord("do_this.go", "Initial commit", "1 month ago", "file"))
    model.rows.append(RowRecord("do_that.go", "Initial commit", "1 month ago", "file"))
    model.rows.append(RowRecord("index.go", "Initial commit", "1 month ago", "file"))
    model.rows.append(RowRecord("resources", "Initial commit", "2 months ago", "folder-open"))
    model.rows.append(RowRecord("docs", "Initial commit", "2 months ago", "folder-open"))
    return model


__all__ = ["PAGE_TITLE", "RowRecord", "ViewModel", "build_view_model"]
