from core.view_model import PAGE_TITLE, RowRecord, build_view_model


def test_fixed_values():
    model = build_view_model()
    assert model.title == PAGE_TITLE == "Golang Standalone GUI Example"
    assert (
        model.unwatch_count,
        model.star_count,
        model.fork_count,
        model.commit_count,
        model.branch_count,
        model.release_count,
        model.contributor_count,
    ) == (3, 0, 2, 31, 0, 1, 1)


def test_rows_in_display_order():
    rows = build_view_model().rows
    assert [row.file_name for row in rows] == ["do_this.go", "do_that.go", "index.go", "resources", "docs"]
    assert rows[0] == RowRecord("do_this.go", "Initial commit", "1 month ago", "file")
    assert rows[-1] == RowRecord("docs", "Initial commit", "2 months ago", "folder-open")


def test_each_call_builds_a_fresh_model():
    first = build_view_model()
    second = build_view_model()
    assert first == second
    assert first is not second
    first.rows.clear()
    assert len(second.rows) == 5
