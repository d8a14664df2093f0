"""Line-based validators for dashboard documents."""

from dashboard_linter.validators.line_checker import check_line, get_warnings, render_document

__all__ = ["check_line", "get_warnings", "render_document"]
