"""Pull request report building and comment reconciliation."""

from link_changed_markdown.pr.comment_reconciler import CommentReconciler, ReconcileAction
from link_changed_markdown.pr.report_builder import ReportBuilder, build_report

__all__ = ["CommentReconciler", "ReconcileAction", "ReportBuilder", "build_report"]
