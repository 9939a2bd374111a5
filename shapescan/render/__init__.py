from .html import render_error_html, render_evaluation_html, render_results_html

__all__ = ["render_results_html", "render_error_html", "render_evaluation_html"]
