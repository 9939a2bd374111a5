from html import escape

from ..evaluation.runner import EvaluationReport
from ..geometry.primitives import DetectionResult


def render_results_html(result: DetectionResult) -> str:
    """
    Markup for one detection run:
    - processing time (ms, 2 decimals) and shape count
    - per shape: type, confidence %, center, bounding-box area
    """
    shapes = result.shapes
    parts = [
        f"<p><strong>Processing Time:</strong> {result.processing_time:.2f}ms</p>",
        f"<p><strong>Shapes Found:</strong> {len(shapes)}</p>",
    ]

    if shapes:
        parts.append("<h4>Detected Shapes:</h4><ul>")
        for shape in shapes:
            parts.append(
                "<li>"
                f"<strong>{escape(shape.shape_type)}</strong><br>"
                f"Confidence: {shape.confidence * 100:.1f}%<br>"
                f"Center: ({shape.center.x:.1f}, {shape.center.y:.1f})<br>"
                f"Area: {float(shape.area):.1f}px²"
                "</li>"
            )
        parts.append("</ul>")
    else:
        parts.append("<p>No shapes detected.</p>")

    return "\n".join(parts)


def render_error_html(message: str) -> str:
    return f"<p>Error: {escape(message)}</p>"


def render_evaluation_html(report: EvaluationReport) -> str:
    rows = []
    for img in report.images:
        if img.error is not None:
            rows.append(
                f"<tr class=\"failed\"><td>{escape(img.name)}</td>"
                f"<td colspan=\"5\">{escape(img.error)}</td></tr>"
            )
            continue
        rows.append(
            "<tr>"
            f"<td>{escape(img.name)}</td>"
            f"<td>{escape(', '.join(img.expected) or '-')}</td>"
            f"<td>{escape(', '.join(img.detected) or '-')}</td>"
            f"<td>{img.precision * 100:.1f}%</td>"
            f"<td>{img.recall * 100:.1f}%</td>"
            f"<td>{img.processing_time:.2f}ms</td>"
            "</tr>"
        )

    return "\n".join(
        [
            f"<p><strong>Images Evaluated:</strong> {len(report.images)} ({len(report.failed)} failed)</p>",
            f"<p><strong>Precision:</strong> {report.precision * 100:.1f}% "
            f"<strong>Recall:</strong> {report.recall * 100:.1f}% "
            f"<strong>F1:</strong> {report.f1 * 100:.1f}%</p>",
            f"<p><strong>Average Time:</strong> {report.average_time:.2f}ms</p>",
            "<table><thead><tr><th>Image</th><th>Expected</th><th>Detected</th>"
            "<th>Precision</th><th>Recall</th><th>Time</th></tr></thead><tbody>",
            *rows,
            "</tbody></table>",
        ]
    )
