"""HTML report rendering."""

from __future__ import annotations

from licensescan.report.schemas import ScanReport

_RISK_COLORS: dict[str, str] = {
    "high": "#d32f2f",
    "medium": "#f57c00",
    "low": "#388e3c",
}

# Click a header to sort by that column; the server already renders rows by name.
_SORT_SCRIPT = """\
<script>
document.querySelectorAll("#dependencyTable th.sortable").forEach(function (th) {
  th.style.cursor = "pointer";
  th.addEventListener("click", function () {
    var column = Number(th.dataset.column);
    var asc = th.dataset.dir !== "asc";
    th.dataset.dir = asc ? "asc" : "desc";
    var tbody = th.closest("table").querySelector("tbody");
    var rows = Array.from(tbody.rows);
    rows.sort(function (a, b) {
      var x = a.cells[column].textContent.trim();
      var y = b.cells[column].textContent.trim();
      var order = column === 3
        ? parseFloat(x) - parseFloat(y)
        : x.localeCompare(y, undefined, {numeric: true, sensitivity: "base"});
      return asc ? order : -order;
    });
    rows.forEach(function (row) { tbody.appendChild(row); });
  });
});
</script>"""


def render_html(report: ScanReport) -> str:
    """Return a self-contained HTML page for *report*."""
    summary = report.summary
    risk = summary.risk_level
    color = _RISK_COLORS.get(risk, "#757575")

    body_style = (
        "font-family: -apple-system, BlinkMacSystemFont,"
        " 'Segoe UI', Roboto, sans-serif;"
        " color: #212121; max-width: 1024px; margin: 0 auto; padding: 16px;"
    )
    badge = (
        f'<span style="background: {color}; color: #fff; padding: 2px 10px;'
        f' border-radius: 4px; font-weight: bold;">{_esc(risk.title())} risk</span>'
    )
    timestamp = (
        f'<p style="color: #757575;">Generated {_esc(report.timestamp)}</p>'
        if report.timestamp
        else ""
    )
    licenses = ", ".join(_esc(lic) for lic in summary.unique_licenses) or "none"

    return f"""\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>License Scan Report</title>
</head>
<body style="{body_style}">
<h1>License Scan Report</h1>
{timestamp}
<p>{badge}</p>
<table style="border-collapse: collapse; margin-bottom: 16px;">
  <tr><td style="padding: 4px 12px; font-weight: bold;">Total dependencies</td>
      <td style="padding: 4px 12px;">{summary.total_dependencies}</td></tr>
  <tr><td style="padding: 4px 12px; font-weight: bold;">Licenses</td>
      <td style="padding: 4px 12px;">{licenses}</td></tr>
</table>

<h2>Conflicts</h2>
{_format_list(summary.conflicts, "No license conflicts detected.")}

<h2>Recommendations</h2>
{_format_list(summary.recommendations, "No recommendations.")}

<h2>Dependencies</h2>
{_format_dependencies(report)}
{_SORT_SCRIPT if report.dependencies else ''}
</body>
</html>
"""


def _esc(text: str) -> str:
    """Minimal HTML escaping."""
    return (
        text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")
    )


def _format_list(items: list[str], empty: str) -> str:
    if not items:
        return f"<p>{_esc(empty)}</p>"
    rows = "".join(f"<li>{_esc(item)}</li>" for item in items)
    return f"<ul>{rows}</ul>"


def _format_dependencies(report: ScanReport) -> str:
    if not report.dependencies:
        return "<p>No dependencies found.</p>"

    cell = 'style="padding: 4px 12px; border-bottom: 1px solid #e0e0e0;"'
    head = "".join(
        f'<th class="sortable" data-column="{column}" {cell}>{title}</th>'
        for column, title in enumerate(("Name", "Version", "License", "Confidence", "Source"))
    )
    rows = "\n".join(
        "  <tr>"
        f"<td {cell}>{_esc(dep.name)}</td>"
        f"<td {cell}>{_esc(dep.version)}</td>"
        f"<td {cell}>{_esc(dep.license)}</td>"
        f"<td {cell}>{dep.confidence:.0%}</td>"
        f"<td {cell}>{_esc(dep.source)}</td>"
        "</tr>"
        for dep in sorted(report.dependencies, key=lambda d: (d.name.lower(), d.name))
    )
    return (
        '<table id="dependencyTable" style="border-collapse: collapse; width: 100%;">\n'
        f"  <thead><tr>{head}</tr></thead>\n"
        f"  <tbody>\n{rows}\n  </tbody>\n"
        "</table>"
    )
