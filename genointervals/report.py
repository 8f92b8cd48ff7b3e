# File: genointervals/report.py
# Location: genointervals/genointervals/report.py

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import ParsedDataset

logger = logging.getLogger("genointervals")


def _format_cell(value: Any) -> str:
    if isinstance(value, float):
        return "NaN" if value != value else f"{value:.6g}"
    return str(value)


def generate_html_report(
    dataset: ParsedDataset, output_file: str, cfg: Optional[Dict[str, Any]] = None
) -> Path:
    """
    Write an HTML summary of a parsed dataset.

    Parameters
    ----------
    dataset : ParsedDataset
        The finalized dataset to summarize.
    output_file : str
        Path of the HTML file to write; parent directories are created.
    cfg : Dict[str, Any], optional
        Configuration dictionary; ``report_title`` sets the page title.

    Returns
    -------
    Path
        Path of the written report.
    """
    cfg = cfg or {}
    templates_dir = Path(__file__).parent / "templates"
    if not templates_dir.exists():
        raise FileNotFoundError(f"Templates directory not found at: {templates_dir}")

    env = Environment(
        loader=FileSystemLoader(str(templates_dir)), autoescape=select_autoescape(["html"])
    )
    template = env.get_template("summary.html")

    frame = dataset.statistics_frame()
    rows = [[_format_cell(v) for v in record] for record in frame.itertuples(index=False)]
    html_content = template.render(
        title=cfg.get("report_title", "Interval parsing summary"),
        dataset=dataset,
        columns=list(frame.columns),
        rows=rows,
    )

    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as out_f:
        out_f.write(html_content)
    logger.info(f"HTML report written to {output_path}")
    return output_path
