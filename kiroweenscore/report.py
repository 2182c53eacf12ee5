"""
Report rendering for scored submissions.

Markdown is the canonical rendering. HTML is produced from it with the
``markdown`` package and plain text is produced from that HTML with
BeautifulSoup, so all three formats always carry the same content.
"""

import logging
from pathlib import Path
from typing import List, Union

import markdown
from bs4 import BeautifulSoup, Tag

from kiroweenscore.categories import category_name
from kiroweenscore.scoring import HackathonScore

logger = logging.getLogger(__name__)

REPORT_FORMATS = ("md", "txt", "html")

DEFAULT_PROJECT_NAME = "Untitled Project"


def _plain(element: Tag) -> str:
    return " ".join(element.get_text().split())


def _cell(text: str) -> str:
    """Make text safe for a single Markdown table cell."""
    return " ".join(text.split()).replace("|", "\\|")


class ReportRenderer:
    """Render a HackathonScore as Markdown, HTML or plain text."""

    def __init__(self, fmt: str = "md"):
        if fmt not in REPORT_FORMATS:
            raise ValueError(f"Unsupported report format {fmt!r} (expected one of {', '.join(REPORT_FORMATS)})")
        self.fmt = fmt

    def render(self, score: HackathonScore) -> str:
        if self.fmt == "md":
            return self.render_markdown(score)
        if self.fmt == "html":
            return self.render_html(score)
        return self.render_text(score)

    def write(self, score: HackathonScore, output_path: Union[str, Path]) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.render(score))
        logger.info(f"Wrote {self.fmt} report to {output_path}")
        return output_path

    # ------------------------------------------------------------------
    # Markdown
    # ------------------------------------------------------------------

    def render_markdown(self, score: HackathonScore) -> str:
        categories = score.category_analysis
        criteria = score.criteria_analysis
        title = score.project_name or DEFAULT_PROJECT_NAME

        md = []
        md.append(f"# Kiroween Hackathon Analysis: {title}")
        md.append("")

        md.append("## Final Score")
        md.append("")
        md.append(f"**Combined Viability**: {score.combined_viability:.1f}/5")
        md.append("")
        md.append(f"**Judged Criteria Score**: {criteria.final_score:.1f}/5")
        md.append("")
        md.append(f"*{criteria.final_score_explanation}*")
        md.append("")

        md.append("## Category Evaluation")
        md.append("")
        md.append("| Category | Fit Score | Improvement Suggestions |")
        md.append("|---|:---:|---|")
        for evaluation in categories.evaluations:
            suggestions = "; ".join(evaluation.improvement_suggestions) or "None"
            md.append(
                f"| {category_name(evaluation.category)} | {evaluation.fit_score:.1f}/10 "
                f"| {_cell(suggestions)} |"
            )
        md.append("")
        md.append(f"**Best Matching Category**: {category_name(categories.best_match)}")
        md.append("")
        md.append(categories.best_match_reason)
        md.append("")

        md.append("## Criteria Scoring")
        md.append("")
        md.append("| Criterion | Score | Justification |")
        md.append("|---|:---:|---|")
        for criterion in criteria.scores:
            md.append(
                f"| {criterion.name} | {criterion.score:.1f}/5 | {_cell(criterion.justification)} |"
            )
        md.append("")

        for criterion in criteria.scores:
            md.append(f"### {criterion.name}")
            md.append("")
            for name, sub in criterion.sub_scores.items():
                md.append(f"- {name}: {sub.score:.1f}/5. {sub.explanation}")
            md.append("")

        md.append("## Improvement Suggestions")
        md.append("")
        suggestions = categories.best_evaluation.improvement_suggestions
        if suggestions:
            for suggestion in suggestions:
                md.append(f"- {suggestion}")
        else:
            md.append(f"No further suggestions for the {category_name(categories.best_match)} category.")
        md.append("")

        return "\n".join(md)

    # ------------------------------------------------------------------
    # HTML / plain text
    # ------------------------------------------------------------------

    def render_html(self, score: HackathonScore) -> str:
        return markdown.markdown(self.render_markdown(score), extensions=["tables"])

    def render_text(self, score: HackathonScore) -> str:
        soup = BeautifulSoup(self.render_html(score), "html.parser")

        blocks = []
        for element in soup.children:
            if not isinstance(element, Tag):
                continue
            block = self._text_block(element)
            if block:
                blocks.append(block)

        return "\n\n".join(blocks) + "\n"

    def _text_block(self, element: Tag) -> str:
        text = _plain(element)

        if element.name == "h1":
            return f"====== {text.upper()} ======"
        if element.name == "h2":
            return f"--- {text} ---"
        if element.name in ("ul", "ol"):
            return "\n".join(
                f"- {_plain(li)}" for li in element.find_all("li")
            )
        if element.name == "table":
            return "\n".join(self._table_rows(element))
        # h3, p and anything else
        return text

    def _table_rows(self, table: Tag) -> List[str]:
        rows = []
        for tr in table.find_all("tr"):
            if tr.find("th") is not None:
                continue
            cells = [_plain(td) for td in tr.find_all("td")]
            rows.append(" - ".join(cells))
        return rows


def render_report(score: HackathonScore, fmt: str = "md") -> str:
    return ReportRenderer(fmt).render(score)
