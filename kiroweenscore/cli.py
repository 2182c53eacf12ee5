"""CLI interface for kiroweenscore"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from tqdm import tqdm

from kiroweenscore import __version__
from kiroweenscore.categories import KiroweenCategory, category_name
from kiroweenscore.config import RESULTS_DIR, SUPPORTED_SUBMISSION_SUFFIXES
from kiroweenscore.leaderboard import Leaderboard
from kiroweenscore.report import ReportRenderer
from kiroweenscore.scoring import ScoringEngine
from kiroweenscore.submission import ProjectSubmission, SubmissionError, load_submission
from kiroweenscore.validation import SubmissionValidator, ValidationReport

logger = logging.getLogger(__name__)

CATEGORY_TAGS = [c.value for c in KiroweenCategory]

submission_argument = click.argument(
    "submission", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
results_dir_option = click.option(
    "--results-dir", type=click.Path(file_okay=False, path_type=Path), default=RESULTS_DIR,
    show_default=True, help="Directory holding saved results"
)


def _load(path: Path) -> ProjectSubmission:
    try:
        return load_submission(path)
    except SubmissionError as e:
        raise click.ClickException(str(e))


def _echo_validation(report: ValidationReport, err: bool = False):
    for error in report.errors:
        click.echo(f"[ERROR] {error}", err=err)
    for warning in report.warnings:
        click.echo(f"[WARNING] {warning}", err=err)


@click.group()
@click.version_option(version=__version__, prog_name="kiroweenscore")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """kiroweenscore - rule-based scoring for Kiroween hackathon submissions

    Scores category fit (0-10) for Resurrection, Frankenstein, Skeleton Crew
    and Costume Contest, the three judged criteria (1-5), and a combined
    viability figure (0-5).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@submission_argument
@click.option("--format", "fmt", type=click.Choice(["json", "md", "txt", "html"]), default="md",
              show_default=True, help="Output format")
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), help="Write the report to this file")
@click.option("--strict", is_flag=True, help="Refuse to score submissions that fail validation")
@click.option("--save", is_flag=True, help="Save the result for the leaderboard")
@results_dir_option
def score(submission: Path, fmt: str, output: Optional[Path], strict: bool, save: bool,
          results_dir: Path):
    """Score a single submission file"""
    project = _load(submission)

    report = SubmissionValidator().validate(project)
    _echo_validation(report, err=True)
    if strict and not report.is_valid:
        raise click.ClickException(
            f"{submission} failed validation ({len(report.errors)} error(s))"
        )

    result = ScoringEngine().score(project)

    if fmt == "json":
        content = json.dumps(result.to_dict(), indent=2)
    else:
        content = ReportRenderer(fmt).render(result)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
        click.echo(f"[OK] Report written to: {output}")
    else:
        click.echo(content)

    if save:
        saved = Leaderboard(results_dir).save_result(result)
        click.echo(f"[OK] Result saved to: {saved}")


@main.command()
@submission_argument
def categories(submission: Path):
    """Show category fit scores for a submission"""
    project = _load(submission)
    analysis = ScoringEngine().analyze_categories(project)

    click.echo(f"Category fit: {project.project_name}")
    click.echo("-" * 40)
    for evaluation in analysis.evaluations:
        click.echo(f"  {category_name(evaluation.category):<20}{evaluation.fit_score:>5.1f}/10")
    click.echo("-" * 40)
    click.echo(f"Best match: {category_name(analysis.best_match)}")
    click.echo(f"  {analysis.best_match_reason}")


@main.command()
@submission_argument
def criteria(submission: Path):
    """Show judged criteria scores for a submission"""
    project = _load(submission)
    analysis = ScoringEngine().analyze_criteria(project)

    click.echo(f"Judged criteria: {project.project_name}")
    click.echo("-" * 40)
    for criterion in analysis.scores:
        click.echo(f"  {criterion.name:<28}{criterion.score:>4.1f}/5")
        for name, sub in criterion.sub_scores.items():
            click.echo(f"    - {name:<24}{sub.score:>4.1f}/5")
    click.echo("-" * 40)
    click.echo(f"Final score: {analysis.final_score:.1f}/5")


@main.command()
@submission_argument
@click.option("--require-kiro-usage", is_flag=True, help="Treat a missing Kiro usage text as an error")
def validate(submission: Path, require_kiro_usage: bool):
    """Validate a submission without scoring it"""
    project = _load(submission)
    report = SubmissionValidator().validate(project, require_kiro_usage=require_kiro_usage)

    _echo_validation(report)
    if not report.is_valid:
        sys.exit(1)
    click.echo(f"[OK] {submission} is valid")


@main.command()
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
@results_dir_option
def batch(directory: Path, results_dir: Path):
    """Score every submission file in a directory and save the results"""
    files = sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in SUPPORTED_SUBMISSION_SUFFIXES
    )
    if not files:
        raise click.ClickException(f"No submission files found in {directory}")

    engine = ScoringEngine()
    lb = Leaderboard(results_dir)
    results = []
    failed = []

    for path in tqdm(files, desc="Scoring", unit="file"):
        try:
            project = load_submission(path)
        except SubmissionError as e:
            logger.warning(f"Skipping {path.name}: {e}")
            failed.append(path.name)
            continue
        result = engine.score(project)
        lb.save_result(result)
        results.append(result)

    summary = engine.aggregate_results(results)
    click.echo(f"\n[OK] Scored {summary['total_submissions']} submission(s), results in {results_dir}")
    click.echo(f"  Average viability: {summary['viability_avg']:.2f}/5")
    click.echo(f"  Average criteria score: {summary['final_score_avg']:.2f}/5")
    for tag, count in summary["best_match_counts"].items():
        click.echo(f"  {category_name(tag):<18}{count}")
    if failed:
        click.echo(f"[WARNING] Skipped {len(failed)} invalid file(s): {', '.join(failed)}")


@main.command()
@results_dir_option
@click.option("--category", type=click.Choice(CATEGORY_TAGS), help="Only rank this best-match category")
@click.option("--limit", default=10, show_default=True, type=int, help="Maximum number of entries")
@click.option("--export-md", type=click.Path(dir_okay=False, path_type=Path), help="Export as Markdown file")
def leaderboard(results_dir: Path, category: Optional[str], limit: int, export_md: Optional[Path]):
    """Generate leaderboard from saved results"""
    lb = Leaderboard(results_dir)
    leaderboard_data = lb.generate(category=category, limit=limit)
    lb.print_leaderboard(leaderboard_data)

    if export_md:
        lb.export_markdown(leaderboard_data, export_md)
        click.echo(f"[OK] Exported Markdown to: {export_md}")


if __name__ == "__main__":
    main()
