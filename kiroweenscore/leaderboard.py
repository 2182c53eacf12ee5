"""
Leaderboard generation for scored Kiroween submissions

Ranking:
- Combined viability (0-5), highest first
- Ties broken by judged criteria final score, then project name
- Optional filter on best-matching category
"""

import csv
import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union

from kiroweenscore.categories import KiroweenCategory, category_name
from kiroweenscore.config import RESULTS_DIR
from kiroweenscore.lexicons import CRITERIA_ORDER
from kiroweenscore.numeric import round_half_up
from kiroweenscore.scoring import HackathonScore

logger = logging.getLogger(__name__)

LEADERBOARD_FILE = "leaderboard.json"
SUMMARY_FILE = "summary.csv"
ALL_CATEGORIES = "All Categories"


def _slug(name: str) -> str:
    slug = re.sub(r"[^A-Za-z0-9_.-]+", "_", name.strip()).strip("_.")
    return slug or "submission"


class Leaderboard:
    """
    Store scored submissions as JSON files and rank them.

    Each result file holds:
        {"project_name": ..., "evaluated_at": ISO timestamp, "result": HackathonScore.to_dict()}
    """

    def __init__(self, results_dir: Union[str, Path] = RESULTS_DIR):
        self.results_dir = Path(results_dir)
        self._written = set()

    def _taken(self, path: Path, project_name: str) -> bool:
        """A file is taken if this board wrote it already or it holds another project."""
        if path in self._written:
            return True
        if not path.exists():
            return False
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f).get("project_name") != project_name
        except (OSError, ValueError, AttributeError):
            return True

    def _result_path(self, project_name: str) -> Path:
        stem = _slug(project_name)
        if f"{stem}.json" == LEADERBOARD_FILE:
            stem = f"{stem}_result"

        output_path = self.results_dir / f"{stem}.json"
        suffix = 1
        while self._taken(output_path, project_name):
            suffix += 1
            output_path = self.results_dir / f"{stem}_{suffix}.json"
        if suffix > 1:
            logger.warning(
                f"Result file {stem}.json is already used; saving {project_name} as {output_path.name}"
            )
        return output_path

    def save_result(self, score: HackathonScore, name: Optional[str] = None) -> Path:
        """Save one scored submission; returns the path written."""
        project_name = name or score.project_name or "submission"
        self.results_dir.mkdir(parents=True, exist_ok=True)
        output_path = self._result_path(project_name)

        entry = {
            "project_name": project_name,
            "evaluated_at": datetime.now().isoformat(),
            "result": score.to_dict(),
        }
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(entry, f, indent=2)
        self._written.add(output_path)

        logger.info(f"Saved result for {project_name} to {output_path}")
        return output_path

    def load_results(self) -> List[Dict]:
        """
        Load every saved result.

        Returns:
            list of {"project_name", "evaluated_at", "score": HackathonScore}
        """
        results = []
        if not self.results_dir.exists():
            return results

        for result_file in sorted(self.results_dir.glob("*.json")):
            if result_file.name == LEADERBOARD_FILE:
                continue
            try:
                with open(result_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                score = HackathonScore.from_dict(data["result"])
            except (OSError, ValueError, KeyError, TypeError) as e:
                logger.warning(f"Failed to load {result_file}: {e}")
                continue

            results.append({
                "project_name": data.get("project_name") or score.project_name or result_file.stem,
                "evaluated_at": data.get("evaluated_at"),
                "score": score,
            })
        return results

    def generate(self, category: Union[KiroweenCategory, str, None] = None, limit: int = 10,
                 output_path: Optional[Path] = None) -> Dict:
        """
        Rank saved results and write leaderboard.json plus summary.csv.

        Args:
            category: only include submissions whose best match is this category
            limit: maximum number of entries
            output_path: where to write the JSON (defaults to results_dir/leaderboard.json)

        Returns:
            dict: leaderboard data
        """
        member = None
        if category is not None:
            member = KiroweenCategory.parse(category)
            if member is None:
                raise ValueError(f"Unknown category: {category}")

        entries = []
        for record in self.load_results():
            score = record["score"]
            if member is not None and score.best_match != member:
                continue
            entries.append(self._entry(record))

        entries.sort(key=lambda e: (-e["combined_viability"], -e["final_score"], e["project_name"]))
        entries = entries[:max(limit, 0)]

        for i, entry in enumerate(entries, 1):
            entry["rank"] = i

        leaderboard_data = {
            "generated_at": datetime.now().isoformat(),
            "category": member.value if member is not None else None,
            "total_entries": len(entries),
            "leaderboard": entries,
            "category_stats": self._category_stats(entries, member),
        }

        self.results_dir.mkdir(parents=True, exist_ok=True)
        if output_path is None:
            output_path = self.results_dir / LEADERBOARD_FILE
        output_path = Path(output_path)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(leaderboard_data, f, indent=2)

        self._save_csv(entries, output_path.parent / SUMMARY_FILE)

        logger.info(f"Generated leaderboard with {len(entries)} entries")
        return leaderboard_data

    def _entry(self, record: Dict) -> Dict:
        score = record["score"]
        best = score.category_analysis.evaluation_for(score.best_match)
        criteria = {}
        for name in CRITERIA_ORDER:
            criterion = score.criteria_analysis.score_for(name)
            criteria[name] = criterion.score if criterion is not None else 0.0

        return {
            "rank": 0,  # set after sorting
            "project_name": record["project_name"],
            "best_match": score.best_match.value,
            "best_match_name": category_name(score.best_match),
            "best_fit_score": best.fit_score if best is not None else 0.0,
            "combined_viability": score.combined_viability,
            "final_score": score.final_score,
            "criteria": criteria,
            "evaluated_at": record["evaluated_at"],
        }

    def _category_stats(self, entries: List[Dict], category: Optional[KiroweenCategory]) -> Dict:
        name = category_name(category) if category is not None else ALL_CATEGORIES
        if not entries:
            return {
                "total_submissions": 0,
                "average_score": 0.0,
                "top_score": 0.0,
                "category_name": name,
            }

        scores = [e["combined_viability"] for e in entries]
        return {
            "total_submissions": len(entries),
            "average_score": round_half_up(sum(scores) / len(scores), 2),
            "top_score": max(scores),
            "category_name": name,
        }

    def _save_csv(self, entries: List[Dict], csv_path: Path):
        """Save leaderboard summary as CSV"""
        with open(csv_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow([
                "rank", "project_name", "best_match", "best_fit_score",
                "combined_viability", "final_score",
                "potential_value", "implementation", "quality_and_design",
            ])
            for entry in entries:
                criteria = entry["criteria"]
                writer.writerow([
                    entry["rank"],
                    entry["project_name"],
                    entry["best_match"],
                    f"{entry['best_fit_score']:.1f}",
                    f"{entry['combined_viability']:.1f}",
                    f"{entry['final_score']:.1f}",
                    f"{criteria['Potential Value']:.1f}",
                    f"{criteria['Implementation']:.1f}",
                    f"{criteria['Quality and Design']:.1f}",
                ])

        logger.info(f"Saved CSV summary to {csv_path}")

    def print_leaderboard(self, leaderboard_data: Dict):
        """Print formatted leaderboard"""
        stats = leaderboard_data["category_stats"]

        print("\n" + "=" * 90)
        print(f"  Kiroween Leaderboard - {stats['category_name']}")
        print("=" * 90)
        print(f"{'#':<4}{'Project':<30}{'Viability':<12}{'Criteria':<10}{'Best Match':<18}{'Fit':<8}")
        print("-" * 90)

        for entry in leaderboard_data["leaderboard"]:
            project = entry["project_name"][:29]
            print(
                f"{entry['rank']:<4}{project:<30}"
                f"{entry['combined_viability']:<12.1f}{entry['final_score']:<10.1f}"
                f"{entry['best_match_name']:<18}{entry['best_fit_score']:<8.1f}"
            )

        print("-" * 90)
        print(
            f"Submissions: {stats['total_submissions']} | "
            f"Average: {stats['average_score']:.2f}/5 | Top: {stats['top_score']:.1f}/5"
        )
        print("=" * 90 + "\n")

    def export_markdown(self, leaderboard_data: Dict, output_path: Optional[Path] = None) -> str:
        """Export leaderboard as Markdown; written to output_path when given."""
        stats = leaderboard_data["category_stats"]

        md = []
        md.append("# Kiroween Hackathon Leaderboard")
        md.append("")
        md.append(f"*Generated: {leaderboard_data.get('generated_at', 'N/A')}*")
        md.append("")
        md.append(f"**Category**: {stats['category_name']}")
        md.append("")
        md.append("| # | Project | Viability | Criteria | Best Match | Fit |")
        md.append("|---|---------|-----------|----------|------------|-----|")

        for entry in leaderboard_data["leaderboard"]:
            md.append(
                f"| {entry['rank']} | {entry['project_name']} | "
                f"{entry['combined_viability']:.1f}/5 | {entry['final_score']:.1f}/5 | "
                f"{entry['best_match_name']} | {entry['best_fit_score']:.1f}/10 |"
            )

        md.append("")
        md.append("## Statistics")
        md.append("")
        md.append(f"- Submissions: {stats['total_submissions']}")
        md.append(f"- Average viability: {stats['average_score']:.2f}/5")
        md.append(f"- Top viability: {stats['top_score']:.1f}/5")
        md.append("")

        content = "\n".join(md)

        if output_path is not None:
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(content)
            logger.info(f"Exported Markdown leaderboard to {output_path}")

        return content


# Convenience function
def generate_leaderboard(results_dir: Path = RESULTS_DIR, category: Optional[str] = None,
                         limit: int = 10) -> Dict:
    """Generate and print leaderboard"""
    lb = Leaderboard(results_dir)
    data = lb.generate(category=category, limit=limit)
    lb.print_leaderboard(data)
    return data
