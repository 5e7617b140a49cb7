"""
Export lookup results – a JSON index of every hold and highlighted images.
"""
import json
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Optional
from tqdm import tqdm

from .locator import HoldLocator
from .models.position import LookupResult
import config


class Exporter:
    """Writes lookup results to the results directory."""

    def __init__(self, output_dir: str = str(config.RESULTS_DIR), show_progress: bool = True):
        """
        Initialize exporter.

        Args:
            output_dir: Directory for output files
            show_progress: Show a progress bar for batch exports
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.show_progress = show_progress

    def lookup_all(self, locator: HoldLocator,
                   hold_ids: Optional[Iterable[str]] = None) -> List[LookupResult]:
        """Describe every hold (or the given ids). Nothing is drawn."""
        ids = list(hold_ids) if hold_ids is not None else sorted(locator.dataset.hold_ids())
        iterator = tqdm(ids, desc="Resolving", unit="holds") if self.show_progress else ids
        results = [locator.describe(hold_id) for hold_id in iterator]
        return results

    def export_json(self, results: List[LookupResult], filename: str = "holds.json") -> Path:
        """
        Export lookup results to a JSON file.

        Returns:
            Path to saved file
        """
        output_path = self.output_dir / filename
        with open(output_path, "w") as f:
            json.dump({
                "summary": self.generate_summary(results),
                "holds":   [r.to_dict() for r in results],
            }, f, indent=2)
        return output_path

    def export_images(self, locator: HoldLocator, hold_ids: Iterable[str],
                      suffix: str = ".png") -> List[Path]:
        """Save one highlighted wall image per hold found, then restore the current highlight."""
        previous = locator.current
        ids = list(hold_ids)
        iterator = tqdm(ids, desc="Rendering", unit="holds") if self.show_progress else ids
        paths = []
        for hold_id in iterator:
            result = locator.lookup(hold_id)
            if result.found:
                paths.append(locator.save(self.output_dir / f"hold_{result.hold_id}{suffix}"))
        if previous is not None:
            locator.lookup(previous.hold_id)
        else:
            locator.clear()
        return paths

    @staticmethod
    def generate_summary(results: List[LookupResult]) -> dict:
        found  = [r for r in results if r.found]
        panels = Counter(f"{r.position.grid_name}/{r.position.panel}" for r in found)
        return {
            "total":     len(results),
            "found":     len(found),
            "not_found": [r.hold_id for r in results if not r.found],
            "per_panel": dict(sorted(panels.items())),
        }
