from __future__ import annotations
import csv, json, logging
from typing import Any, Dict, List, Sequence

import numpy as np

logger = logging.getLogger(__name__)


def trace_rows(trace: Sequence[np.ndarray]) -> List[Dict[str, Any]]:
    """Flatten a feed-forward trace into one row per (layer, sample, unit)."""
    rows = []
    for layer, matrix in enumerate(trace):
        m = np.atleast_2d(np.asarray(matrix))
        for sample, unit in np.ndindex(*m.shape):
            rows.append({"layer": layer, "sample": sample, "unit": unit, "value": float(m[sample, unit])})
    return rows


def export_trace_csv(path: str, trace: Sequence[np.ndarray]):
    rows = trace_rows(trace)
    fieldnames = ["layer", "sample", "unit", "value"]
    with open(path, 'w', newline='', encoding='utf-8') as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for r in rows:
            w.writerow(r)
    logger.info("wrote %d activation values to %s", len(rows), path)
    return path


def export_trace_json(path: str, trace: Sequence[np.ndarray]):
    data = {
        "layers": [
            {"index": i, "shape": list(np.shape(m)), "values": np.asarray(m).tolist()}
            for i, m in enumerate(trace)
        ]
    }
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    logger.info("wrote trace of %d matrices to %s", len(trace), path)
    return path


__all__ = ["trace_rows", "export_trace_csv", "export_trace_json"]
