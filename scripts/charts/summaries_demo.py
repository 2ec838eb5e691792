from __future__ import annotations
import argparse
import json
from pathlib import Path
from typing import Any, Dict, List

import numpy as np

from chartcore.chart import ChartRequest, build_chart_data
from chartcore.config_model.model import load_config


# ---------------------------
# Data generators
# ---------------------------

def rows_mixed(n: int = 300, groups: int = 3, missing_every: int = 17, seed: int = 11) -> List[Dict[str, Any]]:
    rng = np.random.default_rng(seed)
    colors = ["red", "green", "blue", "amber", "violet", "teal"]
    rows: List[Dict[str, Any]] = []
    for i in range(n):
        g = f"G{i % groups + 1}"
        height = float(rng.normal(170 + (i % groups) * 4, 8))
        weight = float(height * 0.45 + rng.normal(0, 6))
        rows.append({
            "group": g,
            "height": None if i % missing_every == 0 else round(height, 1),
            "weight": round(weight, 1),
            "color": colors[int(rng.integers(0, len(colors)))],
        })
    # a couple of extreme values so box plots have outliers
    rows.append({"group": "G1", "height": 260.0, "weight": 80.0, "color": "red"})
    rows.append({"group": "G2", "height": 95.0, "weight": 40.0, "color": "blue"})
    return rows


# ---------------------------
# Main
# ---------------------------

def main():
    parser = argparse.ArgumentParser(description="Chart summaries demo: every chart kind as JSON")
    parser.add_argument("-o", "--outdir", type=Path, default=None, help="Write one JSON file per chart here")
    parser.add_argument("--config", default=None, help="Config TOML (defaults to CHARTCORE_CFG or config/config.toml)")
    parser.add_argument("--seed", type=int, default=11, help="Random seed")
    parser.add_argument("--n", type=int, default=300, help="Number of rows")
    parser.add_argument("--groups", type=int, default=3, help="Number of groups for grouped charts")
    args = parser.parse_args()

    cfg = load_config(args.config)
    rows = rows_mixed(n=args.n, groups=args.groups, seed=args.seed)

    requests = {
        "histogram": ChartRequest(kind="histogram", column="height"),
        "histogram_grouped": ChartRequest(kind="histogram", column="height", group_column="group"),
        "box": ChartRequest(kind="box", column="height"),
        "box_grouped": ChartRequest(kind="box", column="height", group_column="group"),
        "bar": ChartRequest(kind="bar", column="color"),
        "bar_grouped": ChartRequest(kind="bar", column="color", group_column="group"),
        "scatter": ChartRequest(kind="scatter", column="height", y_column="weight", group_column="group"),
    }

    if args.outdir:
        args.outdir.mkdir(parents=True, exist_ok=True)

    for name, req in requests.items():
        payload = build_chart_data(rows, req, cfg).as_dict()
        text = json.dumps(payload, indent=2)
        if args.outdir:
            out = args.outdir / f"{name}.json"
            out.write_text(text, encoding="utf-8")
            print(f"[OK] {name} -> {out}")
        else:
            print(f"# {name}")
            print(text)


if __name__ == "__main__":
    main()
