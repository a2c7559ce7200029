#!/usr/bin/env python3
"""Generate a synthetic achievements sheet for demos.

Usage:
    python tools/generate_synthetic.py --output data/synthetic_sheet.csv --students 40 --seed 42

Rows use the same header as the live sheet (Student, Card, Points). Each
student earns a random handful of cards; some students repeat cards and a few
rows carry a non-numeric points value, as hand-edited sheets do.
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

import numpy as np
import pandas as pd

CARD_POINTS = {
    "Concert B♭ Scale": 20,
    "Chromatic Scale": 25,
    "Rhythm Reading I": 10,
    "Rhythm Reading II": 15,
    "Sight Reading, Level 1": 15,
    "Music Theory / Intervals": 30,
    "Solo Performance": 60,
    "Section Leader": 40,
    "All-State Audition": 80,
}

FIRST_NAMES = ["Maya", "Jonah", "Priya", "Eli", "Sam", "Ava", "Leo", "Nora", "Owen", "Zoe", "Ian", "Ruth"]
LAST_NAMES = ["Lopez", "Reed", "Shah", "Brooks", "Ortiz", "Kim", "Nguyen", "Park", "Diaz", "Young"]


def generate_synthetic_dataset(
    output: Path,
    n_students: int = 40,
    max_cards: int = 8,
    junk_rate: float = 0.03,
    seed: Optional[int] = None,
) -> pd.DataFrame:
    if n_students < 1:
        raise ValueError("n_students must be at least 1")
    if max_cards < 1:
        raise ValueError("max_cards must be at least 1")

    rng = np.random.default_rng(seed)
    cards = list(CARD_POINTS)
    names = []
    for idx in range(n_students):
        first = FIRST_NAMES[idx % len(FIRST_NAMES)]
        last = LAST_NAMES[(idx // len(FIRST_NAMES)) % len(LAST_NAMES)]
        names.append(f"{first} {last}" if idx < len(FIRST_NAMES) * len(LAST_NAMES) else f"Student_{idx + 1}")

    rows = []
    for name in names:
        earned = rng.choice(cards, size=int(rng.integers(1, max_cards + 1)), replace=True)
        for card in earned:
            points: object = CARD_POINTS[str(card)]
            if rng.random() < junk_rate:
                points = "tbd"
            rows.append({"Student": name, "Card": str(card), "Points": points})

    order = rng.permutation(len(rows))
    df = pd.DataFrame(rows).iloc[order].reset_index(drop=True)

    output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output, index=False)
    return df


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--output", type=Path, default=Path("data/synthetic_sheet.csv"))
    parser.add_argument("--students", type=int, default=40)
    parser.add_argument("--max-cards", type=int, default=8)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    df = generate_synthetic_dataset(args.output, n_students=args.students, max_cards=args.max_cards, seed=args.seed)
    print(f"Wrote {len(df)} rows for {df['Student'].nunique()} students to {args.output}")


if __name__ == "__main__":
    main()
