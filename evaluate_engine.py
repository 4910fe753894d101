from __future__ import annotations

"""
Sample the question engine and report how its output is distributed.

This script:
- generates many questions per (operation, difficulty)
- reports where the correct answer lands (A/B/C) to spot label bias
- reports which strategy produced the distractors that were picked
- reports how MIXED resolves to concrete operations.

Usage:
    python evaluate_engine.py
"""

from collections import Counter
from typing import Dict

from quiz_engine import Difficulty, MathQuizGenerator, Operation
from quiz_engine.distractors import DistractorEngine
from quiz_engine.models import LABELS


def evaluate_labels(n_samples: int = 3000, seed: int = 999) -> Dict[str, float]:
    gen = MathQuizGenerator(seed=seed)
    counts: Counter[str] = Counter()
    for q in gen.generate_batch(Operation.MIXED, Difficulty.MEDIUM, n_samples):
        counts[q.correct_choice.label] += 1

    shares = {label: counts[label] / n_samples for label in LABELS}
    print(f"[eval_labels] correct-label share over {n_samples} questions:")
    for label, share in shares.items():
        print(f"  {label}: {share:.3f}")
    return shares


def evaluate_distractors(n_samples: int = 1000, seed: int = 999) -> Dict[str, Counter]:
    """
    Classify every picked distractor by the strategy that could have produced it.

    A value the strategies never propose came from the random fallback.
    """
    gen = MathQuizGenerator(seed=seed)
    engine = DistractorEngine()
    results: Dict[str, Counter] = {}

    for op in Operation.concrete():
        origin: Counter[str] = Counter()
        for difficulty in Difficulty:
            for q in gen.generate_batch(op, difficulty, n_samples):
                a, b = q.operands
                raw = engine.candidates(q.correct_answer, op, a, b)
                # the first two entries are always the tens shift, the last two the confusions
                tens, confusions = set(raw[:2]), set(raw[-2:])
                for choice in q.choices:
                    if choice.is_correct:
                        continue
                    if choice.value in confusions:
                        origin["confusion"] += 1
                    elif choice.value in tens:
                        origin["tens"] += 1
                    elif choice.value in raw:
                        origin["deviation"] += 1
                    else:
                        origin["fallback"] += 1
        results[op.value] = origin

    print(f"[eval_distractors] strategy of picked distractors ({n_samples} per tier):")
    for op_name, origin in results.items():
        total = sum(origin.values()) or 1
        row = "  ".join(
            f"{k}={origin[k] / total:.2f}" for k in ("tens", "deviation", "confusion", "fallback")
        )
        print(f"  {op_name:>4}: {row}")
    return results


def evaluate_mixed(n_samples: int = 2000, seed: int = 999) -> Counter:
    gen = MathQuizGenerator(seed=seed)
    counts: Counter[str] = Counter(
        q.operation.value for q in gen.generate_batch(Operation.MIXED, Difficulty.EASY, n_samples)
    )
    print(f"[eval_mixed] resolved operations over {n_samples} questions:")
    for op in Operation.concrete():
        print(f"  {op.value:>4}: {counts[op.value] / n_samples:.3f}")
    return counts


if __name__ == "__main__":
    evaluate_labels()
    print()
    evaluate_distractors()
    print()
    evaluate_mixed()
