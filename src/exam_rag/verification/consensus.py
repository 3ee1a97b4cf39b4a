"""Consensus policy: tally jury votes into a single option index."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass


@dataclass(frozen=True)
class Consensus:
    index: int | None
    agreement_percentage: float
    has_tie: bool


def compute_consensus(vote_indices: list[int]) -> Consensus:
    """Majority vote over option indices.

    The tally is scanned in ascending option order and the first strictly
    greater count wins, so a tie resolves to the lowest tied index. ``has_tie``
    tells callers when that resolution was arbitrary. No votes means no
    consensus and 0% agreement.
    """
    if not vote_indices:
        return Consensus(index=None, agreement_percentage=0.0, has_tie=False)

    tally = Counter(vote_indices)
    max_votes = 0
    consensus_index = None
    for idx in sorted(tally):
        if tally[idx] > max_votes:
            max_votes = tally[idx]
            consensus_index = idx

    tied = sum(1 for count in tally.values() if count == max_votes)
    agreement = round(max_votes / len(vote_indices) * 100, 2)
    return Consensus(index=consensus_index, agreement_percentage=agreement, has_tie=tied > 1)
