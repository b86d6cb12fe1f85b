"""
Mann-Whitney U (Wilcoxon rank-sum) test.

Ties receive the average of the ranks they span. U is converted to a z-score
with the large-sample normal approximation regardless of group size, and the
two-sided p-value comes from an Abramowitz-Stegun approximation of the
standard normal CDF. No continuity or tie-variance correction is applied, so
p-values for very small groups are approximate; an exact permutation p-value
would change reported numbers and is deliberately not used.
"""

import logging
import math
from collections.abc import Sequence

from responder_analysis.constants import (
    AS_A1,
    AS_A2,
    AS_A3,
    AS_A4,
    AS_A5,
    AS_P,
    MIN_GROUP_SIZE,
)
from responder_analysis.errors import DegenerateTestError
from responder_analysis.models.stats import MannWhitneyResult

logger = logging.getLogger(__name__)


def normal_cdf(x: float) -> float:
    """Standard normal CDF via A&S 7.1.26 (absolute error <= 1.5e-7)."""
    sign = -1.0 if x < 0 else 1.0
    x = abs(x) / math.sqrt(2.0)

    t = 1.0 / (1.0 + AS_P * x)
    y = 1.0 - (
        ((((AS_A5 * t + AS_A4) * t + AS_A3) * t + AS_A2) * t + AS_A1)
        * t
        * math.exp(-x * x)
    )
    return 0.5 * (1.0 + sign * y)


def average_ranks(values: Sequence[float]) -> list[float]:
    """1-based ranks of already-sorted values, ties sharing their mean rank."""
    ranks = [0.0] * len(values)
    i = 0
    while i < len(values):
        j = i
        while j < len(values) and values[j] == values[i]:
            j += 1
        # block occupies ranks i+1 .. j
        avg_rank = (i + 1 + j) / 2
        for k in range(i, j):
            ranks[k] = avg_rank
        i = j
    return ranks


def mann_whitney_u(
    group1: Sequence[float], group2: Sequence[float]
) -> MannWhitneyResult | None:
    """Two-sided Mann-Whitney U test of group1 against group2.

    Returns None when either group has fewer than two values; the test is
    undefined there and callers are expected to check.

    Raises:
        ValueError: a value is NaN or infinite.
        DegenerateTestError: the U statistic has zero standard deviation.
    """
    n1, n2 = len(group1), len(group2)
    if n1 < MIN_GROUP_SIZE or n2 < MIN_GROUP_SIZE:
        logger.debug("Rank-sum test skipped: group sizes %d and %d", n1, n2)
        return None

    if not all(math.isfinite(v) for v in (*group1, *group2)):
        raise ValueError("Rank-sum test requires finite values")

    combined = sorted(
        [(v, 1) for v in group1] + [(v, 2) for v in group2], key=lambda item: item[0]
    )
    ranks = average_ranks([v for v, _ in combined])
    r1 = sum(rank for rank, (_, group) in zip(ranks, combined) if group == 1)

    u1 = r1 - n1 * (n1 + 1) / 2
    u2 = n1 * n2 - u1
    u = min(u1, u2)

    mean_u = n1 * n2 / 2
    std_u = math.sqrt(n1 * n2 * (n1 + n2 + 1) / 12)
    if std_u == 0:
        raise DegenerateTestError(
            "mann_whitney_u", f"zero U variance for group sizes {n1} and {n2}"
        )
    z = (u - mean_u) / std_u
    p = 2 * (1 - normal_cdf(abs(z)))

    logger.debug("Rank-sum test n1=%d n2=%d U=%.1f z=%.4f p=%.4f", n1, n2, u, z, p)
    return MannWhitneyResult(u=u, z=z, p=p)
