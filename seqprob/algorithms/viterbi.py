"""Viterbi scoring of a sequence against a Plan7 profile HMM.

All dynamic programming is done in NEGATIVE LOG-SPACE: scores add along a
path and the best score in a cell is the smallest one. Unreachable cells hold
``MIN_PROB``.

The table is indexed by (state, node, observation) with states:
    - M: match (node ``n`` emitted observation ``o - 1``)
    - D: deletion (node ``n`` skipped, nothing emitted)
    - I: insertion (observation ``o - 1`` emitted after node ``n``)

Only the score of the likeliest path is computed, not the path itself.
"""

from __future__ import annotations

import logging
from typing import Sequence as SequenceLike

import numpy as np

from seqprob.algorithms.hmm import HMM
from seqprob.types.parameters import HMMState
from seqprob.types.prob import MIN_PROB, Prob

logger = logging.getLogger(__name__)

M, D, I = int(HMMState.MATCH), int(HMMState.DELETION), int(HMMState.INSERTION)


class DynamicTable:
    """Dynamic programming table for HMM algorithms like Viterbi.

    The table is owned by the caller and may be reused across many calls to
    ``viterbi_score_mem``. It carries no locking: only one computation may
    use a given table at a time, so concurrent workers each need their own.
    """

    def __init__(self, num_nodes: int, seq_len: int) -> None:
        if num_nodes < 0 or seq_len < 0:
            raise ValueError(
                f"Table dimensions must be non-negative, got {num_nodes} nodes "
                f"and sequence length {seq_len}"
            )
        self.num_nodes = num_nodes
        self.seq_len = seq_len
        self.scores = np.empty((3, num_nodes + 1, seq_len + 1), dtype=np.float64)
        self.reset()

    def __repr__(self) -> str:
        return f"DynamicTable(num_nodes={self.num_nodes}, seq_len={self.seq_len})"

    def reset(self) -> None:
        """Fill every cell with ``MIN_PROB``."""
        self.scores.fill(MIN_PROB)

    def fits(self, num_nodes: int, seq_len: int) -> bool:
        return num_nodes <= self.num_nodes and seq_len <= self.seq_len

    def get(self, state: HMMState, node: int, obs: int) -> Prob:
        return Prob(self.scores[int(state), node, obs])

    def propose(self, state: HMMState, node: int, obs: int, p: float) -> None:
        """Store ``p`` if it is more probable than the current value."""
        i = (int(state), node, obs)
        if self.scores[i] > p:
            self.scores[i] = p


def alloc_table(num_nodes: int, seq_len: int) -> DynamicTable:
    """Return a freshly allocated table sized for ``num_nodes`` and ``seq_len``."""
    return DynamicTable(num_nodes, seq_len)


def viterbi_score(hmm: HMM, seq: SequenceLike[str]) -> Prob:
    """Return the score of the likeliest path through ``hmm`` for ``seq``.

    In performance critical loops, allocate a table once with ``alloc_table``
    and call ``viterbi_score_mem`` instead.
    """
    table = alloc_table(len(hmm.nodes), len(seq))
    return viterbi_score_mem(hmm, seq, table)


def viterbi_score_mem(hmm: HMM, seq: SequenceLike[str], table: DynamicTable) -> Prob:
    """Same as ``viterbi_score`` but computed in a caller-provided table.

    The table is reset first, so any table at least as large as the problem
    can be reused between calls.
    """
    num_nodes = len(hmm.nodes)
    seq_len = len(seq)
    if not table.fits(num_nodes, seq_len):
        raise ValueError(
            f"{table!r} is too small for {num_nodes} nodes and sequence "
            f"length {seq_len}"
        )

    table.reset()
    scores = table.scores
    scores[M, 0, 0] = 0.0  # The begin node.

    residues = list(seq)
    # Sentinel sums overflow to inf, which never beats a stored score.
    with np.errstate(over="ignore"):
        for node in range(num_nodes):
            if seq_len == 0:
                break
            trans = hmm.nodes[node].transitions
            iemit = hmm.nodes[node].ins_emit.lookup_many(residues)
            if node + 1 < num_nodes:
                memit = hmm.nodes[node + 1].mat_emit.lookup_many(residues)
            else:
                memit = np.zeros(seq_len)  # Force into match state for end node.

            match_here = scores[M, node, :seq_len]
            del_here = scores[D, node, :seq_len]
            ins = scores[I, node]

            # Insertions chain along the observations of a single node.
            for obs in range(seq_len):
                best = min(
                    ins[obs + 1],
                    match_here[obs] + trans.mi + iemit[obs],
                    ins[obs] + trans.ii + iemit[obs],
                )
                ins[obs + 1] = best
            ins_here = ins[:seq_len]

            match_next = scores[M, node + 1, 1 : seq_len + 1]
            np.minimum(match_next, match_here + trans.mm + memit, out=match_next)
            np.minimum(match_next, ins_here + trans.im + memit, out=match_next)
            np.minimum(match_next, del_here + trans.dm + memit, out=match_next)

            del_next = scores[D, node + 1, :seq_len]
            np.minimum(del_next, match_here + trans.md, out=del_next)
            np.minimum(del_next, del_here + trans.dd, out=del_next)

    score = Prob(scores[M, num_nodes, seq_len])
    logger.debug(
        "Viterbi score %s for %d residues against %d nodes", score, seq_len, num_nodes
    )
    return score


__all__ = [
    "DynamicTable",
    "alloc_table",
    "viterbi_score",
    "viterbi_score_mem",
]
