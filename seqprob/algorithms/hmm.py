"""Plan7 profile Hidden Markov Model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from seqprob.types.alphabet import Alphabet
from seqprob.types.parameters import EProbs, TProbs
from seqprob.types.prob import MIN_PROB

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HMMNode:
    """A single HMM column.

    ``neff_m``, ``neff_i`` and ``neff_d`` are not used by any algorithm here;
    they are carried because common HMM file formats include them.
    """

    residue: str
    node_num: int
    ins_emit: EProbs
    mat_emit: EProbs
    transitions: TProbs
    neff_m: float = 0.0
    neff_i: float = 0.0
    neff_d: float = 0.0

    # Emission tables are mutable, so nodes are not hashable.
    __hash__ = None

    def copy(self) -> "HMMNode":
        """Return a node whose emission tables are independent of this one."""
        return replace(self, ins_emit=self.ins_emit.copy(), mat_emit=self.mat_emit.copy())


@dataclass(frozen=True)
class HMM:
    """Ordered list of nodes plus the alphabet their emission tables use.

    ``null`` holds background frequencies. HMMER files lack them, HHsuite
    files carry them and use them as insertion emissions in every node.
    """

    nodes: Tuple[HMMNode, ...]
    alphabet: Alphabet
    null: Optional[EProbs] = None

    __hash__ = None

    def __init__(
        self,
        nodes: Iterable[HMMNode],
        alphabet: Alphabet,
        null: Optional[EProbs] = None,
    ) -> None:
        object.__setattr__(self, "nodes", tuple(nodes))
        object.__setattr__(self, "alphabet", alphabet)
        object.__setattr__(self, "null", null)

    def __len__(self) -> int:
        return len(self.nodes)

    def slice(self, start: int, end: int) -> "HMM":
        """Return the nodes in ``[start, end)`` as a new HMM.

        The last node's transitions are forced to a clean exit: M->M, I->M and
        D->M become 0 while M->I, M->D, I->I and D->D become ``MIN_PROB``.
        Nothing else changes.
        """
        if not 0 <= start < end <= len(self.nodes):
            raise ValueError(
                f"Invalid slice [{start}, {end}) for an HMM with {len(self.nodes)} nodes"
            )
        nodes = [node.copy() for node in self.nodes[start:end]]
        last = nodes[-1]
        nodes[-1] = replace(
            last,
            transitions=replace(
                last.transitions,
                mm=0.0,
                mi=MIN_PROB,
                md=MIN_PROB,
                im=0.0,
                ii=MIN_PROB,
                dm=0.0,
                dd=MIN_PROB,
            ),
        )
        return HMM(nodes, self.alphabet, self.null)


def hmm_cat(h1: HMM, h2: HMM) -> HMM:
    """Join two HMMs. Neither input is modified.

    Both HMMs are expected to share an alphabet; this is not enforced. The
    null model of ``h1`` is kept.
    """
    if not h1.alphabet.equals(h2.alphabet):
        logger.warning(
            "Concatenating HMMs with different alphabets ('%s' and '%s')",
            h1.alphabet,
            h2.alphabet,
        )
    nodes = [node.copy() for node in h1.nodes] + [node.copy() for node in h2.nodes]
    return HMM(nodes, h1.alphabet, h1.null)


__all__ = ["HMM", "HMMNode", "hmm_cat"]
