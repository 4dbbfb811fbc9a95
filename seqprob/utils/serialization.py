"""Serialization utilities for probabilities, alphabets and HMMs (load and save).

Every encoder returns plain strings, lists and dicts, so the results can be
written with either ``yaml.safe_dump`` or ``json.dump``. Probabilities always
travel in their text form (``"*"`` for the zero-probability sentinel).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from seqprob.algorithms.hmm import HMM, HMMNode
from seqprob.types.alphabet import Alphabet
from seqprob.types.parameters import TRANSITION_FIELDS, EProbs, TProbs
from seqprob.types.prob import Prob, format_prob, is_min, parse_prob


def encode_prob(p: float) -> str:
    return format_prob(p)


def decode_prob(value: Union[str, float, int]) -> Prob:
    """Decode a probability; bare YAML numbers are accepted as well as text."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Prob(value)
    return parse_prob(value)


def encode_alphabet(alphabet: Alphabet) -> str:
    return str(alphabet)


def decode_alphabet(text: str) -> Alphabet:
    return Alphabet(text)


def encode_eprobs(eprobs: EProbs, alphabet: Alphabet) -> Dict[str, str]:
    """Map each residue to its probability text.

    Every alphabet residue is written, plus any other residue in the table's
    span that holds a non-minimal score.
    """
    encoded = {}
    for residue, p in eprobs.items():
        if residue in alphabet or not is_min(p):
            encoded[residue] = encode_prob(p)
    return encoded


def decode_eprobs(mapping: Mapping[str, Any], alphabet: Alphabet) -> EProbs:
    eprobs = EProbs(alphabet)
    for residue, value in mapping.items():
        if len(residue) != 1:
            raise ValueError(f"Emission keys must be single residues, got {residue!r}")
        eprobs.set(residue, decode_prob(value))
    return eprobs


def tprobs_to_dict(tprobs: TProbs) -> Dict[str, str]:
    return {name.upper(): encode_prob(getattr(tprobs, name)) for name in TRANSITION_FIELDS}


def tprobs_from_dict(mapping: Mapping[str, Any]) -> TProbs:
    missing = [name.upper() for name in TRANSITION_FIELDS if name.upper() not in mapping]
    if missing:
        raise ValueError(f"transitions missing keys: {missing}")
    unexpected = [key for key in mapping if key.lower() not in TRANSITION_FIELDS]
    if unexpected:
        raise ValueError(f"transitions has unexpected keys: {unexpected}")
    return TProbs(
        **{name: decode_prob(mapping[name.upper()]) for name in TRANSITION_FIELDS}
    )


def _node_to_dict(node: HMMNode, alphabet: Alphabet) -> Dict[str, Any]:
    return {
        "residue": node.residue,
        "node_num": node.node_num,
        "match": encode_eprobs(node.mat_emit, alphabet),
        "insert": encode_eprobs(node.ins_emit, alphabet),
        "transitions": tprobs_to_dict(node.transitions),
        "neff": {
            "M": encode_prob(node.neff_m),
            "I": encode_prob(node.neff_i),
            "D": encode_prob(node.neff_d),
        },
    }


def _node_from_dict(payload: Mapping[str, Any], alphabet: Alphabet) -> HMMNode:
    neff = payload.get("neff", {})
    return HMMNode(
        residue=payload["residue"],
        node_num=int(payload["node_num"]),
        ins_emit=decode_eprobs(payload["insert"], alphabet),
        mat_emit=decode_eprobs(payload["match"], alphabet),
        transitions=tprobs_from_dict(payload["transitions"]),
        neff_m=decode_prob(neff.get("M", 0.0)),
        neff_i=decode_prob(neff.get("I", 0.0)),
        neff_d=decode_prob(neff.get("D", 0.0)),
    )


def hmm_to_dict(hmm: HMM) -> Dict[str, Any]:
    """Convert an HMM into a plain dictionary suitable for YAML or JSON."""
    return {
        "alphabet": encode_alphabet(hmm.alphabet),
        "null": (
            encode_eprobs(hmm.null, hmm.alphabet) if hmm.null is not None else None
        ),
        "nodes": [_node_to_dict(node, hmm.alphabet) for node in hmm.nodes],
    }


def hmm_from_dict(payload: Mapping[str, Any]) -> HMM:
    alphabet = decode_alphabet(payload["alphabet"])
    null_dict: Optional[Mapping[str, Any]] = payload.get("null")
    null = decode_eprobs(null_dict, alphabet) if null_dict is not None else None
    nodes = [_node_from_dict(node, alphabet) for node in payload.get("nodes", [])]
    return HMM(nodes, alphabet, null)


def save_hmm(hmm: HMM, yaml_path: Path) -> None:
    """Write an HMM to a YAML file."""
    with Path(yaml_path).open("w", encoding="utf-8") as handle:
        yaml.safe_dump({"hmm": hmm_to_dict(hmm)}, handle, sort_keys=False)


def load_hmm(yaml_path: Path) -> HMM:
    """Load an HMM from a YAML file."""
    with Path(yaml_path).open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle)

    return hmm_from_dict(payload.get("hmm", payload))


__all__ = [
    "encode_prob",
    "decode_prob",
    "encode_alphabet",
    "decode_alphabet",
    "encode_eprobs",
    "decode_eprobs",
    "tprobs_to_dict",
    "tprobs_from_dict",
    "hmm_to_dict",
    "hmm_from_dict",
    "save_hmm",
    "load_hmm",
]
