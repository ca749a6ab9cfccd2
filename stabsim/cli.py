from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from typing import List, Optional

from qiskit import QuantumCircuit, qasm2

from . import circuits
from .backends import TableauBackend
from .errors import StabilizerError

LOGGER = logging.getLogger(__name__)


def _load_circuit(args: argparse.Namespace) -> QuantumCircuit:
    if args.qasm:
        return qasm2.load(args.qasm)
    return circuits.build(args.kind, num_qubits=args.num_qubits, depth=args.depth, seed=args.seed)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Sample a Clifford circuit on the CHP tableau simulator.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--qasm", type=str, default=None, help="OpenQASM 2 file to simulate")
    src.add_argument("--kind", type=str, default="ghz", choices=sorted(circuits.CIRCUIT_REGISTRY))
    ap.add_argument("--num-qubits", type=int, default=4)
    ap.add_argument("--depth", type=int, default=20)
    ap.add_argument("--shots", type=int, default=1024)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--measure-all", action="store_true",
                    help="Append a measurement of every qubit to the circuit")
    ap.add_argument("--log-level", type=str, default="WARNING")
    ap.add_argument("--out", type=str, default=None)
    args = ap.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    circ = _load_circuit(args)
    if args.measure_all:
        circ.measure_all()

    backend = TableauBackend(seed=args.seed)
    t0 = time.time()
    try:
        result = backend.run(circ, shots=args.shots)
    except StabilizerError as exc:
        LOGGER.error("Simulation failed: %s", exc)
        return 1
    elapsed = time.time() - t0

    payload = {
        "circuit": {"source": args.qasm or args.kind, "num_qubits": result.num_qubits},
        "shots": result.shots,
        "seed": args.seed,
        "counts": dict(sorted(result.counts.items())),
        "wall_elapsed_s": elapsed,
    }
    if args.out:
        with open(args.out, "w") as f:
            json.dump(payload, f, indent=2)
        LOGGER.info("Wrote %s", args.out)
    else:
        json.dump(payload, sys.stdout, indent=2)
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
