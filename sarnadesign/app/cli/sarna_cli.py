# File: sarnadesign/app/cli/sarna_cli.py
# Version: v0.2.0
"""
CLI for saRNA target selection.

- INPUT is either a single-record FASTA (first non-blank character is '>')
  or a plain text file; for plain text the last whitespace-separated token
  is taken as the sequence.
- Prints "<target>   <flank>   <rank>" per target to stdout, best first.
- With --outdir also writes targets.csv, targets.json and targets.fasta;
  with --debug additionally candidates.csv (every window + rejection reason).

Usage:
    python -m sarnadesign.app.cli.sarna_cli sequence.txt \
        [--target-length 19] [--run-length 4] \
        [--params-json sarnadesign/app/config/sarna_param.json] \
        [--workers 0] [--outdir out/] [--debug] [--log-level INFO]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Tuple

from Bio import SeqIO

from sarnadesign.app.config.config_sarna import load_params_file
from sarnadesign.app.core.export.csv_exporter import export_diagnostics_to_csv, export_targets_to_csv
from sarnadesign.app.core.export.fasta_exporter import export_targets_to_fasta
from sarnadesign.app.core.export.json_exporter import export_targets_to_json
from sarnadesign.app.core.export.table_exporter import write_targets
from sarnadesign.app.core.sarna.batch import BatchOptions, select_targets_parallel
from sarnadesign.app.core.sarna.errors import SaRNADesignError
from sarnadesign.app.core.sarna.parameters import SaRNADesignParameters

# ---------- IO helpers ----------

def read_sequence(path: Path) -> Tuple[str, str]:
    """Return (name, sequence) from a single-record FASTA or a whitespace-delimited text file."""
    text = path.read_text(encoding="utf-8")
    if text.lstrip().startswith(">"):
        records = list(SeqIO.parse(str(path), "fasta"))
        if len(records) != 1:
            raise ValueError(f"Expected exactly one FASTA record in {path}, found {len(records)}.")
        rec = records[0]
        return rec.id, str(rec.seq).upper()
    tokens = text.split()
    return path.stem, (tokens[-1].upper() if tokens else "")


def build_params(args: argparse.Namespace) -> SaRNADesignParameters:
    params = load_params_file(args.params_json) if args.params_json else SaRNADesignParameters()
    update = {}
    if args.target_length is not None:
        update["targetLength"] = args.target_length
    if args.run_length is not None:
        update["homopolymerRunLength"] = args.run_length
    if update:
        params = SaRNADesignParameters.model_validate({**params.model_dump(), **update})
    return params


# ---------- Main ----------

def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="saRNA target selection CLI")
    p.add_argument("input", type=Path, help="FASTA or plain text file holding the sequence")
    p.add_argument("--target-length", type=int, default=None, help="Target window length (default 19)")
    p.add_argument("--run-length", type=int, default=None,
                   help="Reject targets with a homopolymer run of this length or longer (default 4)")
    p.add_argument("--params-json", type=Path, default=None, help="JSON with SaRNADesignParameters (camelCase)")
    p.add_argument("--workers", type=int, default=1, help="Worker threads (0 = auto)")
    p.add_argument("--outdir", type=Path, default=None, help="Write CSV/JSON/FASTA outputs here")
    p.add_argument("--debug", action="store_true", help="With --outdir, also write candidates.csv")
    p.add_argument("--log-level", dest="log_level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: INFO)")
    args = p.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))
    log = logging.getLogger("sarna_cli")

    try:
        name, seq = read_sequence(args.input)
        params = build_params(args)
        log.info("Processing %s (%d nt) | targetLength=%d | homopolymerRunLength=%d",
                 name, len(seq), params.targetLength, params.homopolymerRunLength)

        ranked, diag = select_targets_parallel(
            seq, params, options=BatchOptions(workers=args.workers), logger=log,
            collect_rows=args.debug and args.outdir is not None,
        )

        write_targets(ranked, sys.stdout)

        if args.outdir:
            args.outdir.mkdir(parents=True, exist_ok=True)
            export_targets_to_csv(ranked, args.outdir / "targets.csv")
            export_targets_to_json(ranked, diag, args.outdir / "targets.json", params.targetLength, name)
            export_targets_to_fasta(ranked, args.outdir / "targets.fasta", name)
            if args.debug:
                export_diagnostics_to_csv(diag, args.outdir / "candidates.csv")
            log.info("Wrote outputs to %s", args.outdir)

    except (SaRNADesignError, ValueError, OSError) as ex:
        print(f"[ERROR] {ex}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
