"""
Experiment: decoding beyond the correction radius.

For a fixed number of check symbols t, inject 0..max_errors symbol errors
into random codewords and record how often decode() corrects, detects
(UncorrectableError) or miscorrects. Up to floor(t/2) errors every word
should be corrected; above it detection is best effort.

Usage:
    python experiments/exp_overload_detection.py --nsym 5 --trials 500
"""

import argparse
import csv
import logging
from pathlib import Path

from reed_solomon import ReedSolomon, load_config, measure_overload_detection


def setup_logging(verbose: bool = True):
    """Configure logging for the experiment script."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def parse_args():
    parser = argparse.ArgumentParser(description=__doc__.split("\n\n")[0])
    parser.add_argument("--config", default=None, help="YAML config (default: packaged)")
    parser.add_argument("--nsym", type=int, default=None, help="Check symbols t")
    parser.add_argument("--message-length", type=int, default=None)
    parser.add_argument("--max-errors", type=int, default=None)
    parser.add_argument("--trials", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--output",
        default=str(Path(__file__).resolve().parent / "results_overload_detection.csv"),
    )
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args()


def main():
    args = parse_args()
    config = load_config(args.config)

    system = config.get("system", {})
    setup_logging(args.verbose or system.get("verbose", False))

    params = config.get("experiments", {}).get("overload_detection", {})
    nsym = args.nsym if args.nsym is not None else params.get("nsym", 5)
    message_length = (
        args.message_length if args.message_length is not None
        else params.get("message_length", 13)
    )
    max_errors = args.max_errors if args.max_errors is not None else params.get("max_errors", 8)
    trials = args.trials if args.trials is not None else params.get("trials", 500)
    seed = args.seed if args.seed is not None else system.get("random_seed", 42)

    codec = ReedSolomon(nsym)
    logging.info(
        f"RS over GF(256): t={nsym}, k={message_length}, n={message_length + nsym}, "
        f"radius={codec.max_correctable_errors}"
    )

    rows = []
    for num_errors in range(min(max_errors, message_length + nsym) + 1):
        stats = measure_overload_detection(
            codec,
            num_errors=num_errors,
            trials=trials,
            message_length=message_length,
            seed=seed + num_errors,
        )
        rows.append(stats)
        logging.info(
            f"errors={num_errors:2d}  corrected={stats['corrected']:4d}  "
            f"detected={stats['detected']:4d}  miscorrected={stats['miscorrected']:4d}  "
            f"detection_rate={stats['detection_rate']:.3f}"
        )

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    fields = ["num_errors", "trials", "corrected", "detected", "miscorrected", "detection_rate"]
    with open(output, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fields)
        writer.writeheader()
        for row in rows:
            writer.writerow({key: row[key] for key in fields})

    logging.info(f"Saved results to {output}")


if __name__ == "__main__":
    main()
