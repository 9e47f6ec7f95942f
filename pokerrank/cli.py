import argparse
import logging
from typing import List, Optional

from pokerrank.poker.config import ON_ERROR_CHOICES, RunConfig
from pokerrank.poker.errors import HandError
from pokerrank.poker.rounds import tally_file

logger = logging.getLogger("pokerrank")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Pokerrank: five-card showdown tally")

    ap.add_argument("rounds", help="File with one round per line (10 card tokens)")
    ap.add_argument("--config", help="Path to run config YAML")
    ap.add_argument(
        "--on-error",
        choices=ON_ERROR_CHOICES,
        default=None,
        help="What to do with a malformed line (default: abort)",
    )
    ap.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    ap.add_argument("--trace", type=int, default=0, help="Log the first N rounds")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    # tracing is useless below INFO
    log_level = args.log_level or ("INFO" if args.trace else None)
    try:
        cfg = RunConfig.from_yaml(args.config) if args.config else RunConfig()
        cfg = cfg.merged(
            on_error=args.on_error,
            log_level=log_level.upper() if log_level else None,
        )
    except (OSError, ValueError) as e:
        ap.error(f"bad config: {e}")

    logging.basicConfig(
        level=cfg.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        tally = tally_file(args.rounds, on_error=cfg.on_error, trace_n=args.trace)
    except HandError as e:
        logger.error("aborted: %s", e)
        return 1
    except OSError as e:
        logger.error("cannot read %s: %s", args.rounds, e)
        return 1

    label_a, label_b = cfg.labels
    print(f"{label_a}: {tally.player_a}")
    print(f"{label_b}: {tally.player_b}")
    if tally.ties:
        print(f"Ties: {tally.ties}")
    if tally.skipped:
        print(f"Skipped: {tally.skipped}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
