#!/usr/bin/env python3
"""
Synthetic log generator

Appends timestamped lines with weighted random levels to a file so the
monitor has something to tail:

    2024-01-15 12:00:00.123 INFO [#1000] Processing user request
"""
import argparse
import random
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional

LEVEL_WEIGHTS = [
    ("INFO", 70),
    ("DEBUG", 20),
    ("WARNING", 7),
    ("ERROR", 3),
]

MESSAGES = [
    "Processing user request",
    "Database query completed in 150ms",
    "Cache miss detected for key 'user_profile'",
    "Connection attempt failed: timeout",
    "Authentication successful for user 'admin'",
    "Data validation error: missing required field",
    "Background task started: report generation",
    "Memory usage optimized: freed 250MB",
    "Request received from 192.168.1.1",
    "File not found: config.json",
    "API rate limit reached for client ID #1234",
    "Successfully processed batch job #89754",
]


class LogGenerator:
    """Produces log lines with a running sequence number"""

    def __init__(self, rng: Optional[random.Random] = None, start_sequence: int = 1000):
        self.rng = rng or random.Random()
        self.sequence = start_sequence

    def choose_level(self) -> str:
        levels = [level for level, _ in LEVEL_WEIGHTS]
        weights = [weight for _, weight in LEVEL_WEIGHTS]
        return self.rng.choices(levels, weights=weights, k=1)[0]

    def next_line(self, now: Optional[datetime] = None) -> str:
        now = now or datetime.now()
        timestamp = now.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        line = f"{timestamp} {self.choose_level()} [#{self.sequence}] {self.rng.choice(MESSAGES)}"
        self.sequence += 1
        return line


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Append synthetic log entries to a file")
    parser.add_argument("--output", default="test_application.log",
                        help="File to append to (default: test_application.log)")
    parser.add_argument("--count", type=int, default=0,
                        help="Number of lines to write, 0 runs until interrupted")
    parser.add_argument("--min-delay", type=float, default=0.5,
                        help="Minimum seconds between lines")
    parser.add_argument("--max-delay", type=float, default=3.0,
                        help="Maximum seconds between lines")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.min_delay < 0 or args.max_delay < args.min_delay:
        print("Error: need 0 <= --min-delay <= --max-delay", file=sys.stderr)
        return 2

    generator = LogGenerator(random.Random(args.seed))
    output = Path(args.output)

    print(f"Generating log entries to: {output}")
    print("Press Ctrl+C to stop")

    written = 0
    try:
        while not args.count or written < args.count:
            with open(output, "a", encoding="utf-8") as f:
                f.write(generator.next_line() + "\n")
            written += 1
            if not args.count or written < args.count:
                time.sleep(generator.rng.uniform(args.min_delay, args.max_delay))
    except KeyboardInterrupt:
        print(f"\nStopped after {written} entries")
    return 0


if __name__ == "__main__":
    sys.exit(main())
