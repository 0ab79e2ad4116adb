"""Run one TokenHealth analysis and print the report.

Usage:
    python scripts/check_token.py 0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48
    python scripts/check_token.py "is this safe? EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
    python scripts/check_token.py <address> --json-logs --log-level DEBUG
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings  # noqa: E402
from src.analyzer.address import extract_address  # noqa: E402
from src.analyzer.engine import build_analyzer  # noqa: E402
from src.analyzer.report import render_report  # noqa: E402
from src.utils.logger import setup_logger  # noqa: E402


async def run(text: str) -> int:
    address = extract_address(text) or text.strip()
    analyzer = build_analyzer(settings)
    try:
        result = await analyzer.analyze(address)
    finally:
        await analyzer.close()

    print(render_report(result))
    return 0 if result.is_valid else 2


def main() -> None:
    parser = argparse.ArgumentParser(description="TokenHealth risk report for one token")
    parser.add_argument("text", nargs="+", help="Token address, or a message containing one")
    parser.add_argument("--log-level", default=settings.log_level)
    parser.add_argument("--json-logs", action="store_true", default=settings.json_logs)
    parser.add_argument("--no-log-file", action="store_true", help="Log to stderr only")
    args = parser.parse_args()

    setup_logger(
        json_logs=args.json_logs,
        level=args.log_level,
        log_file=None if args.no_log_file else settings.log_file,
    )
    sys.exit(asyncio.run(run(" ".join(args.text))))


if __name__ == "__main__":
    main()
