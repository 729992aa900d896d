"""Summarize text from the command line through the same gateway as the API."""
from __future__ import annotations
import argparse
import json
import logging
import sys

from summary_gateway.common.logging_setup import setup_logging
from summary_gateway.gateway import SummarizationGateway

LOGGER = logging.getLogger("summary_gateway.cli")

def main(argv: list[str] | None = None) -> int:
    setup_logging()
    ap = argparse.ArgumentParser(description="Summarize text with Gemini")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--text", help="Text to summarize")
    src.add_argument("--file", help="Read text from this file ('-' for stdin)")
    args = ap.parse_args(argv)

    if args.text is not None:
        text = args.text
    elif args.file == "-":
        text = sys.stdin.read()
    else:
        with open(args.file, "r", encoding="utf-8") as f:
            text = f.read()

    status, body = SummarizationGateway().summarize(json.dumps({"text": text}))
    if status != 200:
        LOGGER.info("Gateway answered %s", status)
        print(body["error"], file=sys.stderr)
        return 1
    print(body["summary"])
    return 0

if __name__ == "__main__":
    sys.exit(main())
