"""Interactive command-line search over a folder of documents."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence, TextIO

from application.use_cases.ingest_paths import ingest_paths
from application.use_cases.search import search
from infrastructure.config import ContainerConfig, build_default_container
from ui.logging_utils import setup_logging

QUIT_COMMAND = "q"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "folder",
        help="Folder containing the documents (subdirectories are searched too)",
    )
    parser.add_argument(
        "--top-n",
        type=int,
        default=None,
        help="Number of results to show (default: TFIDFSEARCH_TOP_N or 10)",
    )
    args = parser.parse_args(argv)
    if args.top_n is not None and args.top_n <= 0:
        parser.error(f"--top-n has to be greater than 0 but was {args.top_n}")
    try:
        args.config = ContainerConfig.from_env()
    except ValueError as exc:
        parser.error(str(exc))
    if args.top_n is not None:
        args.config.top_n = args.top_n
    return args


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    container = build_default_container(args.config)

    folder = Path(args.folder).expanduser()
    if not folder.is_dir():
        print(f"Not a directory: {folder}", file=stdout)
        return 1

    print("Indexing, please wait...", file=stdout)
    corpus, report = ingest_paths(
        [folder],
        tokenizer=container.tokenizer,
        extractors=container.extractors,
        default_extractor=container.default_extractor,
    )
    print("Indexing... DONE", file=stdout)
    if report.errors:
        print(f"Skipped {len(report.errors)} unreadable documents", file=stdout)

    while True:
        print(file=stdout)
        print(f"Enter a sentence or '{QUIT_COMMAND}' to quit", file=stdout)
        stdout.flush()
        line = stdin.readline()
        if not line or line.rstrip("\r\n") == QUIT_COMMAND:
            return 0
        print("Querying...", file=stdout)
        results = search(line, corpus=corpus, tokenizer=container.tokenizer, top_n=container.top_n)
        if not results:
            print("Couldn't find any relevant documents", file=stdout)
            continue
        print("Top results:", file=stdout)
        for result in results:
            print(result.document_id, file=stdout)


def run() -> None:
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
