"""
터미널 클라이언트.

실행:
    uv run python -m src.client report.csv "How did revenue change in Q3?"
    uv run python -m src.client report.pdf "Summarize risks" --server http://localhost:3000
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from src.client.api import DEFAULT_SERVER_URL, ReadFileClient
from src.client.controller import FormController, RequestStatus, SelectedFile
from src.domain.errors import ValidationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arvis",
        description="Ask a question about a business document",
    )
    parser.add_argument("file", type=Path, help="PDF, CSV, DOCX or TXT file")
    parser.add_argument("question", help="Question about the document")
    parser.add_argument(
        "--server",
        default=DEFAULT_SERVER_URL,
        help=f"Server URL (default: {DEFAULT_SERVER_URL})",
    )
    parser.add_argument(
        "--escape-html",
        action="store_true",
        help="Escape HTML in the answer before formatting",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


async def run(args: argparse.Namespace, client: ReadFileClient | None = None) -> int:
    """폼 컨트롤러로 1회 제출. 성공 0, 실패 1."""
    if client is None:
        client = ReadFileClient(args.server)
    controller = FormController(client.read_file, escape_html=args.escape_html)

    if not args.file.is_file():
        print(f"File not found: {args.file}", file=sys.stderr)
        return 1

    try:
        controller.select_file(SelectedFile.from_path(args.file))
        controller.set_question(args.question)
        state = await controller.submit()
    except ValidationError as e:
        print(e.message, file=sys.stderr)
        return 1

    if state.status == RequestStatus.SUCCESS:
        print(state.answer_html)
        return 0

    print(state.error, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
