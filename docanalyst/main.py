import argparse
import asyncio
import json
import sys
from pathlib import Path

from docanalyst.chat.exceptions import ChatError
from docanalyst.config.settings import Settings
from docanalyst.logging.logger import Log
from docanalyst.processor.exceptions import ProcessorError
from docanalyst.processor.models import UploadedFile
from docanalyst.service import build_service


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docanalyst",
        description="Analyze office documents and ask questions about them.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="documents to ingest")
    parser.add_argument(
        "--ask",
        action="append",
        default=[],
        metavar="QUESTION",
        help="question to answer from the ingested documents (repeatable)",
    )
    return parser.parse_args(argv)


def read_uploads(paths: list[Path]) -> list[UploadedFile]:
    return [UploadedFile(filename=path.name, data=path.read_bytes()) for path in paths]


async def run(settings: Settings, args: argparse.Namespace) -> int:
    async with build_service(settings) as service:
        try:
            documents = await service.upload(read_uploads(args.files))
        except ProcessorError as exc:
            Log.error(f"Upload rejected: {exc}")
            return 2
        print(json.dumps(documents, indent=2, ensure_ascii=False))

        session = service.new_chat_session()
        for question in args.ask:
            try:
                turn = await session.ask(question)
            except ChatError as exc:
                Log.error(f"Chat failed: {exc}")
                return 1
            print(f"\n> {question}\n{turn.content}")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point: load settings -> build service -> ingest -> answer questions."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    sys.exit(asyncio.run(run(settings, args)))


if __name__ == "__main__":
    main()
