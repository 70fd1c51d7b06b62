"""CLI entry point for the AppHub API server."""

import argparse
import os


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="apphub-server",
        description="AppHub API server: internal app directory and project intake",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Bind host (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=5000, help="Bind port (default: 5000)")
    parser.add_argument("--data-file", help="JSON file holding all records")
    parser.add_argument("--upload-dir", help="Directory for uploaded attachments")
    parser.add_argument(
        "--local",
        action="store_true",
        help="Local dev mode: colored console logs instead of JSON",
    )
    args = parser.parse_args(argv)

    if args.data_file:
        os.environ["APPHUB_DATA_FILE"] = args.data_file
    if args.upload_dir:
        os.environ["APPHUB_UPLOAD_DIR"] = args.upload_dir
    if args.local:
        os.environ["APPHUB_JSON_LOGS"] = "0"

    import uvicorn

    # One worker only: the record store lives in process memory.
    uvicorn.run("apphub.main:app", host=args.host, port=args.port, workers=1)


if __name__ == "__main__":
    main()
