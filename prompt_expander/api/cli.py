"""
Command-line adapter for the prompt expander.

Interface responsibilities:
- `expand`: run one brief through the handler and print the resulting prompt.
- `serve`: launch the FastAPI app (`prompt_expander.api.http_api:app`) with uvicorn.

Request lifecycle (`expand`):
1. Parse `--idea/--style/--lighting` (and optional `--provider`).
2. Forward a POST to `PromptExpansionHandler.handle`.
3. Print the `prompt` field; exit 0 on status 200, 1 otherwise.

Side effects:
- Loads `.env` at import time and configures root logging.
- Performs one upstream HTTP call per `expand` invocation.
"""

from dotenv import load_dotenv

load_dotenv()

import argparse
import os
import sys

from prompt_expander.api.handler import PromptExpansionHandler
from prompt_expander.api.logging_setup import LOG_LEVELS, configure_logging
from prompt_expander.llm.provider_config import load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prompt-expander",
        description="Expand a short idea into a detailed image-generation prompt",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="defaults to $LOG_LEVEL or INFO",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    expand = sub.add_parser("expand", help="Expand one idea and print the prompt")
    expand.add_argument("--idea", required=True)
    expand.add_argument("--style", default=None)
    expand.add_argument("--lighting", default=None)
    expand.add_argument("--provider", default=None, help="openai | gemini (defaults to $PROVIDER)")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=os.getenv("HOST", "127.0.0.1"))
    serve.add_argument("--port", type=int, default=os.getenv("PORT", "8000"))

    return parser


def run_expand(args, handler=None) -> int:
    if handler is None:
        provider = args.provider
        handler = PromptExpansionHandler(settings_factory=lambda: load_settings(provider))

    body = {"idea": args.idea, "style": args.style, "lighting": args.lighting}
    result = handler.handle("POST", body)

    stream = sys.stdout if result.status_code == 200 else sys.stderr
    print(result.body["prompt"], file=stream)
    return 0 if result.status_code == 200 else 1


def run_serve(args) -> int:
    import uvicorn

    uvicorn.run(
        "prompt_expander.api.http_api:app",
        host=args.host,
        port=args.port,
        reload=False,
    )
    return 0


def main(argv=None, handler=None) -> int:
    """Parse `argv` and dispatch the selected sub-command.

    Error handling:
        - `argparse` reports invalid arguments and exits with status 2.
        - Handler failures are printed to stderr and yield exit status 1.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.command == "serve":
        return run_serve(args)
    return run_expand(args, handler=handler)


if __name__ == "__main__":
    sys.exit(main())
