"""Prompt expander API adapter package.

Architectural role:
- `handler`: framework-neutral request -> response contract.
- `http_api`: FastAPI route wrapping the handler.
- `serverless`: Lambda-style event entrypoint wrapping the handler.
- `cli`: terminal entrypoint for one-off expansion and for serving the HTTP API.

Scope:
- Transport-level translation only; provider logic lives in `prompt_expander.llm`.
"""
