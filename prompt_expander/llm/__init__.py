"""LLM access package.

Architectural role:
    Provides provider configuration, provider adapters and the HTTP transport used
    by the API layer to expand creative briefs into image-generation prompts.

Module split:
    - `provider_config`: environment-driven provider, model and credential settings.
    - `providers`: per-provider request construction and response text extraction.
    - `client`: single-shot HTTP transport and upstream status mapping.
    - `models`: typed views of provider response payloads.
    - `errors`: provider error kinds.
"""
