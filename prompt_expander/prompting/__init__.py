"""Prompting package.

This package contains deterministic prompt-construction helpers used by the
expansion handler. It does not perform validation, provider selection or model
invocation.
"""
