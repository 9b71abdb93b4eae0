"""Whitespace tokenizer for payment instructions."""

from __future__ import annotations


def tokenize(instruction: str) -> list[str]:
    """Split on single spaces, strip each piece and drop empty pieces."""

    return [piece.strip() for piece in instruction.split(" ") if piece.strip()]


def uppercase_tokens(tokens: list[str]) -> list[str]:
    """Uppercased view used for type and keyword matching."""

    return [token.upper() for token in tokens]
