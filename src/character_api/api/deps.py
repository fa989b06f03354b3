from __future__ import annotations

from fastapi import Request

from character_api.generator import CharacterGenerator


def get_generator(request: Request) -> CharacterGenerator:
    """FastAPI dependency returning the generator built at app startup."""
    return request.app.state.generator
