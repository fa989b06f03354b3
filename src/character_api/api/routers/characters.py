"""Character API router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from character_api.generator import CharacterGenerator
from character_api.models import CharacterResult, NameResult, PersonalityResult

from ..deps import get_generator

router = APIRouter(tags=["characters"])

# Handlers answer any method; OPTIONS never reaches them, see cors_middleware.
METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


@router.api_route("/name", methods=METHODS, response_model=NameResult)
def generate_name(
    generator: CharacterGenerator = Depends(get_generator),
) -> NameResult:
    """Random first name, last name and sex."""
    return generator.generate_name()


@router.api_route("/personality", methods=METHODS, response_model=PersonalityResult)
def generate_personality(
    generator: CharacterGenerator = Depends(get_generator),
) -> PersonalityResult:
    """Random personality type and alignment."""
    return generator.generate_personality()


@router.api_route("/character", methods=METHODS, response_model=CharacterResult)
def generate_character(
    generator: CharacterGenerator = Depends(get_generator),
) -> CharacterResult:
    """Name and personality combined."""
    return generator.generate_character()


# Must stay last: matches every path not claimed above.
@router.api_route("/{path:path}", methods=METHODS, response_class=PlainTextResponse)
def echo_path(request: Request) -> str:
    return f"Hello, you've requested: {request.url.path}\n"
