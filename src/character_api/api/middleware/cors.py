"""Permissive CORS middleware."""

from fastapi import Request, Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def cors_middleware(request: Request, call_next):
    """
    Middleware adding CORS headers to every response.

    Preflight (OPTIONS) requests are answered here with an empty 200 and
    never reach a route, whatever state the datasets are in.
    """
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    else:
        response = await call_next(request)

    response.headers.update(CORS_HEADERS)
    return response
