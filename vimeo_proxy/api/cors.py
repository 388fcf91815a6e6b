from fastapi import Request

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Authorization, Content-Type",
}


async def add_cors_headers(request: Request, call_next):
    # Applied to every response, errors and framework 404/422 included.
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response
