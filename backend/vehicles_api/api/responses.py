"""JSON responses that declare their charset: application/json; charset=utf-8."""

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"
