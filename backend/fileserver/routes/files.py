from __future__ import annotations
from fastapi import APIRouter, Depends, Request
from ..services.handler import StaticFileHandler


router = APIRouter(tags=["files"])


def get_file_handler(request: Request) -> StaticFileHandler:
    return request.app.state.file_handler


@router.api_route("/{path:path}", methods=["GET", "HEAD"], include_in_schema=False)
def download(request: Request, handler: StaticFileHandler = Depends(get_file_handler)):
    # No auth: anything under the root directory is downloadable
    return handler(request)
