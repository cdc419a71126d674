from __future__ import annotations
import os
import stat
from http import HTTPStatus
from urllib.parse import quote
from fastapi import Request
from fastapi.responses import FileResponse, HTMLResponse, RedirectResponse, Response
from ..config import HandlerSettings
from ..schemas import ErrorMessage
from ..utils.logging import logger
from .storage import base_name, is_within_root, list_directory, render_listing, resolve_file, stat_path


JSON_MEDIA_TYPE = "application/json; charset=utf-8"
CONTENT_CONTROL = "private, no-transform, no-store, must-revalidate"
INDEX_PAGE = "index.html"


def not_found() -> Response:
    body = ErrorMessage(Code="404", Message=HTTPStatus.NOT_FOUND.phrase)
    # newline-terminated, like a streaming JSON encoder writes it
    return Response(
        content=body.model_dump_json() + "\n",
        status_code=404,
        media_type=JSON_MEDIA_TYPE,
    )


def content_disposition(file_path: str) -> str:
    name = base_name(file_path)
    try:
        name.encode("latin-1")
    except UnicodeEncodeError:
        # header values must be latin-1; same fallback FileResponse uses
        return f"attachment; filename*=utf-8''{quote(name)}"
    return f"attachment; filename='{name}'"


def download_headers(file_path: str) -> dict[str, str]:
    return {
        "Content-Disposition": content_disposition(file_path),
        "Expires": "0",
        "Content-Control": CONTENT_CONTROL,
    }


class StaticFileHandler:
    """Serve files under a root directory as downloads, without auth.

    Every miss (missing, unreadable, or outside the root in strict mode)
    gets the same 404 JSON body and one log line. Directories are served
    through their index.html when present, otherwise as a listing.
    """

    def __init__(self, config: HandlerSettings):
        self.root_directory = config.root_directory
        self.confine = not config.legacy_path_resolution
        if not self.confine:
            logger.warning(
                "Legacy path resolution enabled: '..' segments may escape %s", self.root_directory
            )

    def __call__(self, request: Request) -> Response:
        url_path, file_path = resolve_file(self.root_directory, request.scope["path"], confine=self.confine)
        st = stat_path(file_path) if file_path else None
        if st is None:
            return self._miss(url_path)
        if stat.S_ISDIR(st.st_mode):
            return self._serve_directory(request, url_path, file_path)
        return FileResponse(file_path, headers=download_headers(file_path), stat_result=st)

    def _miss(self, url_path: str) -> Response:
        logger.info("NOT FOUND (%s)", url_path)
        return not_found()

    def _serve_directory(self, request: Request, url_path: str, dir_path: str) -> Response:
        headers = download_headers(dir_path)
        path = request.scope["path"]
        if not path.endswith("/"):
            # relative redirect so links in the listing resolve under the directory
            location = path.rsplit("/", 1)[-1] + "/"
            query = request.scope.get("query_string", b"").decode("latin-1")
            if query:
                location += "?" + query
            return RedirectResponse(url=location, status_code=301, headers=headers)

        index_path = os.path.join(dir_path, INDEX_PAGE)
        index_st = stat_path(index_path)
        if index_st is not None and stat.S_ISREG(index_st.st_mode):
            if not self.confine or is_within_root(self.root_directory, index_path):
                return FileResponse(index_path, headers=headers, stat_result=index_st)

        try:
            names = list_directory(dir_path)
        except OSError:
            return self._miss(url_path)
        return HTMLResponse(render_listing(names), headers=headers)
