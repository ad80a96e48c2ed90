"""Export the served index as structured data."""

from __future__ import annotations

import os
from pathlib import Path
from tempfile import NamedTemporaryFile

from fastapi import (  # type: ignore[import-not-found]
    APIRouter,
    BackgroundTasks,
    Query,
    Response,
)
from fastapi.responses import (  # type: ignore[import-not-found]
    FileResponse,
    PlainTextResponse,
)

from bookindex.index_cache import dump_index
from bookindex.xlsx import write_workbook

from ..utils import current_index, get_index_path

router = APIRouter()


@router.get("/convert")
async def convert_endpoint(
    background_tasks: BackgroundTasks,
    output_format: str = Query(default="json", enum=["json", "yaml", "xlsx"]),
) -> Response:
    """Export the index as JSON, YAML or an Excel workbook.

    Args:
        background_tasks: Used to delete the temporary workbook.
        output_format: Desired output format.

    Returns:
        The index in the requested format.
    """

    index = current_index()

    if output_format == "json":
        return PlainTextResponse(
            dump_index(index, "json"), media_type="application/json"
        )

    if output_format == "yaml":
        return PlainTextResponse(
            dump_index(index, "yaml"), media_type="application/x-yaml"
        )

    # Prepare XLSX output by writing to a temporary file.
    tmp = NamedTemporaryFile(suffix=".xlsx", delete=False)
    tmp.close()
    write_workbook(index, Path(tmp.name))

    # Schedule file deletion after the response is sent.
    background_tasks.add_task(os.unlink, tmp.name)

    return FileResponse(
        tmp.name, filename=f"{get_index_path().stem}.xlsx"
    )
