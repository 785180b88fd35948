# services/writer.py
# Writes the finished document to disk in one shot

import os
import tempfile
from pathlib import Path
from typing import Union

from heatmap.errors import OutputWriteError
from heatmap.models import HeatmapDocument


def write_document(document: HeatmapDocument, path: Union[str, Path]) -> Path:
    """
    Serialize the whole document first, then swap it into place.

    The payload goes to a temp file next to the target and is moved over it
    with os.replace, so a failed write never leaves a half-written file and
    never touches an existing one.
    """
    path = Path(path)
    payload = document.to_json() + "\n"

    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        os.chmod(tmp_name, 0o644)  # mkstemp creates 0600
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise OutputWriteError(f"The output file {path} cannot be created: {e}") from e

    return path
