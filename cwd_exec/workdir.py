from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


def resolve_working_directory(
    explicit: Optional[Union[str, "os.PathLike[str]"]] = None,
) -> Union[str, "os.PathLike[str]"]:
    """Return ``explicit`` unchanged, or the current working directory.

    Existence is not checked here; ``execute`` does that at call time. If the
    current directory cannot be queried (for example it was removed while the
    process runs) there is nothing sensible to fall back to, so the process
    exits.
    """
    if explicit is not None:
        return explicit
    try:
        return Path(os.getcwd())
    except OSError as err:
        logger.critical("Couldn't find current dir: %s", err)
        raise SystemExit(f"Couldn't find current dir: {err}") from err
