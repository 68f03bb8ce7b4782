"""
Activity record writing.

Exports a schedule as record lines, one activity per line, using each
activity's canonical to_record() form.
"""

import logging
from pathlib import Path

from ..errors import RecordFileError

logger = logging.getLogger(__name__)


def write_activity_records(path, activities) -> None:
    """
    Write `activities` to `path`, replacing any existing file.

    Raises:
        RecordFileError: the file cannot be created or written
    """
    try:
        with open(Path(path), "w", encoding="utf-8") as f:
            for activity in activities:
                f.write(activity.to_record() + "\n")
    except OSError as e:
        raise RecordFileError("The file cannot be saved.") from e

    logger.info(f"Wrote {len(activities)} activity records to {path}")
