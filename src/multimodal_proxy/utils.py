import shutil
import time
import uuid
from pathlib import Path

from fastapi import UploadFile

from multimodal_proxy.domain import LocalMedia


def stage_upload(file: UploadFile, uploads_dir: Path) -> LocalMedia:
    """
    Copies a multipart upload into the uploads directory.

    The staged name is prefixed with a millisecond timestamp and a short
    random token so concurrent uploads of the same file never collide.
    The caller owns the staged file from here on; a failed copy leaves
    nothing behind.
    """
    uploads_dir.mkdir(parents=True, exist_ok=True)
    original_name = Path(file.filename or "upload").name
    staged_path = (
        uploads_dir
        / f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}-{original_name}"
    )

    try:
        file.file.seek(0)
        with open(staged_path, "wb") as staged:
            shutil.copyfileobj(file.file, staged)
    except OSError:
        staged_path.unlink(missing_ok=True)
        raise

    return LocalMedia(
        path=staged_path,
        file_name=original_name,
        size=staged_path.stat().st_size,
    )
