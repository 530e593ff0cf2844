# cardsmith/domain/asset_service.py
import asyncio
import uuid
from concurrent.futures import Executor
from typing import Any, Dict, Optional

from cardsmith.config.settings import settings
from cardsmith.domain.errors import InvalidRequestError
from cardsmith.infrastructure.cloudinary.upload_file import inspect_image, upload_image_bytes
from cardsmith.infrastructure.database.models import User

ALLOWED_MIMETYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")


def asset_key(user: User) -> str:
    return f"users/{user.id}/{uuid.uuid4()}"


async def upload_asset(
    user: User,
    data: bytes,
    filename: Optional[str],
    mimetype: Optional[str],
    executor: Optional[Executor] = None,
) -> Dict[str, Any]:
    if not data:
        raise InvalidRequestError("No file uploaded")
    if mimetype not in ALLOWED_MIMETYPES:
        raise InvalidRequestError(
            f"Invalid file type. Only {', '.join(t.split('/')[1] for t in ALLOWED_MIMETYPES)} images are allowed"
        )
    if len(data) > settings.MAX_UPLOAD_BYTES:
        raise InvalidRequestError(
            f"File too large. Maximum size is {settings.MAX_UPLOAD_BYTES // (1024 * 1024)}MB"
        )
    if inspect_image(data) is None:
        raise InvalidRequestError("Uploaded file is not a readable image")

    key = asset_key(user)
    # The Cloudinary SDK is blocking.
    loop = asyncio.get_running_loop()
    url = await loop.run_in_executor(executor, upload_image_bytes, data, key, settings.ASSET_FOLDER)
    return {
        "url": url,
        "key": key,
        "filename": filename,
        "size": len(data),
        "mimetype": mimetype,
    }
