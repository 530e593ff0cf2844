# cardsmith/infrastructure/cloudinary/upload_file.py
from io import BytesIO
from typing import Optional

import cloudinary
import cloudinary.uploader
from PIL import Image, UnidentifiedImageError

from cardsmith.config.settings import settings


# Configure once; CLOUDINARY_URL from the environment is honoured when the split vars are unset
cloudinary.config(
    secure=True,
    **{
        key: value
        for key, value in (
            ("cloud_name", settings.CLOUDINARY_CLOUD_NAME),
            ("api_key", settings.CLOUDINARY_API_KEY),
            ("api_secret", settings.CLOUDINARY_API_SECRET),
        )
        if value
    },
)


def inspect_image(data: bytes) -> Optional[str]:
    """Pillow format name of the payload, or None when it is not a readable image."""
    try:
        with Image.open(BytesIO(data)) as img:
            img.verify()
            return img.format
    except (UnidentifiedImageError, OSError, SyntaxError):
        return None


def upload_image_bytes(
    data: bytes,
    public_id: str,
    folder: str = settings.ASSET_FOLDER,
    overwrite: bool = False,
    tags: Optional[list] = None,
) -> str:
    buf = BytesIO(data)
    buf.seek(0)

    res = cloudinary.uploader.upload(
        buf,
        resource_type="image",
        folder=folder,
        public_id=public_id,
        overwrite=overwrite,
        tags=tags or [],
    )
    return res["secure_url"]
