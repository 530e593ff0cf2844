# cardsmith/delivery/api/assets.py
import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile, status

from cardsmith.delivery.api.deps import get_current_user
from cardsmith.domain.asset_service import upload_asset
from cardsmith.infrastructure.database.models import User

router = APIRouter(prefix="/assets", tags=["assets"])
logger = logging.getLogger("uvicorn.error")


@router.post("/upload", status_code=status.HTTP_201_CREATED)
async def upload(request: Request, file: UploadFile = File(...), user: User = Depends(get_current_user)):
    data = await file.read()
    asset = await upload_asset(
        user,
        data,
        file.filename,
        file.content_type,
        executor=getattr(request.app.state, "executor", None),
    )
    logger.info(f"Uploaded asset {asset['key']} ({asset['size']} bytes)")
    return asset
