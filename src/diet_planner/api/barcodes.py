"""Barcode registry endpoints."""

from fastapi import APIRouter, Depends

from diet_planner.api.dependencies import get_container, require_user
from diet_planner.api.schemas import BarcodeAssociate
from diet_planner.containers import AppContainer
from diet_planner.domain.barcodes import BarcodeListing, BarcodeMatch
from diet_planner.domain.users import UserRecord

router = APIRouter(prefix="/barcodes", tags=["barcodes"])


@router.post("")
async def associate_barcode(
    body: BarcodeAssociate,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, int]:
    """Associate a barcode to a catalog food."""
    association = container.barcode_service.associate(
        body.barcode, body.food_id, user.id
    )
    return {"id": association.id}


@router.get("")
async def list_my_barcodes(
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[BarcodeListing]:
    """Return the caller's barcode associations."""
    return container.barcode_service.list_mine(user.id)


@router.get("/{barcode}", dependencies=[Depends(require_user)])
async def find_by_barcode(
    barcode: str, container: AppContainer = Depends(get_container)
) -> BarcodeMatch | None:
    """Return the food associated to a barcode, or null."""
    return container.barcode_service.find_by_barcode(barcode)


@router.delete("/{association_id}")
async def remove_barcode(
    association_id: int,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    """Delete one of the caller's associations."""
    container.barcode_service.remove(association_id, user.id)
    return {"success": True}
