"""Barcode registry service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from diet_planner.domain.barcodes import (
    BarcodeAssociation,
    BarcodeListing,
    BarcodeMatch,
)
from diet_planner.errors import ConflictError, NotFoundError, PermissionDeniedError
from diet_planner.services.foods import FoodRepository
from diet_planner.services.validation import require_text

_logger = logging.getLogger(__name__)


class BarcodeRepository(Protocol):
    """Persistence interface for barcode associations."""

    def get_by_barcode(self, barcode: str) -> BarcodeAssociation | None:
        """Return the association for a barcode, if any."""

    def find_match(self, barcode: str) -> BarcodeMatch | None:
        """Return the association joined with its food, if any."""

    def get_association(self, association_id: int) -> BarcodeAssociation | None:
        """Return an association by id, if present."""

    def list_user_associations(self, user_id: int) -> list[BarcodeListing]:
        """Return associations created by a user."""

    def create_association(
        self, barcode: str, food_id: int, user_id: int
    ) -> BarcodeAssociation:
        """Insert an association; raise ConflictError on a duplicate barcode."""

    def delete_association(self, association_id: int) -> None:
        """Delete an association by id."""

    def delete_barcodes_for_food(self, food_id: int) -> None:
        """Delete every association pointing at a food."""


@dataclass
class BarcodeRegistryService:
    """Maps scanned barcodes to catalog foods."""

    repository: BarcodeRepository
    food_repository: FoodRepository

    def associate(self, barcode: str, food_id: int, owner_id: int) -> BarcodeAssociation:
        """Associate a barcode to an existing food.

        Barcodes are unique across all users, not per user.
        """
        code = require_text(barcode, "barcode")
        if self.food_repository.get_food(food_id) is None:
            raise NotFoundError(f"Food {food_id} not found")
        if self.repository.get_by_barcode(code) is not None:
            raise ConflictError(f"Barcode {code} is already associated to a food")
        association = self.repository.create_association(code, food_id, owner_id)
        _logger.info(
            "Associated barcode=%s food=%s user=%s", code, food_id, owner_id
        )
        return association

    def find_by_barcode(self, barcode: str) -> BarcodeMatch | None:
        """Return the food summary for a barcode, if associated."""
        if not barcode or not barcode.strip():
            return None
        return self.repository.find_match(barcode.strip())

    def list_mine(self, owner_id: int) -> list[BarcodeListing]:
        """Return the associations a user created."""
        return self.repository.list_user_associations(owner_id)

    def remove(self, association_id: int, requesting_user_id: int) -> None:
        """Delete an association owned by the requester."""
        association = self.repository.get_association(association_id)
        if association is None:
            raise NotFoundError(f"Barcode association {association_id} not found")
        if association.user_id != requesting_user_id:
            raise PermissionDeniedError("You cannot delete this barcode")
        self.repository.delete_association(association_id)
