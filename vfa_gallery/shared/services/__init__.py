"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → CollectionService → OwnershipGuard   (may the user do this?)
                                → MembershipLedger (ordered membership rows)
                                → Repositories → Database

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Run inside the request transaction (via session)
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- MembershipLedger: add / remove / reorder / list artworks of a collection
- OwnershipGuard: collection → gallery → user ownership and visibility
- CollectionService: ownership-checked membership operations and collection copy

Usage:
======
    from vfa_gallery.shared.services import CollectionService

    service = CollectionService(db)
    rows = await service.reorder_artworks(user_id, collection_id, [a3, a1, a2])
"""

from vfa_gallery.shared.services.membership_ledger import MembershipLedger, validate_reorder
from vfa_gallery.shared.services.ownership_guard import OwnershipGuard
from vfa_gallery.shared.services.collection_service import (
    CollectionDetail,
    CollectionService,
    CollectionSummary,
)

__all__ = [
    "MembershipLedger",
    "validate_reorder",
    "OwnershipGuard",
    "CollectionService",
    "CollectionSummary",
    "CollectionDetail",
]
