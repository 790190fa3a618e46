"""
Deposit Service
Read-side queries over deposits, keyed by who holds (or last held) the unit.

Handles:
- Listing the deposits an address currently controls
- Including closed deposits whose unit the address held when it was burned
- Pagination for the API
"""

from typing import Any, Dict, Optional
from sqlalchemy import and_, or_
from savingbank.data.savings.deposit import Deposit
from savingbank.data.savings.ownership_unit import OwnershipUnit, RetiredUnit


class DepositService:

    DEFAULT_PER_PAGE = 20
    MAX_PER_PAGE = 100

    @staticmethod
    def build_holder_query(address: str, include_closed: bool = False):
        """
        Build the query of deposits belonging to an address.

        Ownership is the live unit holder, so a deposit opened by someone else
        and transferred to `address` is included, and one `address` opened but
        transferred away is not.

        Args:
            address: Holder address
            include_closed: Also return closed deposits whose unit `address`
                held at burn time

        Returns:
            Query ordered by deposit id
        """
        query = (
            Deposit.query
            .outerjoin(OwnershipUnit, OwnershipUnit.id == Deposit.id)
            .outerjoin(RetiredUnit, RetiredUnit.id == Deposit.id)
        )
        condition = OwnershipUnit.holder == address
        if include_closed:
            condition = or_(condition, and_(Deposit.is_closed.is_(True), RetiredUnit.last_holder == address))
        return query.filter(condition).order_by(Deposit.id)

    @staticmethod
    def serialize(deposit: Deposit, owner: Optional[str] = None) -> Dict[str, Any]:
        data = deposit.to_dict(skip_fields=['created_at', 'updated_at'])
        data['owner'] = owner
        data['state'] = deposit.status
        return data

    @classmethod
    def get_holder_page(cls, address: str, page: int = 1, per_page: int = None,
                        include_closed: bool = False) -> Dict[str, Any]:
        """
        Paginated deposits for an address, ready for JSON.

        Returns:
            dict: items, page, per_page, total, pages
        """
        per_page = min(per_page or cls.DEFAULT_PER_PAGE, cls.MAX_PER_PAGE)
        page = max(page or 1, 1)

        pagination = cls.build_holder_query(address, include_closed).paginate(
            page=page, per_page=per_page, error_out=False
        )
        items = [
            cls.serialize(deposit, owner=None if deposit.is_closed else address)
            for deposit in pagination.items
        ]
        return {
            'items': items,
            'page': pagination.page,
            'per_page': pagination.per_page,
            'total': pagination.total,
            'pages': pagination.pages,
        }
