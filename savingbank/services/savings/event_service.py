"""
Event Service
Presentation service for the ledger event log.

Handles:
- Query building and filtering for event list views
- Filter parameter extraction
"""

from typing import Any, Dict, Optional, Tuple
from flask import Request
from savingbank.data.core.ledger_event import LedgerEvent


class EventService:

    DEFAULT_PER_PAGE = 50

    @staticmethod
    def build_event_query(name: Optional[str] = None, since_id: Optional[int] = None):
        """
        Build event query with filters.

        Args:
            name: Filter by event name, e.g. "Withdrawn"
            since_id: Only events after this id

        Returns:
            Query ordered oldest first (emission order)
        """
        query = LedgerEvent.query
        if name:
            query = query.filter(LedgerEvent.name == name)
        if since_id:
            query = query.filter(LedgerEvent.id > since_id)
        return query.order_by(LedgerEvent.id.asc())

    @staticmethod
    def extract_filters(request: Request) -> Tuple[Dict[str, Any], int, int]:
        """
        Extract filter parameters from request.

        Returns:
            Tuple of (filters dict, page, per_page)
        """
        filters = {
            'name': request.args.get('name', type=str),
            'since_id': request.args.get('since_id', type=int),
        }
        page = request.args.get('page', 1, type=int)
        per_page = request.args.get('per_page', EventService.DEFAULT_PER_PAGE, type=int)
        return filters, page, per_page

    @classmethod
    def get_event_page(cls, filters: Dict[str, Any], page: int = 1, per_page: int = None) -> Dict[str, Any]:
        per_page = min(per_page or cls.DEFAULT_PER_PAGE, 200)
        pagination = cls.build_event_query(**filters).paginate(
            page=max(page, 1), per_page=per_page, error_out=False
        )
        return {
            'items': [event.to_dict() for event in pagination.items],
            'page': pagination.page,
            'per_page': pagination.per_page,
            'total': pagination.total,
            'pages': pagination.pages,
        }
