"""
Pagination envelope returned by every list endpoint
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class PaginationMeta:
    """The meta block of a list response"""
    current_page: int
    last_page: int
    per_page: int
    total: int
    from_: Optional[int] = None  # 'from' in the API, null on an empty page
    to: Optional[int] = None

    @classmethod
    def from_dict(cls, meta: Dict) -> 'PaginationMeta':
        return cls(
            current_page=int(meta.get('current_page', 1)),
            last_page=int(meta.get('last_page', 1)),
            per_page=int(meta.get('per_page', 0)),
            total=int(meta.get('total', 0)),
            from_=meta.get('from'),
            to=meta.get('to')
        )

    @property
    def item_count(self) -> int:
        """Number of items on this page according to from/to"""
        if self.from_ is None or self.to is None:
            return 0
        return self.to - self.from_ + 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.last_page

    def to_dict(self) -> Dict:
        return {
            'current_page': self.current_page,
            'last_page': self.last_page,
            'per_page': self.per_page,
            'total': self.total,
            'from': self.from_,
            'to': self.to
        }


@dataclass
class Page:
    """A single page of results: {data: [...], meta: {...}}"""
    data: List[Dict] = field(default_factory=list)
    meta: Optional[PaginationMeta] = None

    @classmethod
    def from_response(cls, response: Dict) -> 'Page':
        """Parse a list endpoint response"""
        meta = response.get('meta')
        return cls(
            data=list(response.get('data') or []),
            meta=PaginationMeta.from_dict(meta) if meta else None
        )

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(self.data)
