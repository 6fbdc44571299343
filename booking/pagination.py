import math

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class BookingPagination(PageNumberPagination):
    """`?page=` and `?limit=`, with a `pagination` block beside the results."""

    page_size = 10
    page_size_query_param = "limit"
    max_page_size = 100

    def get_paginated_response(self, data):
        total = self.page.paginator.count
        limit = self.page.paginator.per_page
        return Response({
            "results": data,
            "pagination": {
                "page": self.page.number,
                "limit": limit,
                "total": total,
                "total_pages": math.ceil(total / limit) if total else 0,
            },
        })

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "required": ["results", "pagination"],
            "properties": {
                "results": schema,
                "pagination": {
                    "type": "object",
                    "properties": {
                        "page": {"type": "integer", "example": 1},
                        "limit": {"type": "integer", "example": self.page_size},
                        "total": {"type": "integer", "example": 42},
                        "total_pages": {"type": "integer", "example": 5},
                    },
                },
            },
        }
