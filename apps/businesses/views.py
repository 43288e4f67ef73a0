from rest_framework import viewsets
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema, extend_schema_view

from .models import Business
from .serializers import BusinessSerializer


class BusinessPagination(PageNumberPagination):
    """Custom pagination for businesses."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


@extend_schema_view(
    list=extend_schema(description="List businesses, best rated first.", tags=['businesses']),
    retrieve=extend_schema(description="Get a business with its current rating and review count.", tags=['businesses']),
)
class BusinessViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only directory of businesses.

    list: Get all businesses ordered by rating
    retrieve: Get a specific business
    """

    serializer_class = BusinessSerializer
    permission_classes = [AllowAny]
    pagination_class = BusinessPagination
    lookup_value_regex = '[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'

    def get_queryset(self):
        from apps.businesses.services import list_businesses

        return list_businesses()

    def get_object(self):
        from apps.businesses.services import get_business_by_id

        business = get_business_by_id(business_id=self.kwargs['pk'])
        self.check_object_permissions(self.request, business)
        return business
