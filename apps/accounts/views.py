from rest_framework import serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, inline_serializer

from apps.businesses.serializers import BusinessSerializer
from .serializers import UserSerializer, FavoriteRequestSerializer


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    code = serializers.CharField()


FavoriteIdsResponseSerializer = inline_serializer(
    name='FavoriteIdsResponse',
    fields={'favorites': serializers.ListField(child=serializers.UUIDField())},
)


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return Response(UserSerializer(request.user).data)


@extend_schema(
    responses={
        200: inline_serializer(
            name='FavoritesResponse',
            fields={'favorites': BusinessSerializer(many=True)},
        ),
    },
    description="List the current user's favorite businesses. Removed businesses are skipped.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def list_favorites(request):
    """List favorite businesses using service layer."""
    from apps.accounts.services import list_favorites as list_favorites_service

    businesses = list_favorites_service(user=request.user)

    return Response({'favorites': BusinessSerializer(businesses, many=True).data})


@extend_schema(
    request=FavoriteRequestSerializer,
    responses={
        200: FavoriteIdsResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Add a business to favorites. Adding an existing favorite succeeds unchanged.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def add_favorite(request):
    """Add favorite using service layer."""
    from apps.accounts.services import add_favorite as add_favorite_service, get_favorite_ids

    serializer = FavoriteRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    add_favorite_service(user=request.user, business_id=serializer.validated_data['businessId'])

    return Response({'favorites': get_favorite_ids(user=request.user)})


@extend_schema(
    request=FavoriteRequestSerializer,
    responses={200: FavoriteIdsResponseSerializer},
    description="Remove a business from favorites. Removing an absent favorite succeeds.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def remove_favorite(request):
    """Remove favorite using service layer."""
    from apps.accounts.services import remove_favorite as remove_favorite_service, get_favorite_ids

    serializer = FavoriteRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    remove_favorite_service(user=request.user, business_id=serializer.validated_data['businessId'])

    return Response({'favorites': get_favorite_ids(user=request.user)})
