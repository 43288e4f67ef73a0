from rest_framework import status, mixins, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse
from .models import Review
from .serializers import (
    ReviewSerializer,
    ReviewCreateSerializer,
    ReviewUpdateSerializer,
)

UUID_PATTERN = '[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'


class ReviewViewSet(mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """
    ViewSet for the review lifecycle.

    create: Submit a review (one per user per week)
    retrieve: Get a specific review
    update: Update rating/comment (author only)
    partial_update: Same as update
    destroy: Delete a review (author only)
    like: Like a review
    business: All reviews of a business
    my_reviews: Current user's reviews
    """

    queryset = Review.objects.select_related('author', 'business')
    serializer_class = ReviewSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    lookup_value_regex = UUID_PATTERN

    @extend_schema(
        request=ReviewCreateSerializer,
        responses={
            201: ReviewSerializer,
            400: OpenApiResponse(description='Invalid rating or empty comment'),
            404: OpenApiResponse(description='Business not found'),
            429: OpenApiResponse(description='Weekly review limit reached'),
        },
        tags=['reviews'],
    )
    def create(self, request):
        """Create review using service layer."""
        from apps.reviews.services import create_review

        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = create_review(
            author=request.user,
            business_id=serializer.validated_data['businessId'],
            rating=serializer.validated_data['rating'],
            comment=serializer.validated_data['comment'],
        )

        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=ReviewUpdateSerializer,
        responses={200: ReviewSerializer, 403: None, 404: None},
        tags=['reviews'],
    )
    def update(self, request, pk=None, **kwargs):
        """Update review using service layer."""
        from apps.reviews.services import update_review

        serializer = ReviewUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = update_review(
            review_id=pk,
            user=request.user,
            rating=serializer.validated_data.get('rating'),
            comment=serializer.validated_data.get('comment'),
        )

        return Response(ReviewSerializer(review).data)

    @extend_schema(
        request=ReviewUpdateSerializer,
        responses={200: ReviewSerializer, 403: None, 404: None},
        tags=['reviews'],
    )
    def partial_update(self, request, pk=None, **kwargs):
        return self.update(request, pk=pk, **kwargs)

    @extend_schema(responses={204: None, 403: None, 404: None}, tags=['reviews'])
    def destroy(self, request, pk=None, **kwargs):
        """Delete review using service layer."""
        from apps.reviews.services import delete_review

        delete_review(review_id=pk, user=request.user)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={200: ReviewSerializer, 404: None}, tags=['reviews'])
    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated])
    def like(self, request, pk=None):
        """Like a review using service layer."""
        from apps.reviews.services import like_review

        review = like_review(review_id=pk)

        return Response(ReviewSerializer(review).data)

    @extend_schema(responses={200: ReviewSerializer(many=True), 404: None}, tags=['reviews'])
    @action(detail=False, methods=['get'], url_path=f'business/(?P<business_id>{UUID_PATTERN})')
    def business(self, request, business_id=None):
        """Get all reviews of a business using service layer."""
        from apps.reviews.services import get_business_reviews

        reviews = get_business_reviews(business_id=business_id)

        return Response(ReviewSerializer(reviews, many=True).data)

    @extend_schema(responses={200: ReviewSerializer(many=True)}, tags=['reviews'])
    @action(detail=False, methods=['get'], permission_classes=[IsAuthenticated])
    def my_reviews(self, request):
        """Get current user's reviews using service layer."""
        from apps.reviews.services import get_user_reviews

        reviews = get_user_reviews(user=request.user)

        return Response(ReviewSerializer(reviews, many=True).data)
