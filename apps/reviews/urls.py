from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'reviews'

router = DefaultRouter()
router.register(r'', views.ReviewViewSet, basename='review')

urlpatterns = [
    # Review ViewSet routes
    # POST   /api/reviews/                      - Create review
    # GET    /api/reviews/{id}/                 - Get review
    # PUT    /api/reviews/{id}/                 - Update review
    # PATCH  /api/reviews/{id}/                 - Partial update
    # DELETE /api/reviews/{id}/                 - Delete review
    # POST   /api/reviews/{id}/like/            - Like review

    # Custom review actions
    # GET    /api/reviews/business/{business_id}/  - Reviews of a business
    # GET    /api/reviews/my_reviews/              - Current user's reviews
    path('', include(router.urls)),
]
