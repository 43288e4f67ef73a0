from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'businesses'

router = DefaultRouter()
router.register(r'', views.BusinessViewSet, basename='business')

urlpatterns = [
    # GET    /api/businesses/          - List businesses
    # GET    /api/businesses/{id}/     - Get business
    path('', include(router.urls)),
]
