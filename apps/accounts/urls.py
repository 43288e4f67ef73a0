from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # User profile
    path('user/', views.get_current_user, name='current-user'),

    # Favorites
    path('favorites/', views.list_favorites, name='favorites'),
    path('favorites/add/', views.add_favorite, name='favorites-add'),
    path('favorites/remove/', views.remove_favorite, name='favorites-remove'),
]
