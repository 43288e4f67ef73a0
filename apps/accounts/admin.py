# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count
from .models import User, FavoriteBusiness


class FavoriteBusinessInline(admin.TabularInline):
    """Read-only view of a user's favorite business ids."""

    model = FavoriteBusiness
    extra = 0
    fields = ['business_id', 'created_at']
    readonly_fields = ['business_id', 'created_at']
    can_delete = True


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Custom admin interface for User model.

    Provides user management including:
    - User listing with key fields
    - Filtering by status and role
    - Search by email and full name
    - Favorites overview
    """

    list_display = [
        'email',
        'full_name',
        'role',
        'is_active',
        'reviews_count',
        'favorites_count',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'is_active',
        'is_staff',
        'is_superuser',
        'role',
        'created_at',
    ]

    search_fields = [
        'email',
        'full_name',
        'phone',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    # Remove username field references from BaseUserAdmin
    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'full_name', 'phone', 'role', 'password')
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'full_name', 'password1', 'password2'),
        }),
        ('Permissions', {
            'fields': ('role', 'is_active', 'is_staff', 'is_superuser'),
        }),
    )

    readonly_fields = [
        'created_at',
        'updated_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions']
    inlines = [FavoriteBusinessInline]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(
            favorites_total=Count('favorite_entries', distinct=True),
            reviews_total=Count('reviews', distinct=True),
        )

    def favorites_count(self, obj):
        return obj.favorites_total
    favorites_count.short_description = 'Favorites'
    favorites_count.admin_order_field = 'favorites_total'

    def reviews_count(self, obj):
        return obj.reviews_total
    reviews_count.short_description = 'Reviews'
    reviews_count.admin_order_field = 'reviews_total'
