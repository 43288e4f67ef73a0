from django.contrib import admin
from django.contrib import messages
from .models import Business


@admin.register(Business)
class BusinessAdmin(admin.ModelAdmin):
    """Admin interface for Businesses."""

    list_display = ['name', 'city', 'rating', 'review_count', 'updated_at']
    list_filter = ['city', 'created_at']
    search_fields = ['name', 'address', 'city', 'phone']
    readonly_fields = ['rating', 'review_count', 'created_at', 'updated_at']
    ordering = ['name']
    actions = ['recompute_ratings']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'categories', 'description')
        }),
        ('Contact & Location', {
            'fields': ('address', 'city', 'district', 'phone', 'website', 'latitude', 'longitude')
        }),
        ('Rating (derived from reviews)', {
            'fields': ('rating', 'review_count'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    @admin.action(description='Recompute rating from reviews')
    def recompute_ratings(self, request, queryset):
        from apps.businesses.services import recompute_business_rating

        for business in queryset:
            recompute_business_rating(business_id=business.id)
        self.message_user(request, f"Recomputed {queryset.count()} business rating(s).", messages.SUCCESS)
