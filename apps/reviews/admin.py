from django.contrib import admin
from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """Admin interface for Reviews."""

    list_display = [
        'get_business_name',
        'author',
        'rating',
        'likes',
        'is_verified',
        'created_at'
    ]
    list_filter = [
        'rating',
        'is_verified',
        'created_at',
    ]
    search_fields = [
        'business__name',
        'author__email',
        'comment'
    ]
    # Rating changes must go through the service layer to keep aggregates in sync
    readonly_fields = ['business', 'author', 'rating', 'likes', 'created_at', 'updated_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('business', 'author', 'rating', 'comment')
        }),
        ('Engagement', {
            'fields': ('likes', 'is_verified')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        """Optimize queries with select_related."""
        return super().get_queryset(request).select_related('business', 'author')

    def get_business_name(self, obj):
        """Display business name."""
        return obj.business.name
    get_business_name.short_description = 'Business'
    get_business_name.admin_order_field = 'business__name'

    def has_add_permission(self, request):
        return False

    def delete_model(self, request, obj):
        from apps.businesses.services import recompute_business_rating

        business_id = obj.business_id
        super().delete_model(request, obj)
        recompute_business_rating(business_id=business_id)

    def delete_queryset(self, request, queryset):
        from apps.businesses.services import recompute_business_rating

        business_ids = set(queryset.values_list('business_id', flat=True))
        super().delete_queryset(request, queryset)
        for business_id in business_ids:
            recompute_business_rating(business_id=business_id)
