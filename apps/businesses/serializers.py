from rest_framework import serializers
from .models import Business


class BusinessSerializer(serializers.ModelSerializer):
    """Business detail with its derived rating."""

    reviewCount = serializers.IntegerField(source='review_count', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Business
        fields = [
            'id',
            'name',
            'categories',
            'description',
            'address',
            'city',
            'district',
            'phone',
            'website',
            'latitude',
            'longitude',
            'rating',
            'reviewCount',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields
