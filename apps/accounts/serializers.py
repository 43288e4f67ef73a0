from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Current user profile including favorite business ids."""

    fullName = serializers.CharField(source='full_name', read_only=True)
    favorites = serializers.ListField(
        source='favorite_business_ids',
        child=serializers.UUIDField(),
        read_only=True,
    )

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'fullName',
            'phone',
            'role',
            'favorites',
        ]
        read_only_fields = fields


class FavoriteRequestSerializer(serializers.Serializer):
    businessId = serializers.UUIDField(help_text="UUID of the business")
