from rest_framework import serializers
from .models import Review


class ReviewSerializer(serializers.ModelSerializer):
    """Review as exposed to the mobile client."""

    businessId = serializers.UUIDField(source='business_id', read_only=True)
    userId = serializers.UUIDField(source='author_id', read_only=True)
    userName = serializers.CharField(source='author.get_display_name', read_only=True)
    isVerified = serializers.BooleanField(source='is_verified', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Review
        fields = [
            'id',
            'businessId',
            'userId',
            'userName',
            'rating',
            'comment',
            'likes',
            'isVerified',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields


class ReviewCreateSerializer(serializers.Serializer):
    """Input for review submission."""

    businessId = serializers.UUIDField()
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(allow_blank=False, trim_whitespace=True)


class ReviewUpdateSerializer(serializers.Serializer):
    """Input for review update; omitted fields are left unchanged."""

    rating = serializers.IntegerField(min_value=1, max_value=5, required=False)
    comment = serializers.CharField(allow_blank=False, trim_whitespace=True, required=False)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError('Provide rating and/or comment to update')
        return attrs
