# ==========================================
# apps/reviews/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from django.utils import timezone
import uuid


class Review(models.Model):
    """A user's rating and comment for one business."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    business = models.ForeignKey('businesses.Business', on_delete=models.CASCADE, related_name='reviews')
    author = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reviews')
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField()
    likes = models.PositiveIntegerField(default=0)
    is_verified = models.BooleanField(default=False)
    # Set explicitly by the service layer to the submission time
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'reviews'
        indexes = [
            models.Index(fields=['business', 'created_at'], name='reviews_busines_3f0c9a_idx'),
            models.Index(fields=['author', 'created_at'], name='reviews_author__8e2b17_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.author.get_display_name()} - {self.business.name} ({self.rating}★)"
