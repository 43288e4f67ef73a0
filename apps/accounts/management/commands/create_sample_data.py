"""
Management command to create sample data for testing the API.

Usage:
    python manage.py create_sample_data [--clear]

This creates:
- 4 users (admin, ayse, mehmet, zeynep)
- 6 automotive service businesses
- Reviews submitted through the review service (so ratings are aggregated
  and the weekly limit is respected)
- Favorites
"""

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User, UserRole, FavoriteBusiness
from apps.accounts.services import add_favorite
from apps.businesses.models import Business
from apps.reviews.models import Review
from apps.reviews.services import create_review


SAMPLE_BUSINESSES = [
    {
        'name': 'Auto Servis Plus',
        'categories': ['Servisler'],
        'address': 'Kadıköy, İstanbul',
        'city': 'İstanbul',
        'district': 'Kadıköy',
        'phone': '+90 555 123 4567',
        'description': 'Profesyonel araç bakım ve onarım servisi. 20 yıllık tecrübe.',
        'latitude': 40.983013,
        'longitude': 29.028961,
    },
    {
        'name': 'Usta Kaportacı',
        'categories': ['Kaportacılar'],
        'address': 'Beşiktaş, İstanbul',
        'city': 'İstanbul',
        'district': 'Beşiktaş',
        'phone': '+90 555 234 5678',
        'description': 'Uzman kaporta ve boya işleri. Sigorta anlaşmalı servis.',
        'latitude': 41.042773,
        'longitude': 29.006542,
    },
    {
        'name': 'Hızlı Lastik',
        'categories': ['Lastikçiler'],
        'address': 'Çankaya, Ankara',
        'city': 'Ankara',
        'district': 'Çankaya',
        'phone': '+90 555 345 6789',
        'description': 'Lastik değişimi, balans ve rot ayarı.',
        'latitude': 39.920770,
        'longitude': 32.854110,
    },
    {
        'name': 'Elektrik Uzmanı Oto',
        'categories': ['Oto Elektrik'],
        'address': 'Bornova, İzmir',
        'city': 'İzmir',
        'district': 'Bornova',
        'phone': '+90 555 456 7890',
        'description': 'Akü, marş ve şarj sistemleri, arıza tespiti.',
        'latitude': 38.462520,
        'longitude': 27.216560,
    },
    {
        'name': 'Parlak Oto Yıkama',
        'categories': ['Oto Yıkama'],
        'address': 'Nilüfer, Bursa',
        'city': 'Bursa',
        'district': 'Nilüfer',
        'phone': '+90 555 567 8901',
        'description': 'İç dış yıkama, pasta cila ve seramik kaplama.',
        'latitude': 40.213640,
        'longitude': 28.982670,
    },
    {
        'name': '7/24 Çekici',
        'categories': ['Çekici', 'Acil'],
        'address': 'Ümraniye, İstanbul',
        'city': 'İstanbul',
        'district': 'Ümraniye',
        'phone': '+90 555 678 9012',
        'description': 'Şehir içi ve şehirlerarası araç kurtarma.',
        'latitude': 41.016660,
        'longitude': 29.124440,
    },
]

# (user key, business index, rating, comment, days ago)
SAMPLE_REVIEWS = [
    ('ayse', 0, 5, 'Çok hızlı ve temiz iş çıkardılar.', 30),
    ('ayse', 2, 4, 'Lastik değişimi sorunsuzdu, biraz bekledim.', 20),
    ('ayse', 4, 5, 'Araç pırıl pırıl oldu.', 2),
    ('mehmet', 0, 3, 'Fiyatlar biraz yüksek ama işçilik iyi.', 25),
    ('mehmet', 1, 5, 'Kaporta işi kusursuz.', 10),
    ('zeynep', 1, 4, 'Sigorta işlemlerinde yardımcı oldular.', 40),
    ('zeynep', 3, 2, 'Arızayı ikinci seferde buldular.', 15),
    ('zeynep', 5, 5, 'Gece yarısı 20 dakikada geldiler.', 1),
]


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        businesses = self.create_businesses()
        self.create_reviews(users, businesses)
        self.create_favorites(users, businesses)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        self.stdout.write('  ayse@example.com / password123')
        self.stdout.write('  mehmet@example.com / password123')
        self.stdout.write('  zeynep@example.com / password123')

    def clear_data(self):
        """Clear all data from the database."""
        FavoriteBusiness.objects.all().delete()
        Review.objects.all().delete()
        Business.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()

    def create_users(self):
        """Create sample users."""
        self.stdout.write('  Creating users...')

        users = {}

        admin, created = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'full_name': 'Admin',
                'role': UserRole.ADMIN,
                'is_staff': True,
                'is_superuser': True,
            }
        )
        if created:
            admin.set_password('admin123')
            admin.save()
        users['admin'] = admin

        for key, full_name in [
            ('ayse', 'Ayşe Yılmaz'),
            ('mehmet', 'Mehmet Demir'),
            ('zeynep', 'Zeynep Kaya'),
        ]:
            user, created = User.objects.get_or_create(
                email=f'{key}@example.com',
                defaults={'full_name': full_name},
            )
            if created:
                user.set_password('password123')
                user.save()
            users[key] = user

        return users

    def create_businesses(self):
        """Create sample businesses."""
        self.stdout.write('  Creating businesses...')

        businesses = []
        for data in SAMPLE_BUSINESSES:
            business, _ = Business.objects.get_or_create(
                name=data['name'],
                defaults=data,
            )
            businesses.append(business)
        return businesses

    def create_reviews(self, users, businesses):
        """Submit sample reviews through the review service."""
        self.stdout.write('  Creating reviews...')

        now = timezone.now()
        count = 0
        for user_key, business_index, rating, comment, days_ago in SAMPLE_REVIEWS:
            user = users[user_key]
            business = businesses[business_index]
            if Review.objects.filter(author=user, business=business).exists():
                continue
            create_review(
                author=user,
                business_id=business.id,
                rating=rating,
                comment=comment,
                now=now - timedelta(days=days_ago),
            )
            count += 1

        self.stdout.write(f'    {count} review(s) created')

    def create_favorites(self, users, businesses):
        """Create sample favorites."""
        self.stdout.write('  Creating favorites...')

        add_favorite(user=users['ayse'], business_id=businesses[0].id)
        add_favorite(user=users['ayse'], business_id=businesses[4].id)
        add_favorite(user=users['mehmet'], business_id=businesses[1].id)
        add_favorite(user=users['zeynep'], business_id=businesses[5].id)
