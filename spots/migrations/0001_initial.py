from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='FeaturedSpot',
            fields=[
                ('id', models.SlugField(blank=True, max_length=100, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('location', models.CharField(help_text="Area text (e.g., 'Bygdøy, Oslo')", max_length=255)),
                ('description', models.TextField(blank=True)),
                ('latitude', models.DecimalField(decimal_places=6, max_digits=9)),
                ('longitude', models.DecimalField(decimal_places=6, max_digits=9)),
                ('image_url', models.CharField(blank=True, max_length=500)),
                ('water_temperature', models.FloatField(default=18.0)),
                ('water_quality', models.CharField(choices=[('Excellent', 'Excellent'), ('Good', 'Good'), ('Fair', 'Fair'), ('Poor', 'Poor')], default='Good', max_length=20)),
                ('crowd_level', models.CharField(choices=[('Low', 'Low'), ('Moderate', 'Moderate'), ('High', 'High')], default='Moderate', max_length=20)),
                ('party_level', models.CharField(choices=[('Quiet', 'Quiet'), ('Chill', 'Chill'), ('Party-Friendly', 'Party-Friendly')], default='Chill', max_length=20)),
                ('byob_friendly', models.BooleanField(default=False)),
                ('sunset_views', models.BooleanField(default=False)),
                ('last_updated', models.CharField(blank=True, help_text='Display text for the last reading', max_length=100)),
                ('facilities', models.JSONField(blank=True, default=list)),
                ('vibes', models.JSONField(blank=True, default=list)),
                ('sort_order', models.IntegerField(default=0)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'featured_spots',
                'ordering': ['sort_order', 'name'],
                'indexes': [models.Index(fields=['is_active', 'sort_order'], name='featured_active_sort_idx')],
            },
        ),
        migrations.CreateModel(
            name='CommunitySpot',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('address', models.CharField(max_length=255)),
                ('description', models.TextField()),
                ('latitude', models.DecimalField(decimal_places=6, max_digits=9)),
                ('longitude', models.DecimalField(decimal_places=6, max_digits=9)),
                ('main_image_url', models.CharField(max_length=500)),
                ('additional_images', models.JSONField(blank=True, default=list)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('rejected', 'Rejected')], default='pending', max_length=20)),
                ('rejection_reason', models.TextField(blank=True)),
                ('approved_at', models.DateTimeField(blank=True, null=True)),
                ('water_temperature', models.FloatField(blank=True, null=True)),
                ('water_quality', models.CharField(blank=True, choices=[('Excellent', 'Excellent'), ('Good', 'Good'), ('Fair', 'Fair'), ('Poor', 'Poor')], max_length=20)),
                ('crowd_level', models.CharField(blank=True, choices=[('Low', 'Low'), ('Moderate', 'Moderate'), ('High', 'High')], max_length=20)),
                ('party_level', models.CharField(blank=True, choices=[('Quiet', 'Quiet'), ('Chill', 'Chill'), ('Party-Friendly', 'Party-Friendly')], max_length=20)),
                ('byob_friendly', models.BooleanField(blank=True, null=True)),
                ('sunset_views', models.BooleanField(blank=True, null=True)),
                ('facilities', models.JSONField(blank=True, null=True)),
                ('vibes', models.JSONField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('approved_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='approved_spots', to=settings.AUTH_USER_MODEL)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='community_spots', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'user_spots',
                'indexes': [
                    models.Index(fields=['status', 'approved_at'], name='user_spots_status_approved_idx'),
                    models.Index(fields=['status', 'created_at'], name='user_spots_status_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Favorite',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('spot_id', models.CharField(max_length=120)),
                ('spot_name', models.CharField(blank=True, max_length=200)),
                ('water_temperature', models.FloatField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='favorites', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'favorites',
                'constraints': [models.UniqueConstraint(fields=('user', 'spot_id'), name='unique_user_favorite')],
            },
        ),
        migrations.CreateModel(
            name='Profile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(blank=True, max_length=150)),
                ('profile_image_url', models.CharField(blank=True, max_length=500)),
                ('is_admin', models.BooleanField(default=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'profiles',
            },
        ),
    ]
