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
            name='AdminAction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('action_type', models.CharField(choices=[('approve_spot', 'Approve spot'), ('reject_spot', 'Reject spot'), ('edit_featured_spot', 'Edit featured spot'), ('create_featured_spot', 'Create featured spot')], max_length=30)),
                ('target_id', models.CharField(max_length=120)),
                ('target_type', models.CharField(choices=[('community_spot', 'Community spot'), ('featured_spot', 'Featured spot')], max_length=20)),
                ('details', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('admin', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='admin_actions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'admin_actions',
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['-created_at'], name='admin_actions_created_idx')],
            },
        ),
    ]
