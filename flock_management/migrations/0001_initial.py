from decimal import Decimal
from django.db import migrations, models
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('farms', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Bird',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('batch_number', models.CharField(help_text='Batch identifier (e.g., BATCH-2025-001)', max_length=50)),
                ('breed', models.CharField(max_length=100)),
                ('quantity', models.PositiveIntegerField(default=0)),
                ('age', models.PositiveIntegerField(default=0, help_text='Age in weeks')),
                ('status', models.CharField(choices=[('healthy', 'Healthy'), ('sick', 'Sick'), ('sold', 'Sold'), ('deceased', 'Deceased')], db_index=True, default='healthy', max_length=20)),
                ('weight', models.DecimalField(decimal_places=3, default=Decimal('0'), help_text='Average weight per bird (kg)', max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('feed_consumption', models.DecimalField(decimal_places=3, default=Decimal('0'), help_text='Total feed consumed by the batch (kg)', max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(blank=True, editable=False, null=True)),
                ('farm', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='birds', to='farms.farm')),
            ],
            options={
                'db_table': 'birds',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['farm', 'status'], name='birds_farm_status_idx')],
            },
        ),
        migrations.CreateModel(
            name='HealthRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('batch_number', models.CharField(max_length=50)),
                ('type', models.CharField(choices=[('vaccination', 'Vaccination'), ('medication', 'Medication'), ('inspection', 'Inspection'), ('disease', 'Disease')], db_index=True, max_length=20)),
                ('description', models.TextField(blank=True)),
                ('affected_count', models.PositiveIntegerField(default=0)),
                ('treatment', models.CharField(blank=True, max_length=255, null=True)),
                ('next_follow_up', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(blank=True, editable=False, null=True)),
                ('farm', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='health_records', to='farms.farm')),
            ],
            options={
                'db_table': 'health_records',
                'ordering': ['created_at'],
                'indexes': [
                    models.Index(fields=['farm', 'type'], name='health_farm_type_idx'),
                    models.Index(fields=['next_follow_up'], name='health_follow_up_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Chicken',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('breed', models.CharField(db_index=True, max_length=100)),
                ('age', models.PositiveIntegerField(default=0, help_text='Age in weeks')),
                ('weight', models.DecimalField(decimal_places=3, default=Decimal('0'), max_digits=8, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('egg_production', models.PositiveIntegerField(default=0)),
                ('vaccination_status', models.BooleanField(default=False)),
                ('last_health_check', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(blank=True, editable=False, null=True)),
            ],
            options={
                'db_table': 'chickens',
                'ordering': ['created_at'],
            },
        ),
    ]
