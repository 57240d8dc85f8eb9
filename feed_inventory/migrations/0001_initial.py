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
            name='Inventory',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('type', models.CharField(choices=[('feed', 'Feed'), ('medicine', 'Medicine'), ('equipment', 'Equipment'), ('supplies', 'Supplies')], db_index=True, max_length=20)),
                ('quantity', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('unit', models.CharField(help_text='e.g., kg, bags, doses, pieces', max_length=20)),
                ('minimum_threshold', models.DecimalField(decimal_places=2, default=Decimal('0'), help_text='Alert when quantity falls to this level', max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('cost', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('low_stock_alert', models.BooleanField(default=False, editable=False, help_text='Auto-set when quantity is at or below the minimum threshold')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(blank=True, editable=False, null=True)),
                ('farm', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='inventory', to='farms.farm')),
            ],
            options={
                'db_table': 'inventory',
                'ordering': ['created_at'],
                'verbose_name_plural': 'Inventory',
                'indexes': [
                    models.Index(fields=['farm', 'type'], name='inventory_farm_type_idx'),
                    models.Index(fields=['low_stock_alert'], name='inventory_low_stock_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Feed',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('quantity', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('purchase_date', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('expiry_date', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(blank=True, editable=False, null=True)),
            ],
            options={
                'db_table': 'feeds',
                'ordering': ['created_at'],
            },
        ),
    ]
