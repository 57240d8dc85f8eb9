from django.db import migrations, models
import django.utils.timezone
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Farm',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('owner_id', models.CharField(db_index=True, help_text='Identifier of the owning principal', max_length=128)),
                ('name', models.CharField(max_length=200)),
                ('location', models.CharField(blank=True, max_length=255)),
                ('capacity', models.PositiveIntegerField(default=0, help_text='Maximum number of birds the farm can hold')),
                ('current_stock', models.PositiveIntegerField(default=0, help_text='Number of birds currently on the farm')),
                ('employee_count', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(blank=True, editable=False, null=True)),
            ],
            options={
                'db_table': 'farms',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['owner_id'], name='farms_owner_idx')],
            },
        ),
    ]
