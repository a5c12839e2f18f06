import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('facilities', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Medicine',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(db_index=True, max_length=255)),
                ('stock', models.PositiveIntegerField(default=0)),
                ('weekly_requirement', models.PositiveIntegerField(help_text='Expected weekly consumption; stock below this is low', validators=[django.core.validators.MinValueValidator(1)])),
                ('expiry_date', models.DateField(blank=True, db_index=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('facility', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='medicines', to='facilities.facility')),
            ],
            options={
                'ordering': ['name'],
                'indexes': [models.Index(fields=['facility', 'name'], name='medicine_facility_name_idx')],
                'constraints': [models.CheckConstraint(condition=models.Q(('weekly_requirement__gt', 0)), name='medicine_weekly_requirement_positive')],
            },
        ),
        migrations.CreateModel(
            name='UsageRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('quantity', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('usage_date', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('medicine', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='usage_records', to='inventory_meds.medicine')),
            ],
            options={
                'ordering': ['-usage_date', '-id'],
                'indexes': [models.Index(fields=['medicine', 'usage_date'], name='usage_medicine_date_idx')],
                'constraints': [models.CheckConstraint(condition=models.Q(('quantity__gt', 0)), name='usage_record_quantity_positive')],
            },
        ),
    ]
