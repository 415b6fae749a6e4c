from decimal import Decimal
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('marketing', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Tour',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255, verbose_name='Tên tour')),
                ('description', models.TextField(blank=True)),
                ('location', models.CharField(max_length=255, verbose_name='Địa điểm')),
                ('duration', models.PositiveIntegerField(default=1, help_text='Số ngày')),
                ('price', models.DecimalField(decimal_places=0, help_text='Giá mỗi người', max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('max_participants', models.PositiveIntegerField(blank=True, null=True)),
                ('start_date', models.DateField(blank=True, null=True)),
                ('end_date', models.DateField(blank=True, null=True)),
                ('image', models.URLField(blank=True, max_length=500)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('promotion', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='tours', to='marketing.promotion')),
            ],
            options={
                'verbose_name': 'Tour',
                'verbose_name_plural': 'Tour',
                'ordering': ['-created_at'],
            },
        ),
    ]
