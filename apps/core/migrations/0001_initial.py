import datetime

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='OrganizationSettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('company_name', models.CharField(default='CRM Pro', max_length=200, verbose_name='company name')),
                ('currency', models.CharField(default='USD', help_text='ISO 4217 code, e.g. USD', max_length=3, verbose_name='currency')),
                ('timezone', models.CharField(default='UTC', max_length=50, verbose_name='timezone')),
                ('working_hours_start', models.TimeField(default=datetime.time(9, 0), verbose_name='working hours start')),
                ('working_hours_end', models.TimeField(default=datetime.time(17, 0), verbose_name='working hours end')),
                ('holidays', models.JSONField(blank=True, default=list, verbose_name='holidays')),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'organization settings',
                'verbose_name_plural': 'organization settings',
            },
        ),
    ]
