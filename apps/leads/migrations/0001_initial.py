import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Lead',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text="Lead's full name", max_length=200)),
                ('email', models.EmailField(blank=True, help_text='Email address (optional)', max_length=254)),
                ('phone', models.CharField(blank=True, max_length=30)),
                ('company', models.CharField(blank=True, help_text='Company the lead works for', max_length=200)),
                ('status', models.CharField(choices=[('New', 'New'), ('Contacted', 'Contacted'), ('Qualified', 'Qualified'), ('Lost', 'Lost')], db_index=True, default='New', max_length=20)),
                ('source', models.CharField(choices=[('Website', 'Website'), ('Referral', 'Referral'), ('Social Media', 'Social Media'), ('Email Campaign', 'Email Campaign'), ('Cold Call', 'Cold Call'), ('Event', 'Event'), ('Other', 'Other')], db_index=True, default='Website', help_text='Where did this lead come from?', max_length=30)),
                ('value', models.DecimalField(decimal_places=2, default=0, help_text='Estimated value', max_digits=12)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('assigned_to', models.ForeignKey(blank=True, help_text='Who is responsible for this lead', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='assigned_leads', to='accounts.profile')),
            ],
            options={
                'verbose_name': 'Lead',
                'verbose_name_plural': 'Leads',
                'ordering': ['-created_at', '-id'],
            },
        ),
    ]
