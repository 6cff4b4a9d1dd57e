import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Task',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('type', models.CharField(choices=[('Task', 'Task'), ('Call', 'Call'), ('Meeting', 'Meeting'), ('Follow-up', 'Follow-up')], default='Task', max_length=20)),
                ('priority', models.CharField(choices=[('Low', 'Low'), ('Medium', 'Medium'), ('High', 'High')], db_index=True, default='Medium', max_length=10)),
                ('due_date', models.DateField(blank=True, db_index=True, null=True)),
                ('related_to_type', models.CharField(blank=True, choices=[('Lead', 'Lead'), ('Contact', 'Contact'), ('Deal', 'Deal'), ('Account', 'Account')], max_length=20)),
                ('related_to_id', models.PositiveBigIntegerField(blank=True, null=True)),
                ('status', models.CharField(choices=[('Pending', 'Pending'), ('In Progress', 'In Progress'), ('Completed', 'Completed')], db_index=True, default='Pending', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('assigned_to', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='assigned_tasks', to='accounts.profile')),
            ],
            options={
                'verbose_name': 'Task',
                'verbose_name_plural': 'Tasks',
                'ordering': ['due_date', '-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Communication',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(choices=[('Email', 'Email'), ('Call', 'Call'), ('Note', 'Note'), ('Document', 'Document')], db_index=True, default='Note', max_length=20)),
                ('subject', models.CharField(max_length=200)),
                ('content', models.TextField(blank=True)),
                ('related_to_type', models.CharField(blank=True, choices=[('Lead', 'Lead'), ('Contact', 'Contact'), ('Deal', 'Deal'), ('Account', 'Account')], max_length=20)),
                ('related_to_id', models.PositiveBigIntegerField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='communications', to='accounts.profile')),
            ],
            options={
                'verbose_name': 'Communication',
                'verbose_name_plural': 'Communications',
                'ordering': ['-created_at', '-id'],
            },
        ),
    ]
