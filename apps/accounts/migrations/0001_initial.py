import uuid

import django.utils.timezone
from django.db import migrations, models

import apps.accounts.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('email', models.EmailField(db_index=True, help_text='Required. Used for login.', max_length=255, unique=True, verbose_name='email address')),
                ('auth_id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Stable external identifier of this identity', unique=True, verbose_name='auth id')),
                ('metadata', models.JSONField(blank=True, default=dict, help_text='Sign-up metadata, e.g. {"full_name": ..., "role": ...}', verbose_name='metadata')),
                ('is_active', models.BooleanField(default=True, verbose_name='active')),
                ('is_staff', models.BooleanField(default=False, help_text='Designates whether the user can log into admin site.', verbose_name='staff status')),
                ('date_joined', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date joined')),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
            ],
            options={
                'verbose_name': 'user',
                'verbose_name_plural': 'users',
                'ordering': ['-date_joined'],
            },
            managers=[
                ('objects', apps.accounts.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name='Profile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('auth_id', models.UUIDField(blank=True, help_text='auth_id of the identity this profile belongs to', null=True, unique=True, verbose_name='auth id')),
                ('name', models.CharField(max_length=150, verbose_name='name')),
                ('email', models.EmailField(max_length=255, verbose_name='email address')),
                ('role', models.CharField(choices=[('System Admin', 'System Admin'), ('Sales Manager', 'Sales Manager'), ('Sales Executive', 'Sales Executive'), ('Marketing Executive', 'Marketing Executive'), ('Support Executive', 'Support Executive'), ('Customer', 'Customer')], db_index=True, default='Sales Executive', max_length=30, verbose_name='role')),
                ('enabled', models.BooleanField(default=True, help_text='Disabled profiles cannot sign in', verbose_name='enabled')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
            ],
            options={
                'verbose_name': 'profile',
                'verbose_name_plural': 'profiles',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['email'], name='profile_email_idx')],
            },
        ),
    ]
