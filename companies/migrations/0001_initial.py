# Generated manually

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Company',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, null=True)),
                ('tone', models.CharField(blank=True, help_text='Free-text style hint for generated copy', max_length=255, null=True)),
                ('site_url', models.URLField(help_text='Base URL of the business website')),
                ('logo_url', models.URLField(blank=True, null=True)),
                ('socials', models.JSONField(blank=True, default=dict, help_text="Social handles keyed by platform, e.g. {'x': '@vinet'}")),
                ('colors', models.JSONField(blank=True, default=dict, help_text="Brand colours keyed by role, e.g. {'primary': '#0055aa'}")),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'company',
                'ordering': ['-id'],
                'verbose_name_plural': 'companies',
            },
        ),
        migrations.CreateModel(
            name='Competitor',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(blank=True, max_length=255, null=True)),
                ('url', models.URLField()),
                ('socials', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='competitors', to='companies.company')),
            ],
            options={
                'db_table': 'competitor',
                'ordering': ['id'],
            },
        ),
    ]
