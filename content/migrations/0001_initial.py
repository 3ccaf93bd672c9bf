# Generated manually

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('companies', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ContentPlan',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('week_start', models.DateField()),
                ('platform', models.CharField(default='multi', max_length=32)),
                ('status', models.CharField(choices=[('draft', 'Draft')], default='draft', max_length=20)),
                ('snapshot', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='content_plans', to='companies.company')),
            ],
            options={
                'db_table': 'content_plan',
                'ordering': ['-id'],
            },
        ),
        migrations.CreateModel(
            name='Post',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('platform', models.CharField(choices=[('facebook', 'Facebook'), ('instagram', 'Instagram'), ('linkedin', 'LinkedIn'), ('x', 'X')], max_length=32)),
                ('caption', models.TextField()),
                ('hashtags', models.TextField(blank=True, help_text='Space-joined hashtags')),
                ('image_prompt', models.TextField(blank=True)),
                ('scheduled_at', models.DateTimeField()),
                ('status', models.CharField(choices=[('draft', 'Draft'), ('published', 'Published'), ('failed', 'Failed')], default='draft', max_length=20)),
                ('plan', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='posts', to='content.contentplan')),
            ],
            options={
                'db_table': 'post',
                'ordering': ['scheduled_at', 'id'],
                'indexes': [models.Index(fields=['plan', 'scheduled_at'], name='post_plan_scheduled_idx')],
            },
        ),
    ]
