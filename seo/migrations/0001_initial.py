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
            name='SeoPage',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('url', models.URLField(max_length=2000)),
                ('title', models.CharField(blank=True, max_length=500)),
                ('h1', models.CharField(blank=True, max_length=500)),
                ('meta_desc', models.TextField(blank=True)),
                ('score', models.PositiveSmallIntegerField(default=0)),
                ('issues', models.JSONField(blank=True, default=list)),
                ('last_checked', models.DateTimeField(blank=True, null=True)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='seo_pages', to='companies.company')),
            ],
            options={
                'db_table': 'seo_page',
                'ordering': ['-last_checked', '-id'],
                'unique_together': {('company', 'url')},
            },
        ),
    ]
