import uuid

import django.db.models.deletion
import django.db.models.functions.text
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='CategoryModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=100, verbose_name='Category name')),
                ('is_default', models.BooleanField(db_index=True, default=False, verbose_name='Default category')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('deleted_at', models.DateTimeField(blank=True, null=True, verbose_name='Deleted at')),
                ('owner', models.ForeignKey(blank=True, help_text='Empty for system categories', null=True, on_delete=django.db.models.deletion.CASCADE, related_name='categories', to=settings.AUTH_USER_MODEL, verbose_name='Owner')),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='children', to='categories.categorymodel', verbose_name='Parent category')),
            ],
            options={
                'verbose_name': 'Category',
                'verbose_name_plural': 'Categories',
                'db_table': 'categories',
                'ordering': ['-is_default', 'name'],
                'base_manager_name': 'all_objects',
                'indexes': [models.Index(fields=['owner', 'parent'], name='idx_categories_owner_parent')],
                'constraints': [
                    models.UniqueConstraint(django.db.models.functions.text.Lower('name'), models.F('owner'), models.F('parent'), condition=models.Q(('deleted_at__isnull', True)), name='uq_categories_name_owner_parent'),
                    models.UniqueConstraint(django.db.models.functions.text.Lower('name'), models.F('owner'), condition=models.Q(('deleted_at__isnull', True), ('parent__isnull', True)), name='uq_categories_name_owner_root'),
                    models.UniqueConstraint(django.db.models.functions.text.Lower('name'), models.F('parent'), condition=models.Q(('deleted_at__isnull', True), ('owner__isnull', True)), name='uq_categories_name_system_parent'),
                    models.UniqueConstraint(django.db.models.functions.text.Lower('name'), condition=models.Q(('deleted_at__isnull', True), ('owner__isnull', True), ('parent__isnull', True)), name='uq_categories_name_system_root'),
                    models.CheckConstraint(condition=models.Q(('is_default', False), ('owner__isnull', True), _connector='OR'), name='ck_categories_default_is_system'),
                    models.CheckConstraint(condition=models.Q(('parent', models.F('id')), _negated=True), name='ck_categories_not_own_parent'),
                ],
            },
        ),
    ]
