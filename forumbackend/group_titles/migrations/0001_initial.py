from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='GroupTitleSettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('enabled', models.BooleanField(default=False, help_text='全域開關。關閉時不會自動變更任何使用者的稱號。', verbose_name='啟用群組稱號')),
                ('rules', models.TextField(blank=True, default='', help_text='每行一條規則，格式：群組名稱|TL1稱號|TL2稱號|TL3稱號|TL4稱號 (後面的欄位可省略，群組名稱不分大小寫)', verbose_name='稱號規則')),
            ],
            options={
                'verbose_name': '群組稱號設定',
                'verbose_name_plural': '群組稱號設定',
            },
        ),
        migrations.CreateModel(
            name='UserProfile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('trust_level', models.PositiveSmallIntegerField(choices=[(0, 'TL0 新使用者'), (1, 'TL1 基本使用者'), (2, 'TL2 成員'), (3, 'TL3 常客'), (4, 'TL4 領袖')], db_index=True, default=0, verbose_name='信任等級')),
                ('title', models.CharField(blank=True, default='', max_length=100, verbose_name='稱號')),
                ('primary_group', models.ForeignKey(blank=True, help_text='使用者的主要群組，稱號規則依此群組名稱比對', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='primary_profiles', to='auth.group', verbose_name='主要群組')),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': '使用者檔案',
                'verbose_name_plural': '使用者檔案',
            },
        ),
    ]
