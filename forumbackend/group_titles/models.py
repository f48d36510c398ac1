# forumbackend/group_titles/models.py

from django.db import models
from django.conf import settings
from solo.models import SingletonModel

from .resolver import parse_rule_set


# --- UserProfile Model ---
class UserProfile(models.Model):
    TRUST_LEVEL_CHOICES = [
        (0, 'TL0 新使用者'),
        (1, 'TL1 基本使用者'),
        (2, 'TL2 成員'),
        (3, 'TL3 常客'),
        (4, 'TL4 領袖'),
    ]

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='profile')
    primary_group = models.ForeignKey(
        'auth.Group',
        verbose_name="主要群組",
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='primary_profiles',
        help_text="使用者的主要群組，稱號規則依此群組名稱比對"
    )
    trust_level = models.PositiveSmallIntegerField("信任等級", choices=TRUST_LEVEL_CHOICES, default=0, db_index=True)
    title = models.CharField("稱號", max_length=100, blank=True, default='')

    class Meta:
        verbose_name = "使用者檔案"
        verbose_name_plural = "使用者檔案"

    def __str__(self):
        group_name = self.primary_group.name if self.primary_group else "無主要群組"
        title = self.title or "無稱號"
        return f"{self.user.username}'s Profile ({group_name} | TL{self.trust_level} | {title})"
# --- UserProfile Model 結束 ---


# --- GroupTitleSettings Model ---
class GroupTitleSettings(SingletonModel):
    enabled = models.BooleanField(
        "啟用群組稱號",
        default=False,
        help_text="全域開關。關閉時不會自動變更任何使用者的稱號。"
    )
    rules = models.TextField(
        "稱號規則",
        blank=True,
        default='',
        help_text="每行一條規則，格式：群組名稱|TL1稱號|TL2稱號|TL3稱號|TL4稱號 (後面的欄位可省略，群組名稱不分大小寫)"
    )

    class Meta:
        verbose_name = "群組稱號設定"
        verbose_name_plural = "群組稱號設定"

    def __str__(self):
        return "群組稱號設定"

    def rule_set(self):
        return parse_rule_set(self.rules)
# --- GroupTitleSettings Model 結束 ---
