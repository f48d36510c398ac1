# forumbackend/group_titles/admin.py

from django.contrib import admin, messages
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth import get_user_model
from solo.admin import SingletonModelAdmin
import logging

from .models import UserProfile, GroupTitleSettings
from .resolver import malformed_rules
from .utils import update_user_title

logger = logging.getLogger(__name__)
User = get_user_model()


# --- UserProfile Inline Admin ---
class UserProfileInline(admin.StackedInline):
    model = UserProfile
    can_delete = False
    verbose_name_plural = '使用者檔案 (群組稱號)'
    fk_name = 'user'
    fields = ('primary_group', 'trust_level', 'title')
# --- ---

# --- User Admin ---
class UserAdmin(BaseUserAdmin):
    inlines = (UserProfileInline,)
    list_display = ('username', 'email', 'is_staff',
                    'get_primary_group_display', 'get_trust_level_display', 'get_title_display')
    list_select_related = ('profile', 'profile__primary_group')
    actions = ['recalculate_group_titles']

    @admin.display(description='主要群組', ordering='profile__primary_group__name')
    def get_primary_group_display(self, instance):
        profile = getattr(instance, 'profile', None)
        if profile and profile.primary_group:
            return profile.primary_group.name
        return '-'

    @admin.display(description='信任等級', ordering='profile__trust_level')
    def get_trust_level_display(self, instance):
        profile = getattr(instance, 'profile', None)
        return f"TL{profile.trust_level}" if profile else '-'

    @admin.display(description='稱號', ordering='profile__title')
    def get_title_display(self, instance):
        profile = getattr(instance, 'profile', None)
        return profile.title if profile and profile.title else '-'

    @admin.action(description='依群組重新計算稱號')
    def recalculate_group_titles(self, request, queryset):
        updated = 0
        failed = 0
        for user in queryset.select_related('profile', 'profile__primary_group'):
            try:
                if update_user_title(user):
                    updated += 1
            except Exception as e:
                failed += 1
                logger.error(f"Error recalculating group title for {user.username}: {e}", exc_info=True)
        if failed:
            self.message_user(request, f"有 {failed} 位使用者的稱號更新失敗，請查看日誌。", messages.ERROR)
        self.message_user(request, f"已更新 {updated} 位使用者的稱號。", messages.SUCCESS)
# --- ---

try:
    admin.site.unregister(User)
except admin.sites.NotRegistered:
    pass
admin.site.register(User, UserAdmin)
# --- User Admin 結束 ---


# --- GroupTitleSettings Admin ---
@admin.register(GroupTitleSettings)
class GroupTitleSettingsAdmin(SingletonModelAdmin):
    fieldsets = (
        (None, {'fields': ('enabled',)}),
        ('稱號規則', {'fields': ('rules',)}),
    )

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        skipped = malformed_rules(obj.rules)
        if skipped:
            # 不阻擋儲存，這些規則在套用時會被略過
            self.message_user(
                request,
                f"以下規則沒有任何稱號欄位，將被略過：{', '.join(skipped)}",
                messages.WARNING
            )
# --- GroupTitleSettings Admin 結束 ---
