# forumbackend/group_titles/utils.py
import logging

from django.contrib.auth import get_user_model

from .models import UserProfile, GroupTitleSettings
from .resolver import UserTitleContext, SetTitle, resolve_title

logger = logging.getLogger(__name__)


def find_user(user_id):
    if user_id is None:
        return None
    User = get_user_model()
    return User.objects.select_related('profile', 'profile__primary_group').filter(pk=user_id).first()


def get_profile(user):
    try:
        return user.profile
    except UserProfile.DoesNotExist:
        return None


def build_title_context(user):
    """
    從使用者資料建立 UserTitleContext。
    使用者不存在或沒有 profile 時回傳 None。
    """
    if user is None:
        return None
    profile = get_profile(user)
    if profile is None:
        return None
    group_name = profile.primary_group.name if profile.primary_group_id else None
    return UserTitleContext(
        primary_group_name=group_name,
        trust_level=profile.trust_level,
        current_title=profile.title,
    )


def update_user_title(user):
    """
    依目前的群組稱號設定更新使用者稱號。

    回傳新稱號；沒有變更時回傳 None。寫入失敗的資料庫錯誤會往上拋。
    """
    context = build_title_context(user)
    if context is None:
        return None

    # 每次都重新讀取設定 (django-solo 未開啟快取)
    config = GroupTitleSettings.get_solo()
    decision = resolve_title(context, config.rule_set(), config.enabled)
    if not isinstance(decision, SetTitle):
        return None

    profile = user.profile
    profile.title = decision.title
    profile.save(update_fields=['title'])
    logger.info(f"GroupTitles: Updated title for user {user.username} to '{decision.title}'")
    return decision.title


def promote_user(user, trust_level):
    """Change a user's trust level; saving the profile fires ``user_promoted``."""
    profile = get_profile(user)
    if profile is None:
        profile = UserProfile.objects.create(user=user)
    if profile.trust_level == trust_level:
        return profile
    profile.trust_level = trust_level
    profile.save(update_fields=['trust_level'])
    return profile
